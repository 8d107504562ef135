"""
errors – Typed failures raised by the krabby core.

Every error extends KrabbyError and carries its context as attributes;
the message shown to the user is built once in ``__init__``.  The core
never exits the process itself: callers catch KrabbyError at the
boundary and decide how to report it.
"""

from __future__ import annotations

# Kept here rather than imported from config to avoid a cycle.
_LANGUAGE_HINT = "en, fr, de, ja, zh_hans, zh_hant"


class KrabbyError(RuntimeError):
    """Base error for every failed krabby operation."""


class ConfigurationError(KrabbyError):
    """Settings file is unreadable or holds invalid values."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Configuration error: {detail}")


class DatabaseLoadError(KrabbyError):
    """The pokemon payload could not be decoded."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to load pokemon db: {detail}")


class InvalidPokemonError(KrabbyError):
    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Invalid pokemon `{slug}`")


class InvalidPokemonFormError(KrabbyError):
    """Requested form is neither regular nor listed for the pokemon.

    Attributes:
        slug: The pokemon slug
        form: The raw form token that was requested
    """

    def __init__(self, slug: str, form: str) -> None:
        self.slug = slug
        self.form = form
        super().__init__(f"Invalid form `{form}` for pokemon `{slug}`")


class InvalidLanguageError(KrabbyError):
    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"Invalid language `{language}`, should be one of [{_LANGUAGE_HINT}]")


class InvalidGenerationError(KrabbyError):
    """Generation string failed to parse, or selects nothing.

    Attributes:
        raw: The original string as given by the caller
    """

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Invalid generations `{raw}`, should be an integers between 1 and 9")


class AssetNotFoundError(KrabbyError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Could not read pokemon art from `{key}`")
