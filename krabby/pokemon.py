"""
pokemon – Immutable pokemon records and payload decoding.

The payload is a UTF-8 JSON array of records::

    {"slug": "charizard", "gen": 1,
     "name": {"en": "Charizard", ...},
     "desc": {"en": "...", ...},
     "forms": ["mega-x", "mega-y", "gmax"]}

Regular is implicit for every species; a "regular" entry in ``forms`` is
accepted and dropped.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple

from krabby.config import GENERATION_MAX, GENERATION_MIN
from krabby.errors import DatabaseLoadError, InvalidPokemonFormError
from krabby.forms import Form, filter_forms

logger = logging.getLogger(__name__)

_REQUIRED_KEYS = ("slug", "gen", "name", "desc", "forms")


@dataclass(frozen=True)
class Pokemon:
    slug: str
    gen: int
    name: Mapping[str, str] = field(hash=False)
    desc: Mapping[str, str] = field(hash=False)
    forms: Tuple[Form, ...] = ()

    def has_form(self, form: Form) -> bool:
        return form.is_regular or form in self.forms

    def filtered_forms(self, exclude: List[Form]) -> List[Form]:
        """All listed forms except those matched by *exclude*."""
        return filter_forms(self.forms, exclude)

    def form_slug(self, form: Form) -> str:
        """``slug`` for Regular, ``slug-form`` otherwise."""
        if form.is_regular:
            return self.slug
        if form in self.forms:
            return f"{self.slug}-{form.token}"
        raise InvalidPokemonFormError(self.slug, form.token)

    def localized_name(self, language: str) -> Optional[str]:
        return self.name.get(language)

    def localized_desc(self, language: str) -> Optional[str]:
        return self.desc.get(language)


# ── Payload decoding ─────────────────────────────────────────────────────────

def _string_map(value: Any, field_name: str, index: int) -> Mapping[str, str]:
    if not isinstance(value, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise DatabaseLoadError(f"record {index}: '{field_name}' must map strings to strings")
    return MappingProxyType(dict(value))


def _decode_record(raw: Any, index: int) -> Pokemon:
    if not isinstance(raw, dict):
        raise DatabaseLoadError(f"record {index} is not an object")
    missing = [key for key in _REQUIRED_KEYS if key not in raw]
    if missing:
        raise DatabaseLoadError(f"record {index} is missing {', '.join(missing)}")

    slug = raw["slug"]
    if not isinstance(slug, str) or not slug:
        raise DatabaseLoadError(f"record {index}: 'slug' must be a non-empty string")

    gen = raw["gen"]
    if isinstance(gen, bool) or not isinstance(gen, int) or not GENERATION_MIN <= gen <= GENERATION_MAX:
        raise DatabaseLoadError(f"{slug}: 'gen' must be an integer between 1 and 9, got {gen!r}")

    tokens = raw["forms"]
    if not isinstance(tokens, list) or not all(isinstance(t, str) for t in tokens):
        raise DatabaseLoadError(f"{slug}: 'forms' must be an array of strings")

    forms: List[Form] = []
    for token in tokens:
        form = Form.parse(token)
        if form.is_regular:
            continue
        if form in forms:
            raise DatabaseLoadError(f"{slug}: duplicate form '{token}'")
        forms.append(form)

    return Pokemon(
        slug=slug,
        gen=gen,
        name=_string_map(raw["name"], "name", index),
        desc=_string_map(raw["desc"], "desc", index),
        forms=tuple(forms),
    )


def decode_pokemon(payload: bytes) -> List[Pokemon]:
    """Decode the JSON payload into records, preserving order."""
    try:
        records = json.loads(payload.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise DatabaseLoadError(f"invalid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DatabaseLoadError(str(exc)) from exc

    if not isinstance(records, list):
        raise DatabaseLoadError("top level must be an array of pokemon")

    pokemon: List[Pokemon] = []
    seen = set()
    for index, raw in enumerate(records):
        entry = _decode_record(raw, index)
        if entry.slug in seen:
            raise DatabaseLoadError(f"duplicate slug '{entry.slug}'")
        seen.add(entry.slug)
        pokemon.append(entry)

    logger.debug("Decoded %d pokemon records", len(pokemon))
    return pokemon
