"""
renderer – Compose the printable text for one resolved pokemon.

Layout (every line prefixed by ``padding_left`` spaces)::

    Charizard (mega-x)        <- title, omitted with show_title=False
    <description lines>       <- only with show_info and a localized entry
                              <- always exactly one blank separator
    <art lines>

The whole text is built before anything is returned, so a failure never
leaves half a pokemon on the terminal.
"""

from __future__ import annotations

import logging
from typing import List

from krabby.assets import AssetStore, art_key
from krabby.errors import AssetNotFoundError, InvalidLanguageError
from krabby.forms import Form
from krabby.pokemon import Pokemon

logger = logging.getLogger(__name__)


def split_lines(text: str) -> List[str]:
    """Split on "\n" only, dropping a trailing "\r" per line and a final empty line."""
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def pad_lines(text: str, padding_left: int) -> List[str]:
    """Prefix every line of *text* with *padding_left* spaces."""
    pad = " " * padding_left
    return [f"{pad}{line}" for line in split_lines(text)]


class Renderer:
    def __init__(self, assets: AssetStore, language: str) -> None:
        self.assets = assets
        self.language = language

    def asset_key(self, pokemon: Pokemon, form: Form, shiny: bool) -> str:
        return art_key(pokemon.form_slug(form), shiny)

    def load_art(self, key: str) -> str:
        data = self.assets.get(key)
        if data is None:
            raise AssetNotFoundError(key)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Asset %s is not valid UTF-8, replacing bad bytes", key)
            return data.decode("utf-8", errors="replace")

    def render(
        self,
        pokemon: Pokemon,
        form: Form,
        shiny: bool,
        show_title: bool = True,
        show_info: bool = False,
        padding_left: int = 0,
    ) -> str:
        key = self.asset_key(pokemon, form, shiny)

        name = pokemon.localized_name(self.language)
        if name is None:
            raise InvalidLanguageError(self.language)

        art = self.load_art(key)

        lines: List[str] = []
        if show_title:
            title = name if form.is_regular else f"{name} ({form.token})"
            lines.extend(pad_lines(title, padding_left))
        if show_info:
            description = pokemon.localized_desc(self.language)
            if description is not None:
                lines.extend(pad_lines(description, padding_left))
        lines.append("")
        lines.extend(pad_lines(art, padding_left))
        return "\n".join(lines)
