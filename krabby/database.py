"""
database – In-memory pokemon collection with lookup, filtering and
random selection.

The collection is decoded once from the bundled payload and never mutated
afterwards.  Random selection takes three independent uniform draws from
a ``numpy.random.Generator``:

  1. a pokemon among those in the requested generations
  2. a form among Regular plus that pokemon's non-excluded forms
  3. shininess, ``override or rng.random() < shiny_rate``

Pokemon with many forms are not favoured by step 1.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Sequence

import numpy as np

from krabby.assets import AssetStore, DirectoryAssetStore
from krabby.config import Config
from krabby.errors import InvalidGenerationError, InvalidPokemonError, InvalidPokemonFormError
from krabby.forms import REGULAR, Form
from krabby.generations import Generations
from krabby.pokemon import Pokemon, decode_pokemon
from krabby.renderer import Renderer

logger = logging.getLogger(__name__)


class GenerationFilter:
    """Lazy, re-iterable view of the pokemon in a set of generations."""

    def __init__(self, pokemon: Sequence[Pokemon], generations: Generations) -> None:
        self._pokemon = pokemon
        self._generations = generations

    def __iter__(self) -> Iterator[Pokemon]:
        return (p for p in self._pokemon if p.gen in self._generations)


class PokemonDatabase:
    def __init__(
        self,
        pokemon: Sequence[Pokemon],
        config: Config,
        assets: Optional[AssetStore] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self._pokemon = tuple(pokemon)
        self._by_slug: Dict[str, Pokemon] = {p.slug: p for p in self._pokemon}
        self.config = config
        self.renderer = Renderer(assets if assets is not None else DirectoryAssetStore(), config.language)
        self.rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def load(
        cls,
        payload: bytes,
        config: Config,
        assets: Optional[AssetStore] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> "PokemonDatabase":
        """Decode *payload*; raises DatabaseLoadError if it is malformed."""
        db = cls(decode_pokemon(payload), config, assets=assets, rng=rng)
        logger.debug("Loaded %d pokemon (language=%s, shiny_rate=%s)",
                     len(db), config.language, config.shiny_rate)
        return db

    # ── Queries ──────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._pokemon)

    def get_all(self) -> Sequence[Pokemon]:
        return self._pokemon

    def lookup(self, slug: str) -> Pokemon:
        try:
            return self._by_slug[slug]
        except KeyError:
            raise InvalidPokemonError(slug) from None

    def filter_by_generation(self, generations: Generations) -> GenerationFilter:
        return GenerationFilter(self._pokemon, generations)

    def list_names(self, generations: Generations) -> List[str]:
        return [p.slug for p in self.filter_by_generation(generations)]

    # ── Rendering ────────────────────────────────────────────────────────────

    def render(
        self,
        slug: str,
        form: Form = REGULAR,
        shiny: bool = False,
        show_title: bool = True,
        show_info: bool = False,
        padding_left: int = 0,
    ) -> str:
        pokemon = self.lookup(slug)
        if not pokemon.has_form(form):
            raise InvalidPokemonFormError(slug, form.token)
        return self.renderer.render(
            pokemon, form, shiny,
            show_title=show_title, show_info=show_info, padding_left=padding_left,
        )

    # ── Random selection ─────────────────────────────────────────────────────

    def choose_pokemon(
        self, generations: Generations, rng: Optional[np.random.Generator] = None,
    ) -> Pokemon:
        rng = rng if rng is not None else self.rng
        candidates = list(self.filter_by_generation(generations))
        if not candidates:
            raise InvalidGenerationError(str(generations))
        return candidates[int(rng.integers(len(candidates)))]

    def choose_form(
        self,
        pokemon: Pokemon,
        exclude: Sequence[Form] = (),
        rng: Optional[np.random.Generator] = None,
    ) -> Form:
        rng = rng if rng is not None else self.rng
        candidates = [REGULAR, *pokemon.filtered_forms(list(exclude))]
        return candidates[int(rng.integers(len(candidates)))]

    def roll_shiny(
        self,
        override: bool = False,
        shiny_rate: Optional[float] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> bool:
        rng = rng if rng is not None else self.rng
        rate = self.config.shiny_rate if shiny_rate is None else shiny_rate
        rolled = bool(rng.random() < rate)
        return override or rolled

    def pick_random(
        self,
        generations: Generations,
        exclude: Sequence[Form] = (),
        shiny: bool = False,
        shiny_rate: Optional[float] = None,
        show_title: bool = True,
        show_info: bool = False,
        padding_left: int = 0,
        rng: Optional[np.random.Generator] = None,
    ) -> str:
        """Render a random pokemon from *generations*, honouring *exclude*."""
        pokemon = self.choose_pokemon(generations, rng)
        form = self.choose_form(pokemon, exclude, rng)
        is_shiny = self.roll_shiny(shiny, shiny_rate, rng)
        logger.debug("Random pick: %s form=%s shiny=%s", pokemon.slug, form, is_shiny)
        return self.render(
            pokemon.slug, form, is_shiny,
            show_title=show_title, show_info=show_info, padding_left=padding_left,
        )
