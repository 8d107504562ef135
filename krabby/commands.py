"""
commands – The three operations the command line exposes.

Each returns the text to print; errors propagate as KrabbyError.  A
database can be passed in, otherwise the bundled one is loaded with the
user's settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import numpy as np

from krabby.assets import DirectoryAssetStore
from krabby.config import ASSETS_DIR, DATABASE_FILE, Config, load_config
from krabby.database import PokemonDatabase
from krabby.errors import DatabaseLoadError
from krabby.forms import REGULAR, Form, exclusion_groups
from krabby.generations import Generations


@dataclass
class PokemonOptions:
    info: bool = False
    shiny: bool = False
    no_title: bool = False
    padding_left: int = 0


@dataclass
class NameOptions:
    name: str
    form: Form = REGULAR
    common: PokemonOptions = field(default_factory=PokemonOptions)


@dataclass
class RandomOptions:
    generations: Generations = field(default_factory=Generations.all)
    no_mega: bool = False
    no_gmax: bool = False
    no_regional: bool = False
    no_variant: bool = False
    common: PokemonOptions = field(default_factory=PokemonOptions)

    def excluded_forms(self) -> List[Form]:
        return exclusion_groups(
            no_mega=self.no_mega,
            no_gmax=self.no_gmax,
            no_regional=self.no_regional,
            no_variant=self.no_variant,
        )


def load_db(
    config: Optional[Config] = None,
    *,
    database_file: Path = DATABASE_FILE,
    assets_dir: Path = ASSETS_DIR,
    rng: Optional[np.random.Generator] = None,
) -> PokemonDatabase:
    """Load the bundled pokemon database."""
    config = config if config is not None else load_config()
    try:
        payload = database_file.read_bytes()
    except OSError as exc:
        raise DatabaseLoadError(f"cannot read {database_file}: {exc}") from exc
    return PokemonDatabase.load(payload, config, assets=DirectoryAssetStore(assets_dir), rng=rng)


def list_pokemon(generations: Generations, db: Optional[PokemonDatabase] = None) -> str:
    db = db if db is not None else load_db()
    return "\n".join(db.list_names(generations))


def pokemon_by_name(options: NameOptions, db: Optional[PokemonDatabase] = None) -> str:
    db = db if db is not None else load_db()
    common = options.common
    return db.render(
        options.name,
        options.form,
        common.shiny,
        show_title=not common.no_title,
        show_info=common.info,
        padding_left=common.padding_left,
    )


def random_pokemon(options: RandomOptions, db: Optional[PokemonDatabase] = None) -> str:
    db = db if db is not None else load_db()
    common = options.common
    return db.pick_random(
        options.generations,
        options.excluded_forms(),
        shiny=common.shiny,
        show_title=not common.no_title,
        show_info=common.info,
        padding_left=common.padding_left,
    )
