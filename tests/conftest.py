"""
Shared fixtures for the test suite.
"""
import json
import sys
from pathlib import Path

import numpy as np
import pytest

# Ensure project root is importable
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

SAMPLE_RECORDS = [
    {
        "slug": "bulbasaur", "gen": 1,
        "name": {"en": "Bulbasaur", "fr": "Bulbizarre"},
        "desc": {"en": "A strange seed was\nplanted on its back."},
        "forms": [],
    },
    {
        "slug": "charizard", "gen": 1,
        "name": {"en": "Charizard", "fr": "Dracaufeu"},
        "desc": {},
        "forms": ["mega-x", "mega-y", "gmax"],
    },
    {
        "slug": "wooper", "gen": 2,
        "name": {"en": "Wooper"},
        "desc": {"en": "Lives in cold water."},
        "forms": ["paldea"],
    },
    {
        "slug": "groudon", "gen": 3,
        "name": {"en": "Groudon"},
        "desc": {"en": "Personification of the land."},
        "forms": ["primal"],
    },
]

ART = "line one\nline two\nline three"


def art_for(key: str) -> bytes:
    return f"{key}\n{ART}".encode("utf-8")


@pytest.fixture
def sample_payload():
    return json.dumps(SAMPLE_RECORDS).encode("utf-8")


@pytest.fixture
def sample_assets():
    """In-memory store holding regular and shiny art for every sample form."""
    from krabby.assets import MemoryAssetStore, art_key

    store = MemoryAssetStore()
    for record in SAMPLE_RECORDS:
        slugs = [record["slug"]] + [f"{record['slug']}-{f}" for f in record["forms"]]
        for slug in slugs:
            for shiny in (False, True):
                key = art_key(slug, shiny)
                store.add(key, art_for(key))
    return store


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def make_db(sample_payload, sample_assets):
    """Factory building a database over the sample payload."""
    from krabby.config import Config
    from krabby.database import PokemonDatabase

    def _make(language="en", shiny_rate=0.0, seed=1234, payload=None, assets=None):
        return PokemonDatabase.load(
            payload if payload is not None else sample_payload,
            Config(language=language, shiny_rate=shiny_rate),
            assets=assets if assets is not None else sample_assets,
            rng=np.random.default_rng(seed),
        )

    return _make


@pytest.fixture
def db(make_db):
    return make_db()


@pytest.fixture
def bundled_db():
    """The real bundled database and colorscripts, with default settings."""
    from krabby.commands import load_db
    from krabby.config import Config

    return load_db(Config(language="en", shiny_rate=0.0), rng=np.random.default_rng(7))
