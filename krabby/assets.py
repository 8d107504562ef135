"""
assets – Keyed lookup of pre-rendered colorscripts.

Keys follow ``colorscripts/{regular|shiny}/{slug}[-{form}]``.  A store
returns the raw bytes for a key, or ``None`` when it has no such entry;
turning a miss into an error is the caller's job.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Dict, Mapping, Optional, Protocol

from krabby.config import ASSETS_DIR

logger = logging.getLogger(__name__)

COLORSCRIPTS_PREFIX = "colorscripts"


def art_key(form_slug: str, shiny: bool) -> str:
    return f"{COLORSCRIPTS_PREFIX}/{'shiny' if shiny else 'regular'}/{form_slug}"


class AssetStore(Protocol):
    def get(self, key: str) -> Optional[bytes]:
        ...


class DirectoryAssetStore:
    """Serve assets from files under *root* (default: the bundled assets)."""

    def __init__(self, root: Path = ASSETS_DIR) -> None:
        self.root = root

    def _resolve(self, key: str) -> Optional[Path]:
        parts = PurePosixPath(key).parts
        if not parts or any(p in ("..", "") or p.startswith("/") for p in parts):
            return None
        return self.root.joinpath(*parts)

    def get(self, key: str) -> Optional[bytes]:
        path = self._resolve(key)
        if path is None or not path.is_file():
            logger.debug("Asset miss: %s", key)
            return None
        return path.read_bytes()


class MemoryAssetStore:
    """Dictionary-backed store, handy for tests and embedding."""

    def __init__(self, assets: Optional[Mapping[str, bytes]] = None) -> None:
        self._assets: Dict[str, bytes] = dict(assets or {})

    def add(self, key: str, data: bytes) -> None:
        self._assets[key] = data

    def get(self, key: str) -> Optional[bytes]:
        data = self._assets.get(key)
        if data is None:
            logger.debug("Asset miss: %s", key)
        return data

    def __len__(self) -> int:
        return len(self._assets)
