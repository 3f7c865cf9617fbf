"""Static Asset Registry — pre-packaged Sonolus items and files shipped with the server.

Invariants:
    - get_static(path) returns an asset reference {hash, url} where hash is the
      SHA-1 of the file contents (the Sonolus resource hash)
    - get_item(kind, name) returns the parsed <root>/<kind>s/<name>/item.json
    - Results are memoized per process; files are immutable between deploys
    - A missing file is a deployment error and propagates as FileNotFoundError
"""

import hashlib
import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

STATIC_URL_PREFIX = "/sonolus/assets"


def sha1_file(path: Path) -> str:
    """Return hex digest for file contents."""
    h = hashlib.sha1()
    with path.open("rb") as fh:
        for chunk in iter(lambda: fh.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


class StaticAssetRegistry:
    """Reads engine items and static resources from a directory."""

    def __init__(self, root: str | Path, url_prefix: str = STATIC_URL_PREFIX):
        self.root = Path(root)
        self.url_prefix = url_prefix.rstrip("/")
        self._items: dict[tuple[str, str], dict[str, Any]] = {}
        self._statics: dict[str, dict[str, str]] = {}

    def get_item(self, kind: str, name: str) -> dict[str, Any]:
        key = (kind, name)
        if key not in self._items:
            path = self.root / f"{kind}s" / name / "item.json"
            logger.debug(f"Loading {kind} item from {path}")
            self._items[key] = json.loads(path.read_text(encoding="utf-8"))
        return self._items[key]

    def get_static(self, path: str) -> dict[str, str]:
        if path not in self._statics:
            file_path = self.root / path
            self._statics[path] = {
                "hash": sha1_file(file_path),
                "url": f"{self.url_prefix}/{path}",
            }
        return self._statics[path]


# Singleton (initialized on startup)
asset_registry: StaticAssetRegistry | None = None


def init_assets(root: str | Path, **kwargs) -> StaticAssetRegistry:
    global asset_registry
    asset_registry = StaticAssetRegistry(root, **kwargs)
    return asset_registry


def get_asset_registry() -> StaticAssetRegistry:
    """FastAPI dependency for the static asset registry."""
    if not asset_registry:
        raise RuntimeError("Asset registry not initialized")
    return asset_registry
