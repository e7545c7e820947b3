"""Manifest lookups backed by in-memory tables or compiled manifest files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from .errors import ManifestLoadError

MANIFEST_FILENAME = "manifest.json"


class MappingManifest:
    """Manifest lookup over a plain logical-path to digest-path table."""

    def __init__(self, assets: Mapping[str, str]):
        self._assets = dict(assets)

    def __len__(self) -> int:
        return len(self._assets)

    def lookup(self, source_path: str) -> Optional[str]:
        return self._assets.get(source_path)


class JsonManifest(MappingManifest):
    """Manifest lookup loaded from a compiled `manifest.json` file.

    The file holds an `assets` object mapping logical paths to digested
    file names, e.g. ``{"assets": {"app.js": "app-0f3a.js"}, "files": {}}``.
    """

    def __init__(self, assets: Mapping[str, str], *, source_file: str = ""):
        super().__init__(assets)
        self.source_file = source_file

    @classmethod
    def load(
        cls,
        path: str | Path,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> "JsonManifest":
        logger = logger or logging.getLogger("asset_paths.manifest")
        manifest_path = Path(path)
        if not manifest_path.is_file():
            raise ManifestLoadError(f"Manifest file not found: {manifest_path}")

        try:
            with open(manifest_path, "r", encoding="utf-8") as fh:
                raw = json.load(fh)
        except (OSError, ValueError) as error:
            raise ManifestLoadError(
                f"Failed to read manifest {manifest_path}: {error}"
            ) from error

        assets = _assets_table(raw, manifest_path)
        logger.info("Loaded %d manifest entries from %s", len(assets), manifest_path)
        return cls(assets, source_file=str(manifest_path))


def _assets_table(raw: Any, manifest_path: Path) -> dict[str, str]:
    if not isinstance(raw, Mapping):
        raise ManifestLoadError(f"Manifest root must be an object: {manifest_path}")
    assets = raw.get("assets", {})
    if not isinstance(assets, Mapping):
        raise ManifestLoadError(
            f"Manifest 'assets' must be an object: {manifest_path}"
        )
    invalid = [
        key
        for key, value in assets.items()
        if not isinstance(key, str) or not isinstance(value, str)
    ]
    if invalid:
        raise ManifestLoadError(
            f"Manifest 'assets' entries must map strings to strings: {manifest_path}"
        )
    return dict(assets)
