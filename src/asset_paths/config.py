"""Configuration model for asset path resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .contracts import ManifestLookup, PipelineLookup
from .errors import AssetPathConfigurationError
from .manifest import MANIFEST_FILENAME, JsonManifest
from .pipeline import DirectoryPipeline

DEFAULT_PREFIX = "/assets"
DEFAULT_PUBLIC_PATH = "./public"


@dataclass(frozen=True)
class AssetPathConfig:
    """Process-wide resolver settings, built once at startup."""
    digest: bool = False
    prefix: str = DEFAULT_PREFIX
    public_path: str = DEFAULT_PUBLIC_PATH
    manifest: Optional[ManifestLookup] = None
    pipeline_lookup: Optional[PipelineLookup] = None

    def __post_init__(self) -> None:
        if not isinstance(self.digest, bool):
            raise AssetPathConfigurationError(
                f"digest must be a boolean, got: {self.digest!r}"
            )
        if not isinstance(self.prefix, str):
            raise AssetPathConfigurationError(
                f"prefix must be a string, got: {self.prefix!r}"
            )
        if not isinstance(self.public_path, str) or not self.public_path.strip():
            raise AssetPathConfigurationError("public_path cannot be empty")

    @property
    def has_lookup_backend(self) -> bool:
        return self.manifest is not None or self.pipeline_lookup is not None

    @classmethod
    def from_settings(
        cls,
        settings,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> "AssetPathConfig":
        """Build lookups described by `[assets]` settings.

        An explicit `manifest_file` must exist. Without one, a compiled
        manifest at `<public_path><prefix>/manifest.json` is used if present.
        """
        logger = logger or logging.getLogger("asset_paths")

        manifest = None
        manifest_file = settings.manifest_file
        if manifest_file:
            manifest = JsonManifest.load(manifest_file, logger=logger.getChild("manifest"))
        else:
            default_manifest = _default_manifest_file(settings.public_path, settings.prefix)
            if default_manifest is not None and default_manifest.is_file():
                manifest = JsonManifest.load(
                    default_manifest,
                    logger=logger.getChild("manifest"),
                )

        pipeline_lookup = None
        if settings.source_dirs:
            missing = [path for path in settings.source_dirs if not Path(path).is_dir()]
            if missing:
                raise AssetPathConfigurationError(
                    f"Asset source directories not found: {', '.join(missing)}"
                )
            pipeline_lookup = DirectoryPipeline(
                settings.source_dirs,
                logger=logger.getChild("pipeline"),
            )
            logger.info("Live asset lookup enabled (%d load paths)", len(settings.source_dirs))

        if manifest is None and pipeline_lookup is None:
            logger.warning("No asset manifest or source directories configured")

        return cls(
            digest=settings.digest,
            prefix=settings.prefix,
            public_path=settings.public_path,
            manifest=manifest,
            pipeline_lookup=pipeline_lookup,
        )


def _default_manifest_file(public_path: str, prefix: str) -> Optional[Path]:
    if not public_path or not prefix.startswith("/") or prefix.startswith("//"):
        return None
    return Path(public_path) / prefix.strip("/") / MANIFEST_FILENAME
