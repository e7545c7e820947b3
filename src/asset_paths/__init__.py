"""Public URL resolution for pipeline-managed and public-directory assets."""

from .config import AssetPathConfig
from .contracts import ManifestLookup, PipelineAsset, PipelineLookup, ResolveOptions
from .errors import AssetPathConfigurationError, AssetPathError, ManifestLoadError
from .helpers import (
    asset_path,
    configure,
    get_resolver,
    image_path,
    javascript_path,
    reset,
    stylesheet_path,
)
from .manifest import JsonManifest, MappingManifest
from .pipeline import DirectoryPipeline
from .resolver import AssetPathResolver

__all__ = [
    "AssetPathConfig",
    "AssetPathConfigurationError",
    "AssetPathError",
    "AssetPathResolver",
    "DirectoryPipeline",
    "JsonManifest",
    "ManifestLoadError",
    "ManifestLookup",
    "MappingManifest",
    "PipelineAsset",
    "PipelineLookup",
    "ResolveOptions",
    "asset_path",
    "configure",
    "get_resolver",
    "image_path",
    "javascript_path",
    "reset",
    "stylesheet_path",
]
