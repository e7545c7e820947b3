"""Module-level helpers bound to a default resolver configured at startup."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .config import AssetPathConfig
from .errors import AssetPathConfigurationError
from .resolver import AssetPathResolver, OptionsArg

_default_resolver: Optional[AssetPathResolver] = None


def configure(
    config: Optional[AssetPathConfig] = None,
    *,
    logger: Optional[logging.Logger] = None,
    **fields: Any,
) -> AssetPathResolver:
    """Install the default resolver used by the module-level helpers.

    Pass a ready `AssetPathConfig`, or its fields as keyword arguments
    (`digest`, `prefix`, `public_path`, `manifest`, `pipeline_lookup`).
    """
    global _default_resolver
    if config is not None and fields:
        raise TypeError("Pass either an AssetPathConfig or config fields, not both")
    resolver = AssetPathResolver(config or AssetPathConfig(**fields), logger=logger)
    _default_resolver = resolver
    return resolver


def reset() -> None:
    global _default_resolver
    _default_resolver = None


def get_resolver() -> AssetPathResolver:
    if _default_resolver is None:
        raise AssetPathConfigurationError(
            "Asset paths are not configured; call asset_paths.configure() at startup"
        )
    return _default_resolver


def asset_path(source: str, options: OptionsArg = None, **overrides: Any) -> str:
    return get_resolver().asset_path(source, options, **overrides)


def javascript_path(source: str, options: OptionsArg = None, **overrides: Any) -> str:
    return get_resolver().javascript_path(source, options, **overrides)


def stylesheet_path(source: str, options: OptionsArg = None, **overrides: Any) -> str:
    return get_resolver().stylesheet_path(source, options, **overrides)


def image_path(source: str, options: OptionsArg = None, **overrides: Any) -> str:
    return get_resolver().image_path(source, options, **overrides)
