"""Print public asset URLs for the configured asset pipeline.

Usage: python src/main.py [asset|javascript|stylesheet|image] SOURCE...
"""

import logging
import os
import sys
from typing import Callable, Optional

from app_config import AppConfigurationError, load_app_config, resolve_config_path
from asset_paths import (
    AssetPathConfig,
    AssetPathConfigurationError,
    AssetPathResolver,
    ManifestLoadError,
)

USAGE = "usage: main.py [asset|javascript|stylesheet|image] SOURCE..."

_KINDS = ("asset", "javascript", "stylesheet", "image")


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    return logging.getLogger("asset_paths_app")


def _log_level() -> int:
    name = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _select_helper(
    resolver: AssetPathResolver,
    kind: str,
) -> Callable[[str], str]:
    return getattr(resolver, f"{kind}_path")


def main(argv: Optional[list[str]] = None) -> int:
    """Resolve each SOURCE and print one URL per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    logger = setup_logging(level=_log_level())

    kind = "asset"
    if args and args[0] in _KINDS:
        kind = args.pop(0)
    if not args:
        print(USAGE, file=sys.stderr)
        return 2

    try:
        config_path = resolve_config_path()
        app_config = load_app_config(str(config_path))
        logger.info("Loaded runtime config: %s", config_path)
    except AppConfigurationError as error:
        logger.error(f"App configuration error: {error}")
        return 1

    try:
        config = AssetPathConfig.from_settings(
            app_config.assets,
            logger=logging.getLogger("asset_paths"),
        )
    except (AssetPathConfigurationError, ManifestLoadError) as error:
        logger.error(f"Asset configuration error: {error}")
        return 1

    resolver = AssetPathResolver(config)
    resolve = _select_helper(resolver, kind)
    for source in args:
        try:
            print(resolve(source))
        except AssetPathConfigurationError as error:
            logger.error(f"Cannot resolve {source!r}: {error}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
