"""Typed parser for config.toml sections into immutable app settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from app_config_schema import AppConfig, AppConfigurationError, AssetSettings


def parse_app_config(
    raw: Mapping[str, Any],
    *,
    base_dir: Path,
    source_file: str,
) -> AppConfig:
    """Parse raw TOML mappings into strongly typed application settings."""
    assets = _parse_asset_settings(_section(raw, "assets"), base_dir=base_dir)
    return AppConfig(assets=assets, source_file=source_file)


def _parse_asset_settings(
    section: Mapping[str, Any],
    *,
    base_dir: Path,
) -> AssetSettings:
    public_path = _as_str(section.get("public_path", "./public"), "assets.public_path")
    manifest_file = _as_str(section.get("manifest_file", ""), "assets.manifest_file")
    source_dirs = _as_str_list(section.get("source_dirs", []), "assets.source_dirs")
    prefix = section.get("prefix", "/assets")
    if not isinstance(prefix, str):
        raise AppConfigurationError("assets.prefix must be a string.")
    return AssetSettings(
        digest=_as_bool(section.get("digest", False), "assets.digest"),
        prefix=prefix.strip(),
        public_path=_resolve_path(base_dir, public_path or "./public"),
        manifest_file=_resolve_path(base_dir, manifest_file),
        source_dirs=tuple(_resolve_path(base_dir, path) for path in source_dirs),
    )


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    raw = root.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise AppConfigurationError(f"[{name}] must be a table.")
    return raw


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise AppConfigurationError(f"{field} must be a string.")


def _as_str_list(value: Any, field: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        raise AppConfigurationError(f"{field} must be a list of strings.")
    items = []
    for item in value:
        if not isinstance(item, str):
            raise AppConfigurationError(f"{field} must be a list of strings.")
        if item.strip():
            items.append(item.strip())
    return items


def _as_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise AppConfigurationError(f"{field} must be a boolean.")


def _resolve_path(base_dir: Path, raw: str) -> str:
    if not raw:
        return ""
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (base_dir / path).resolve()
    return str(path)
