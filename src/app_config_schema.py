"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_CONFIG_FILE = "config.toml"


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class AssetSettings:
    """Asset URL resolution settings from `[assets]`."""
    digest: bool = False
    prefix: str = "/assets"
    public_path: str = "./public"
    manifest_file: str = ""
    source_dirs: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AppConfig:
    """Complete typed runtime configuration loaded from `config.toml`."""
    assets: AssetSettings
    source_file: str
