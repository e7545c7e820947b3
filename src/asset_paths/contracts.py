"""Lookup protocols and value types shared by the asset path resolver."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Protocol


@dataclass(frozen=True)
class PipelineAsset:
    """Asset handle returned by a live pipeline lookup."""
    logical_path: str
    digest_path: str
    digest: str


class ManifestLookup(Protocol):
    """Protocol for precompiled manifests mapping logical to digested paths."""
    def lookup(self, source_path: str) -> Optional[str]:
        ...


class PipelineLookup(Protocol):
    """Protocol for live asset environments resolving logical paths."""
    def resolve(self, source_path: str) -> Optional[PipelineAsset]:
        ...


@dataclass(frozen=True)
class ResolveOptions:
    """Per-call options; `None` fields defer to defaults or configuration."""
    ext: Optional[str] = None
    dir: Optional[str] = None
    digest: Optional[bool] = None
    prefix: Optional[str] = None
    body: bool = False

    def with_defaults(self, **defaults: Any) -> "ResolveOptions":
        """Fill unset fields from `defaults`; explicitly set fields win."""
        missing = {
            name: value
            for name, value in defaults.items()
            if getattr(self, name) is None
        }
        return replace(self, **missing) if missing else self

    def merged(self, overrides: Mapping[str, Any]) -> "ResolveOptions":
        if not overrides:
            return self
        return replace(self, **_checked(overrides))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "ResolveOptions":
        return cls(**_checked(raw))


_OPTION_NAMES = frozenset(field.name for field in fields(ResolveOptions))


def _checked(raw: Mapping[str, Any]) -> dict[str, Any]:
    unknown = sorted(set(raw) - _OPTION_NAMES)
    if unknown:
        raise TypeError(f"Unknown asset path options: {', '.join(unknown)}")
    return dict(raw)
