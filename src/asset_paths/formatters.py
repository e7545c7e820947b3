"""Path formatting for pipeline-managed and public-directory assets."""

from __future__ import annotations

import re

from .config import AssetPathConfig
from .contracts import PipelineAsset, ResolveOptions

BODY_QUERY = "?body=1"

_REPEATED_SLASHES = re.compile(r"/{2,}")


def join_url_path(prefix: str, path: str) -> str:
    """Join two URL segments with exactly one slash between them."""
    return f"{prefix.rstrip('/')}/{path.lstrip('/')}"


class PipelinePathFormatter:
    """Formats URLs for assets resolved by a manifest or live pipeline."""

    def __init__(self, config: AssetPathConfig):
        self._config = config

    def effective_prefix(self, options: ResolveOptions) -> str:
        if options.prefix is not None:
            return options.prefix
        return self._config.prefix

    def format(self, asset: PipelineAsset, options: ResolveOptions) -> str:
        digest = options.digest if options.digest is not None else self._config.digest
        path = asset.digest_path if digest else asset.logical_path
        url = join_url_path(self.effective_prefix(options), path)
        if options.body:
            url += BODY_QUERY
        return url


class FilesystemPathFormatter:
    """Formats URLs for files served straight from the public directory."""

    def format(self, source: str, options: ResolveOptions) -> str:
        if source.startswith("/"):
            path = source
        elif options.dir:
            path = f"/{options.dir}/{source}"
        else:
            path = f"/{source}"
        return _REPEATED_SLASHES.sub("/", path)
