"""Asset URL resolution across manifests, live pipelines and public files."""

from __future__ import annotations

import logging
import posixpath
import re
from typing import Any, Mapping, Optional, Union

from .config import AssetPathConfig
from .contracts import ResolveOptions
from .errors import AssetPathConfigurationError
from .formatters import FilesystemPathFormatter, PipelinePathFormatter, join_url_path

URI_MATCH = re.compile(r"^[-a-z]+://|^cid:|^//", re.IGNORECASE)

JAVASCRIPT_DEFAULTS = {"dir": "javascripts", "ext": "js"}
STYLESHEET_DEFAULTS = {"dir": "stylesheets", "ext": "css"}
IMAGE_DEFAULTS = {"dir": "images"}

OptionsArg = Union[ResolveOptions, Mapping[str, Any], None]


def is_external_uri(source: str) -> bool:
    return URI_MATCH.match(source) is not None


def append_extension(source: str, ext: Optional[str]) -> str:
    """Append `.ext` when the last path segment has no extension."""
    if not ext:
        return source
    if posixpath.splitext(posixpath.basename(source))[1]:
        return source
    return f"{source}.{ext.lstrip('.')}"


class AssetPathResolver:
    """Computes public URLs for assets.

    Sources are checked in order: external URIs are returned as-is, then the
    manifest, then the live pipeline, and finally the public directory.

    Examples with `app.js` known to the pipeline::

        asset_path("app.js")                 # "/assets/app.js"
        asset_path("app", ext="js")          # "/assets/app.js"
        asset_path("app.js", digest=True)    # "/assets/app-<digest>.js"
        asset_path("app.js", prefix="/t")    # "/t/app.js"

    and for files outside the pipeline::

        asset_path("xmlhr", ext="js")                   # "/xmlhr.js"
        asset_path("dir/xmlhr.js", dir="javascripts")   # "/javascripts/dir/xmlhr.js"
        asset_path("/dir/xmlhr.js", dir="javascripts")  # "/dir/xmlhr.js"
        asset_path("http://example.com/js/xmlhr")       # unchanged
    """

    def __init__(
        self,
        config: AssetPathConfig,
        logger: Optional[logging.Logger] = None,
    ):
        self._config = config
        self._logger = logger or logging.getLogger("asset_paths")
        self._pipeline_formatter = PipelinePathFormatter(config)
        self._filesystem_formatter = FilesystemPathFormatter()

    @property
    def config(self) -> AssetPathConfig:
        return self._config

    def asset_path(
        self,
        source: str,
        options: OptionsArg = None,
        **overrides: Any,
    ) -> str:
        return self._resolve(source, _coerce_options(options, overrides))

    def javascript_path(
        self,
        source: str,
        options: OptionsArg = None,
        **overrides: Any,
    ) -> str:
        """Path to a script; `.js` is appended when there is no extension."""
        opts = _coerce_options(options, overrides).with_defaults(**JAVASCRIPT_DEFAULTS)
        return self._resolve(source, opts)

    def stylesheet_path(
        self,
        source: str,
        options: OptionsArg = None,
        **overrides: Any,
    ) -> str:
        """Path to a stylesheet; `.css` is appended when there is no extension."""
        opts = _coerce_options(options, overrides).with_defaults(**STYLESHEET_DEFAULTS)
        return self._resolve(source, opts)

    def image_path(
        self,
        source: str,
        options: OptionsArg = None,
        **overrides: Any,
    ) -> str:
        opts = _coerce_options(options, overrides).with_defaults(**IMAGE_DEFAULTS)
        return self._resolve(source, opts)

    path_to_asset = asset_path
    path_to_javascript = javascript_path
    path_to_stylesheet = stylesheet_path
    path_to_image = image_path

    def _resolve(self, source: str, options: ResolveOptions) -> str:
        if is_external_uri(source):
            return source
        if not source or not source.strip():
            raise AssetPathConfigurationError("Asset source cannot be empty")

        source = append_extension(source, options.ext)

        if not self._config.has_lookup_backend:
            raise AssetPathConfigurationError(
                f"Cannot resolve {source!r}: no asset manifest or pipeline lookup configured"
            )

        if self._config.manifest is not None:
            entry = self._config.manifest.lookup(source)
            if entry:
                self._logger.debug("Resolved %s from manifest: %s", source, entry)
                prefix = self._pipeline_formatter.effective_prefix(options)
                return join_url_path(prefix, entry)

        if self._config.pipeline_lookup is not None:
            asset = self._config.pipeline_lookup.resolve(source)
            if asset is not None:
                self._logger.debug("Resolved %s from pipeline: %s", source, asset.logical_path)
                return self._pipeline_formatter.format(asset, options)

        self._logger.debug("Resolved %s from public directory", source)
        return self._filesystem_formatter.format(source, options)


def _coerce_options(options: OptionsArg, overrides: Mapping[str, Any]) -> ResolveOptions:
    if options is None:
        resolved = ResolveOptions()
    elif isinstance(options, ResolveOptions):
        resolved = options
    else:
        resolved = ResolveOptions.from_mapping(options)
    return resolved.merged(overrides)
