"""Live pipeline lookup that resolves assets from source directories."""

from __future__ import annotations

import glob
import hashlib
import logging
import posixpath
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional

from .contracts import PipelineAsset


def digest_path_for(logical_path: str, digest: str) -> str:
    """Insert `-<digest>` before the extension of a logical path."""
    stem, ext = posixpath.splitext(logical_path)
    return f"{stem}-{digest}{ext}"


def file_digest(path: Path) -> str:
    """MD5 hex digest of a file, cached until its mtime or size changes."""
    target = path.resolve()
    stat = target.stat()
    return _cached_digest(str(target), stat.st_mtime_ns, stat.st_size)


@lru_cache(maxsize=1024)
def _cached_digest(path: str, mtime_ns: int, size: int) -> str:
    md5 = hashlib.md5()
    with open(path, "rb") as fh:
        for chunk in iter(lambda: fh.read(65536), b""):
            md5.update(chunk)
    return md5.hexdigest()


def clear_digest_cache() -> None:
    _cached_digest.cache_clear()


class DirectoryPipeline:
    """Resolves logical asset paths against an ordered list of load paths.

    Extensionless sources fall back to the first `<name>.<ext>` sibling
    found, so `"application"` resolves to `application.js` when present.
    Logical paths keep the requested names even when files or directories
    under a load path are symlinks.
    Digests are MD5 hex digests of the file content.
    """

    def __init__(
        self,
        load_paths: Iterable[str | Path],
        logger: Optional[logging.Logger] = None,
    ):
        self._load_paths = [Path(path).resolve() for path in load_paths]
        self._logger = logger or logging.getLogger("asset_paths.pipeline")

    @property
    def load_paths(self) -> list[Path]:
        return list(self._load_paths)

    def resolve(self, source_path: str) -> Optional[PipelineAsset]:
        relative = posixpath.normpath(source_path.lstrip("/"))
        if relative in ("", ".", "..") or relative.startswith("../"):
            return None

        for root in self._load_paths:
            candidate = self._find_file(root, relative)
            if candidate is None:
                continue
            logical_path = candidate.relative_to(root).as_posix()
            digest = file_digest(candidate)
            self._logger.debug("Resolved %s to %s in %s", source_path, logical_path, root)
            return PipelineAsset(
                logical_path=logical_path,
                digest_path=digest_path_for(logical_path, digest),
                digest=digest,
            )
        return None

    def _find_file(self, root: Path, relative: str) -> Optional[Path]:
        # `relative` is normalized and cannot climb above `root`.
        candidate = root / relative
        if candidate.is_file():
            return candidate
        if posixpath.splitext(relative)[1]:
            return None

        parent = candidate.parent
        if not parent.is_dir():
            return None
        for sibling in sorted(parent.glob(f"{glob.escape(candidate.name)}.*")):
            if sibling.is_file():
                return sibling
        return None
