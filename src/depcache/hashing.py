"""Glob matching and content hashing of dependency manifest files."""

from __future__ import annotations

import asyncio
import hashlib
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from pathlib import PurePath

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class FileDigest:
    """Result of hashing the files matched by a set of glob patterns."""

    digest: str
    """SHA256 hex digest over the matched files (digest of empty input if none matched)."""

    files: tuple[str, ...]
    """Workspace-relative POSIX paths of the hashed files, in hashing order."""

    @property
    def matched(self) -> bool:
        return bool(self.files)


def find_files(patterns: Iterable[str], workspace: str | Path) -> list[Path]:
    """
    Find regular files under ``workspace`` matched by ``patterns``.

    Patterns are relative to the workspace and ``**`` matches zero or more directories.
    A pattern starting with ``!`` removes previously matched files. Blank patterns and
    ``#`` comments are ignored. Files resolving outside the workspace are skipped.

    Args:
        patterns: Glob patterns, evaluated in order.
        workspace: Root directory for the patterns.

    Returns:
        Matched files sorted by workspace-relative POSIX path.

    Examples:
        >>> import tempfile
        >>> root = Path(tempfile.mkdtemp())
        >>> _ = (root / "pom.xml").write_text("<project />")
        >>> [p.name for p in find_files(["**/pom.xml"], root)]
        ['pom.xml']
    """
    root = Path(workspace).resolve()
    matched: dict[str, Path] = {}

    for raw in patterns:
        pattern = raw.strip()
        if not pattern or pattern.startswith("#"):
            continue

        exclude = pattern.startswith("!")
        if exclude:
            pattern = pattern[1:].strip()

        for path in root.glob(_relative_pattern(pattern, root)):
            if not path.is_file():
                continue

            resolved = path.resolve()
            if not resolved.is_relative_to(root):
                logger.debug(f"Ignoring '{path}', it is outside of the workspace '{root}'")
                continue

            relative = path.relative_to(root).as_posix()
            if exclude:
                matched.pop(relative, None)
            else:
                matched[relative] = path

    return [matched[key] for key in sorted(matched)]


def hash_files(patterns: Iterable[str], workspace: str | Path) -> FileDigest:
    """
    Hash the content of every file matched by ``patterns``.

    The digest is a SHA256 over the SHA256 digests of each matched file, taken in
    workspace-relative path order, so the same file contents always produce the same
    digest regardless of filesystem iteration order.

    Args:
        patterns: Glob patterns relative to ``workspace``.
        workspace: Root directory for the patterns.

    Returns:
        A `FileDigest` holding the digest and the hashed files.

    Examples:
        >>> import tempfile
        >>> empty = hash_files(["**/pom.xml"], tempfile.mkdtemp())
        >>> empty.matched
        False
        >>> empty.digest == hashlib.sha256().hexdigest()
        True
    """
    root = Path(workspace).resolve()
    result = hashlib.sha256()
    files: list[str] = []

    for path in find_files(patterns, root):
        relative = path.relative_to(root).as_posix()
        logger.debug(f"Hashing '{relative}'")
        result.update(_file_sha256(path))
        files.append(relative)

    return FileDigest(digest=result.hexdigest(), files=tuple(files))


async def hash_files_async(patterns: Iterable[str], workspace: str | Path) -> FileDigest:
    """Run `hash_files` in a worker thread so the event loop is not blocked on file reads."""
    return await asyncio.to_thread(hash_files, tuple(patterns), workspace)


def _file_sha256(path: Path) -> bytes:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
            h.update(chunk)
    return h.digest()


def _relative_pattern(pattern: str, root: Path) -> str:
    """Make an absolute pattern relative to ``root`` (pathlib only globs relative patterns)."""
    path = PurePath(pattern)
    if not path.is_absolute():
        return pattern
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        raise ValueError(f"Pattern '{pattern}' is outside of the workspace '{root}'") from None
