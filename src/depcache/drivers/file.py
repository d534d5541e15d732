"""File-based driver using fsspec."""

from __future__ import annotations

import os
import posixpath
from typing import TYPE_CHECKING

from typing_extensions import override

from depcache.drivers.base import Driver

if TYPE_CHECKING:
    from fsspec import AbstractFileSystem


class FileDriver(Driver):
    """
    File-based implementation of the Driver ABC using fsspec.

    Each key is stored as one file below ``base_path``, which may be a local directory
    or any fsspec URL (``s3://bucket/prefix`` and so on).

    Args:
        base_path: Base directory/prefix for storage.
        fs: Optional fsspec filesystem. If not provided, it is created from the protocol
            of ``base_path``.

    Examples:
        >>> import tempfile
        >>> driver = FileDriver(tempfile.mkdtemp())
        >>> _ = driver.save("cache-primary-key", b"Linux-maven-abc")
        >>> driver.load("cache-primary-key")
        b'Linux-maven-abc'
    """

    def __init__(self, base_path: str, fs: AbstractFileSystem | None = None) -> None:
        from fsspec import filesystem
        from fsspec.utils import get_protocol

        protocol = get_protocol(base_path)
        if "://" not in base_path:
            base_path = os.path.abspath(base_path)
        self.base_path = base_path.rstrip("/")
        self.fs = filesystem(protocol) if fs is None else fs
        self.fs.mkdirs(self.base_path, exist_ok=True)

    def _full_path(self, key: str) -> str:
        if not key or key.startswith("/") or ".." in key.split("/"):
            raise ValueError(f"Invalid storage key: {key!r}")
        return f"{self.base_path}/{key}"

    @override
    def save(self, key: str, data: bytes) -> str:
        path = self._full_path(key)

        parent = posixpath.dirname(path)
        if parent:  # pragma: no branch
            self.fs.mkdirs(parent, exist_ok=True)

        with self.fs.open(path, "wb") as f:
            f.write(data)  # type: ignore

        return path

    @override
    def load(self, key: str) -> bytes:
        path = self._full_path(key)

        if not self.fs.exists(path):
            raise KeyError(f"Key '{key}' not found")

        with self.fs.open(path, "rb") as f:
            return f.read()  # type: ignore[return-value]

    @override
    def exists(self, key: str) -> bool:
        return self.fs.exists(self._full_path(key))

    @override
    def delete(self, key: str) -> None:
        path = self._full_path(key)
        if self.fs.exists(path):
            self.fs.rm(path)

