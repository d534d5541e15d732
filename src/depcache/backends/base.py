"""Abstract cache-storage backend and the tagged results of its save operation."""

from __future__ import annotations

import abc
import enum
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from depcache.exceptions import CacheValidationError
from depcache.exceptions import ReserveCacheError


class SaveFailureKind(enum.Enum):
    """Classification of a failed cache write."""

    VALIDATION = "validation"
    """Malformed paths or key; a programming or configuration error."""

    RESERVATION_CONFLICT = "reservation_conflict"
    """Another concurrent writer already reserved the key."""

    OTHER = "other"
    """Network errors, backend unavailability, quota issues and the like."""


@dataclass(frozen=True)
class SaveSucceeded:
    """The artifacts were written under the requested key."""

    key: str


@dataclass(frozen=True)
class SaveFailed:
    """The artifacts could not be written."""

    kind: SaveFailureKind
    error: Exception

    @property
    def message(self) -> str:
        return str(self.error)


SaveResult = Union[SaveSucceeded, SaveFailed]


def classify_save_error(error: Exception) -> SaveFailed:
    """
    Map an exception raised by a backend write to its tagged failure.

    Examples:
        >>> classify_save_error(ReserveCacheError("already reserved")).kind
        <SaveFailureKind.RESERVATION_CONFLICT: 'reservation_conflict'>
        >>> classify_save_error(ConnectionError("reset")).kind
        <SaveFailureKind.OTHER: 'other'>
    """
    if isinstance(error, CacheValidationError):
        return SaveFailed(SaveFailureKind.VALIDATION, error)
    if isinstance(error, ReserveCacheError):
        return SaveFailed(SaveFailureKind.RESERVATION_CONFLICT, error)
    return SaveFailed(SaveFailureKind.OTHER, error)


class CacheBackend(abc.ABC):
    """
    Storage service that packs artifact directories under a key and unpacks them again.

    Implementations own transport, blob storage and archive format. A restore miss is
    reported as ``None``, never as an exception. Save failures should be returned as
    `SaveFailed`; exceptions raised from `save_cache` are classified with
    `classify_save_error`.
    """

    @abc.abstractmethod
    async def restore_cache(
        self, paths: Sequence[str], primary_key: str, restore_keys: Sequence[str]
    ) -> str | None:
        """
        Restore the newest entry matching ``primary_key`` or, failing that, ``restore_keys``.

        Args:
            paths: Directories to unpack the cached artifacts into.
            primary_key: Exact key to look up first.
            restore_keys: Fallback keys (prefix matches), in priority order.

        Returns:
            The key of the restored entry, or None on a cache miss.
        """
        ...

    @abc.abstractmethod
    async def save_cache(self, paths: Sequence[str], key: str) -> SaveResult:
        """
        Store the contents of ``paths`` under ``key``.

        Args:
            paths: Directories whose contents are cached.
            key: Key to store the entry under.

        Returns:
            `SaveSucceeded` or a `SaveFailed` describing why the write did not happen.
        """
        ...
