"""Abstract base class for byte-level storage backends."""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod


class Driver(ABC):
    """
    Abstract base class for a low-level byte storage driver.

    Drivers persist raw bytes under string keys. They do NOT interpret the bytes; state
    stores built on top of a driver handle encoding.
    """

    @abstractmethod
    def save(self, key: str, data: bytes) -> str:
        """
        Store raw bytes, replacing any previous value.

        Returns:
            The actual path/key where data was stored.
        """
        ...

    @abstractmethod
    def load(self, key: str) -> bytes:
        """
        Load raw bytes.

        Raises:
            KeyError: If key not found.
        """
        ...

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check if a key exists."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete stored data. Safe to call on non-existent keys."""
        ...

