"""
Centralized exception classes for the depcache library.

All depcache-specific exceptions inherit from DepcacheError for easy catching.
"""


class DepcacheError(Exception):
    """Base exception for all depcache errors."""


class UnknownPackageManagerError(DepcacheError):
    """Raised when a package manager identifier is not registered."""

    def __init__(self, package_manager: str) -> None:
        super().__init__(f"unknown package manager specified: {package_manager}")
        self.package_manager = package_manager


class CacheBackendError(DepcacheError):
    """Base exception for failures reported by a cache-storage backend."""


class CacheValidationError(CacheBackendError):
    """Raised when a backend rejects its inputs (malformed paths or key)."""


class ReserveCacheError(CacheBackendError):
    """Raised when another writer has already reserved the cache key."""
