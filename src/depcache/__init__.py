"""Depcache: dependency-cache restore and save keyed on build manifest content."""

__version__ = "0.1.0"

from .backends import CacheBackend
from .coordinator import CacheCoordinator
from .coordinator import SaveOutcome
from .exceptions import UnknownPackageManagerError
from .registry import PackageManager
from .registry import PackageManagerRegistry
from .registry import default_registry
from .settings import CacheSettings

__all__ = [
    "CacheBackend",
    "CacheCoordinator",
    "CacheSettings",
    "PackageManager",
    "PackageManagerRegistry",
    "SaveOutcome",
    "UnknownPackageManagerError",
    "default_registry",
]
