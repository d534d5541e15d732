"""Cache-storage backend interface."""

from depcache.backends.base import CacheBackend
from depcache.backends.base import SaveFailed
from depcache.backends.base import SaveFailureKind
from depcache.backends.base import SaveResult
from depcache.backends.base import SaveSucceeded
from depcache.backends.base import classify_save_error
from depcache.backends.loading import load_backend

__all__ = [
    "CacheBackend",
    "SaveFailed",
    "SaveFailureKind",
    "SaveResult",
    "SaveSucceeded",
    "classify_save_error",
    "load_backend",
]
