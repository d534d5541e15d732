"""Driver implementations for reading and writing bytes to persisted-state storage."""

from depcache.drivers.base import Driver
from depcache.drivers.file import FileDriver

__all__ = [
    "Driver",
    "FileDriver",
]
