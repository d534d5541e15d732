"""Static registry of supported package managers and their cacheable paths."""

from __future__ import annotations

import os
from collections.abc import Iterable
from collections.abc import Iterator
from dataclasses import dataclass

from depcache.exceptions import UnknownPackageManagerError


@dataclass(frozen=True)
class PackageManager:
    """
    Describes one dependency ecosystem that can be cached.

    Attributes:
        id: Identifier used on the command line and in cache keys (e.g. ``maven``).
        artifact_paths: Absolute directories holding the downloaded dependencies.
        manifest_globs: Glob patterns for the files whose content decides the cache key.
    """

    id: str
    artifact_paths: tuple[str, ...]
    manifest_globs: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Package manager id must be a non-empty string")
        if not self.artifact_paths:
            raise ValueError(f"Package manager '{self.id}' must declare at least one artifact path")
        if not self.manifest_globs:
            raise ValueError(f"Package manager '{self.id}' must declare at least one manifest glob")


class PackageManagerRegistry:
    """
    Fixed mapping from package manager id to its `PackageManager` descriptor.

    Examples:
        >>> registry = default_registry("/home/runner")
        >>> registry.lookup("maven").artifact_paths
        ('/home/runner/.m2/repository',)
        >>> "ant" in registry
        False
    """

    def __init__(self, managers: Iterable[PackageManager]) -> None:
        self._managers: dict[str, PackageManager] = {}
        for manager in managers:
            if manager.id in self._managers:
                raise ValueError(f"Duplicate package manager id: '{manager.id}'")
            self._managers[manager.id] = manager

    @property
    def ids(self) -> tuple[str, ...]:
        """Registered identifiers, in registration order."""
        return tuple(self._managers)

    def lookup(self, id: str) -> PackageManager:
        """
        Resolve a package manager by id.

        Raises:
            UnknownPackageManagerError: If ``id`` is not registered.
        """
        try:
            return self._managers[id]
        except KeyError:
            raise UnknownPackageManagerError(id) from None

    def __contains__(self, id: object) -> bool:
        return id in self._managers

    def __iter__(self) -> Iterator[PackageManager]:
        return iter(self._managers.values())

    def __len__(self) -> int:
        return len(self._managers)


def default_registry(home: str) -> PackageManagerRegistry:
    """Build the registry of built-in package managers rooted at ``home``."""
    return PackageManagerRegistry(
        [
            PackageManager(
                id="maven",
                artifact_paths=(os.path.join(home, ".m2", "repository"),),
                manifest_globs=("**/pom.xml",),
            ),
            PackageManager(
                id="gradle",
                artifact_paths=(
                    os.path.join(home, ".gradle", "caches"),
                    os.path.join(home, ".gradle", "wrapper"),
                ),
                manifest_globs=("**/*.gradle*", "**/gradle-wrapper.properties"),
            ),
        ]
    )
