"""Hook specifications for dependency cache lifecycle events."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .markers import hook_spec

if TYPE_CHECKING:
    from depcache.coordinator import SaveOutcome
    from depcache.keys import CacheKey


class CacheSpec:
    """Hook specifications for restore and save events."""

    @hook_spec
    def after_cache_restore(
        self, package_manager: str, key: CacheKey, matched_key: str | None
    ) -> None:
        """
        Called after a restore attempt completes.

        Args:
            package_manager: Identifier of the restored package manager.
            key: Cache key derived from the manifest files.
            matched_key: Key of the restored entry, or None on a cache miss.
        """

    @hook_spec
    def after_cache_save(self, package_manager: str, key: CacheKey, outcome: SaveOutcome) -> None:
        """
        Called after a save attempt completes without raising.

        Args:
            package_manager: Identifier of the saved package manager.
            key: Cache key derived from the manifest files.
            outcome: What happened to the cache write.
        """
