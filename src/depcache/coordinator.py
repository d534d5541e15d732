"""Restore and save of dependency caches keyed on manifest content."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from typing import Any

from typing_extensions import assert_never

from depcache.backends.base import CacheBackend
from depcache.backends.base import SaveFailed
from depcache.backends.base import SaveFailureKind
from depcache.backends.base import SaveResult
from depcache.backends.base import SaveSucceeded
from depcache.backends.base import classify_save_error
from depcache.hashing import hash_files_async
from depcache.hooks.manager import create_hook_manager
from depcache.keys import CacheKey
from depcache.keys import derive_cache_key
from depcache.registry import PackageManager
from depcache.registry import PackageManagerRegistry
from depcache.registry import default_registry
from depcache.settings import CacheSettings
from depcache.state import MemoryStateStore
from depcache.state import PersistedRunState
from depcache.state import StateStore
from depcache.state import read_run_state
from depcache.state import write_run_state

logger = logging.getLogger(__name__)


class SaveOutcome(enum.Enum):
    """What a call to `CacheCoordinator.save` did."""

    SAVED = "saved"
    UNCHANGED = "unchanged"
    RESERVED = "reserved"
    FAILED = "failed"


class CacheCoordinator:
    """
    Restores dependency caches before a build and saves them afterwards.

    ``restore`` derives a key from the package manager's manifest files, asks the backend
    for a matching entry and records what it found. ``save`` derives the key again and
    skips the write when the restored entry already carries that exact key. Cache
    problems never fail the build: only unknown package managers and backend validation
    failures propagate.

    Args:
        backend: Cache-storage service to read from and write to.
        settings: Platform, workspace and home directory for this invocation.
        state_store: Store carrying run state from ``restore`` to ``save``. Defaults to
            an in-memory store, which only works when both run in this process.
        registry: Supported package managers. Defaults to the built-in registry rooted
            at ``settings.home``.
        plugins: Hook implementations notified after each restore and save.
        load_entry_points: Also notify plugins installed under the ``depcache.hooks``
            entry point.
    """

    def __init__(
        self,
        backend: CacheBackend,
        settings: CacheSettings,
        state_store: StateStore | None = None,
        registry: PackageManagerRegistry | None = None,
        plugins: Iterable[Any] = (),
        load_entry_points: bool = False,
    ) -> None:
        self.backend = backend
        self.settings = settings
        self.state_store = state_store if state_store is not None else MemoryStateStore()
        self.registry = registry if registry is not None else default_registry(settings.home)
        self._hooks = create_hook_manager(plugins, load_entry_points=load_entry_points)

    async def restore(self, id: str) -> str | None:
        """
        Restore the dependency cache of a package manager.

        Args:
            id: Package manager identifier, e.g. ``maven`` or ``gradle``.

        Returns:
            The key of the restored entry, or None on a cache miss.

        Raises:
            UnknownPackageManagerError: If ``id`` is not registered.
        """
        package_manager = self.registry.lookup(id)
        key = await self.compute_key(package_manager)
        logger.debug(f"primary key is {key.primary}")

        state = PersistedRunState(primary_key=key.primary)
        write_run_state(self.state_store, state)

        matched_key = await self.backend.restore_cache(
            list(package_manager.artifact_paths), key.primary, list(key.restore_keys)
        )
        if not matched_key:
            logger.info(f"{id} cache is not found")
            self._hooks.hook.after_cache_restore(package_manager=id, key=key, matched_key=None)
            return None

        state.matched_key = matched_key
        write_run_state(self.state_store, state)
        logger.info(f"Cache restored from key: {matched_key}")
        self._hooks.hook.after_cache_restore(package_manager=id, key=key, matched_key=matched_key)
        return matched_key

    async def save(self, id: str) -> SaveOutcome:
        """
        Save the dependency cache of a package manager unless it is unchanged.

        Args:
            id: Package manager identifier, e.g. ``maven`` or ``gradle``.

        Returns:
            The `SaveOutcome` of the attempt.

        Raises:
            UnknownPackageManagerError: If ``id`` is not registered.
            CacheValidationError: Or whichever exception the backend reported for a
                validation failure, unchanged.
        """
        package_manager = self.registry.lookup(id)
        key = await self.compute_key(package_manager, warn_unmatched=False)
        state = read_run_state(self.state_store)

        if state.matched_key == key.primary:
            # no change in target directories
            logger.info(f"Cache hit occurred on the primary key {key.primary}, not saving cache.")
            outcome = SaveOutcome.UNCHANGED
        else:
            result = await self._save_cache(package_manager, key)
            outcome = self._handle_save_result(result)

        self._hooks.hook.after_cache_save(package_manager=id, key=key, outcome=outcome)
        return outcome

    async def compute_key(
        self, package_manager: PackageManager, warn_unmatched: bool = True
    ) -> CacheKey:
        """
        Derive the cache key of ``package_manager`` from its manifest files.

        Args:
            package_manager: Descriptor whose manifest globs are hashed.
            warn_unmatched: Log a warning when no manifest file matched.
        """
        workspace = self.settings.workspace
        file_digest = await hash_files_async(package_manager.manifest_globs, workspace)
        if warn_unmatched and not file_digest.matched:
            globs = ", ".join(package_manager.manifest_globs)
            logger.warning(
                f"No file in {workspace} matched to [{globs}], "
                "make sure you have checked out the target repository"
            )
        return derive_cache_key(self.settings.platform, package_manager.id, file_digest.digest)

    async def _save_cache(self, package_manager: PackageManager, key: CacheKey) -> SaveResult:
        try:
            return await self.backend.save_cache(list(package_manager.artifact_paths), key.primary)
        except Exception as e:
            return classify_save_error(e)

    def _handle_save_result(self, result: SaveResult) -> SaveOutcome:
        if isinstance(result, SaveSucceeded):
            logger.info(f"Cache saved with the key: {result.key}")
            return SaveOutcome.SAVED

        if not isinstance(result, SaveFailed):
            raise TypeError(
                f"Cache backend returned {result!r} from save_cache, "
                "expected SaveSucceeded or SaveFailed"
            )

        if result.kind is SaveFailureKind.VALIDATION:
            raise result.error
        elif result.kind is SaveFailureKind.RESERVATION_CONFLICT:
            logger.info(result.message)
            return SaveOutcome.RESERVED
        elif result.kind is SaveFailureKind.OTHER:
            logger.warning(result.message)
            return SaveOutcome.FAILED
        else:
            assert_never(result.kind)
