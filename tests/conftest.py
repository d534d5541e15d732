"""Conftest for all pytest configuration - shared fixtures and the backend double."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from depcache.backends import CacheBackend
from depcache.backends import SaveResult
from depcache.backends import SaveSucceeded
from depcache.coordinator import CacheCoordinator
from depcache.settings import CacheSettings
from depcache.state import MemoryStateStore

# Backend double


class RecordingBackend(CacheBackend):
    """In-memory backend that records every call it receives."""

    def __init__(
        self,
        entries: Sequence[str] = (),
        save_result: SaveResult | None = None,
        save_error: Exception | None = None,
    ) -> None:
        self.entries: dict[str, list[str]] = {key: [] for key in entries}
        self.save_result = save_result
        self.save_error = save_error
        self.restore_calls: list[tuple[list[str], str, list[str]]] = []
        self.save_calls: list[tuple[list[str], str]] = []

    async def restore_cache(self, paths, primary_key, restore_keys):
        self.restore_calls.append((list(paths), primary_key, list(restore_keys)))
        if primary_key in self.entries:
            return primary_key
        for prefix in restore_keys:
            candidates = sorted(key for key in self.entries if key.startswith(prefix))
            if candidates:
                return candidates[-1]
        return None

    async def save_cache(self, paths, key):
        self.save_calls.append((list(paths), key))
        if self.save_error is not None:
            raise self.save_error
        if self.save_result is not None:
            return self.save_result
        self.entries[key] = list(paths)
        return SaveSucceeded(key)


# Fixtures


@pytest.fixture
def workspace(tmp_path):
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def settings(tmp_path, workspace):
    return CacheSettings(platform="Linux", workspace=str(workspace), home=str(tmp_path / "home"))


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest.fixture
def state_store():
    return MemoryStateStore()


@pytest.fixture
def coordinator(backend, settings, state_store):
    return CacheCoordinator(backend, settings, state_store=state_store)


@pytest.fixture
def make_backend():
    """Factory for `RecordingBackend` instances with custom entries or save behavior."""
    return RecordingBackend
