"""Shared fixtures for CLI tests."""

from __future__ import annotations

import logging
import sys
import textwrap

import pytest

BACKEND_MODULE_NAME = "depcache_cli_test_backend"

BACKEND_MODULE = """
from depcache.backends import CacheBackend
from depcache.backends import SaveSucceeded


class MemoryBackend(CacheBackend):
    def __init__(self):
        self.entries = {}
        self.save_calls = []
        self.save_error = None

    async def restore_cache(self, paths, primary_key, restore_keys):
        if primary_key in self.entries:
            return primary_key
        for prefix in restore_keys:
            matches = sorted(key for key in self.entries if key.startswith(prefix))
            if matches:
                return matches[-1]
        return None

    async def save_cache(self, paths, key):
        self.save_calls.append(key)
        if self.save_error is not None:
            raise self.save_error
        self.entries[key] = list(paths)
        return SaveSucceeded(key)


BACKEND = MemoryBackend()
"""


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the ``depcache`` logger around each CLI test.

    The commands call ``logging.config.dictConfig``, which sets the ``depcache`` logger
    to ``propagate=False`` and installs a stream handler bound to the runner's captured
    stderr. This would break pytest's ``caplog`` fixture for any later test expecting
    records from ``depcache.*`` loggers to reach the root handler.
    """
    logger = logging.getLogger("depcache")
    saved = (logger.propagate, logger.level, logger.handlers[:])

    yield

    logger.propagate, level, logger.handlers = saved
    logger.setLevel(level)


@pytest.fixture
def backend_module(tmp_path, monkeypatch):
    """Importable module exposing a shared in-memory backend as ``<module>.BACKEND``."""
    module_dir = tmp_path / "modules"
    module_dir.mkdir()
    (module_dir / f"{BACKEND_MODULE_NAME}.py").write_text(textwrap.dedent(BACKEND_MODULE))
    monkeypatch.syspath_prepend(str(module_dir))
    monkeypatch.delitem(sys.modules, BACKEND_MODULE_NAME, raising=False)
    yield BACKEND_MODULE_NAME
    sys.modules.pop(BACKEND_MODULE_NAME, None)


@pytest.fixture
def cli_args(tmp_path, workspace, backend_module):
    """Common options pointing the CLI at the test workspace, state and backend."""
    return [
        "--backend",
        f"{backend_module}.BACKEND",
        "--state-dir",
        str(tmp_path / "state"),
        "--workspace",
        str(workspace),
        "--platform",
        "Linux",
        "--home",
        str(tmp_path / "home"),
    ]
