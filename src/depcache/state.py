"""Run state shared between the restore and save steps of one invocation."""

from __future__ import annotations

import logging
from abc import ABC
from abc import abstractmethod
from dataclasses import dataclass

from typing_extensions import override

from depcache.drivers.base import Driver

logger = logging.getLogger(__name__)

STATE_CACHE_PRIMARY_KEY = "cache-primary-key"
STATE_CACHE_MATCHED_KEY = "cache-matched-key"


@dataclass
class PersistedRunState:
    """
    Keys recorded by ``restore`` and compared by ``save``.

    Empty strings mean "not recorded", mirroring what a state store returns for
    unknown names.
    """

    primary_key: str = ""
    matched_key: str = ""


class StateStore(ABC):
    """Key-value store scoped to one orchestrator invocation."""

    @abstractmethod
    def save_state(self, name: str, value: str) -> None:
        """Record ``value`` under ``name``, replacing any previous value."""
        ...

    @abstractmethod
    def get_state(self, name: str) -> str:
        """Return the value recorded under ``name``, or an empty string."""
        ...

    @abstractmethod
    def delete_state(self, name: str) -> None:
        """Forget the value recorded under ``name``. Safe to call on unknown names."""
        ...


class MemoryStateStore(StateStore):
    """In-process state store, for orchestrators that restore and save in one process."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    @override
    def save_state(self, name: str, value: str) -> None:
        self._values[name] = value

    @override
    def get_state(self, name: str) -> str:
        return self._values.get(name, "")

    @override
    def delete_state(self, name: str) -> None:
        self._values.pop(name, None)


class DriverStateStore(StateStore):
    """
    State store persisting each name as a UTF-8 blob through a `Driver`.

    Lets the restore and save steps run in separate processes, as pre- and post-build
    steps of a CI job do.

    Examples:
        >>> import tempfile
        >>> store = DriverStateStore(tempfile.mkdtemp())
        >>> store.get_state("cache-matched-key")
        ''
        >>> store.save_state("cache-matched-key", "Linux-maven-abc")
        >>> store.get_state("cache-matched-key")
        'Linux-maven-abc'
    """

    def __init__(self, driver: Driver | str) -> None:
        if isinstance(driver, str):
            from depcache.drivers import FileDriver

            self._driver: Driver = FileDriver(driver)
        else:
            self._driver = driver

    @override
    def save_state(self, name: str, value: str) -> None:
        self._driver.save(name, value.encode("utf-8"))

    @override
    def get_state(self, name: str) -> str:
        if not self._driver.exists(name):
            return ""
        return self._driver.load(name).decode("utf-8")

    @override
    def delete_state(self, name: str) -> None:
        self._driver.delete(name)


def read_run_state(store: StateStore) -> PersistedRunState:
    """Read the run state recorded by a previous restore (empty fields if none)."""
    return PersistedRunState(
        primary_key=store.get_state(STATE_CACHE_PRIMARY_KEY),
        matched_key=store.get_state(STATE_CACHE_MATCHED_KEY),
    )


def write_run_state(store: StateStore, state: PersistedRunState) -> None:
    """
    Replace the run state in ``store`` with ``state``.

    Empty fields are deleted rather than written, so a value left by an earlier run never
    survives into this one.
    """
    for name, value in (
        (STATE_CACHE_PRIMARY_KEY, state.primary_key),
        (STATE_CACHE_MATCHED_KEY, state.matched_key),
    ):
        if value:
            store.save_state(name, value)
        else:
            store.delete_state(name)
    logger.debug(f"Run state recorded: {state}")
