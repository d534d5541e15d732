"""Unit tests for run state stores."""

import pytest

from depcache.drivers import FileDriver
from depcache.state import STATE_CACHE_MATCHED_KEY
from depcache.state import STATE_CACHE_PRIMARY_KEY
from depcache.state import DriverStateStore
from depcache.state import MemoryStateStore
from depcache.state import PersistedRunState
from depcache.state import read_run_state
from depcache.state import write_run_state


@pytest.fixture(params=["memory", "driver"])
def store(request, tmp_path):
    if request.param == "memory":
        return MemoryStateStore()
    return DriverStateStore(str(tmp_path / "state"))


class TestStateStores:
    """Tests shared by all StateStore implementations."""

    def test_missing_name_returns_empty_string(self, store):
        assert store.get_state("nope") == ""

    def test_save_and_get(self, store):
        store.save_state("cache-primary-key", "Linux-maven-abc")
        assert store.get_state("cache-primary-key") == "Linux-maven-abc"

    def test_save_overwrites(self, store):
        store.save_state("cache-primary-key", "first")
        store.save_state("cache-primary-key", "second")
        assert store.get_state("cache-primary-key") == "second"

    def test_delete(self, store):
        store.save_state("cache-matched-key", "k")
        store.delete_state("cache-matched-key")
        assert store.get_state("cache-matched-key") == ""

    def test_delete_unknown_name_is_a_no_op(self, store):
        store.delete_state("never-written")
        assert store.get_state("never-written") == ""


class TestDriverStateStore:
    """Tests for DriverStateStore persistence across instances."""

    def test_state_survives_new_instance(self, tmp_path):
        """A second store over the same directory sees values written by the first."""
        state_dir = str(tmp_path / "state")
        DriverStateStore(state_dir).save_state("cache-matched-key", "Linux-gradle-1")
        assert DriverStateStore(state_dir).get_state("cache-matched-key") == "Linux-gradle-1"

    def test_accepts_driver_instance(self, tmp_path):
        driver = FileDriver(str(tmp_path / "state"))
        store = DriverStateStore(driver)
        store.save_state("cache-primary-key", "k")
        assert driver.load("cache-primary-key") == b"k"

    def test_non_ascii_values(self, tmp_path):
        store = DriverStateStore(str(tmp_path / "state"))
        store.save_state("cache-primary-key", "Linux-maven-é")
        assert store.get_state("cache-primary-key") == "Linux-maven-é"


class TestRunState:
    """Tests for read_run_state() and write_run_state()."""

    def test_read_without_restore_is_empty(self, store):
        assert read_run_state(store) == PersistedRunState()

    def test_write_then_read(self, store):
        write_run_state(store, PersistedRunState(primary_key="p", matched_key="m"))
        assert read_run_state(store) == PersistedRunState(primary_key="p", matched_key="m")
        assert store.get_state(STATE_CACHE_PRIMARY_KEY) == "p"
        assert store.get_state(STATE_CACHE_MATCHED_KEY) == "m"

    def test_empty_fields_clear_previous_values(self, store):
        """Writing a state with an empty field removes the value an earlier write left."""
        write_run_state(store, PersistedRunState(primary_key="old", matched_key="old"))
        write_run_state(store, PersistedRunState(primary_key="new"))
        assert read_run_state(store) == PersistedRunState(primary_key="new")
        assert store.get_state(STATE_CACHE_MATCHED_KEY) == ""
