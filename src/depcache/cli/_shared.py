"""Helpers shared by the CLI commands."""

from __future__ import annotations

import logging
import logging.config

import click

from depcache.backends import load_backend
from depcache.coordinator import CacheCoordinator
from depcache.settings import CacheSettings
from depcache.state import DriverStateStore

LOGGER_NAME = "depcache"
DEFAULT_LOGGER_FORMAT = "%(levelname)s - %(message)s"

backend_option = click.option(
    "--backend",
    "-b",
    envvar="DEPCACHE_BACKEND",
    default=None,
    help="Dotted path to the cache backend (instance, class or factory).",
)
state_dir_option = click.option(
    "--state-dir",
    envvar="DEPCACHE_STATE_DIR",
    default=None,
    help="Directory (or fsspec URL) carrying run state from restore to save.",
)
workspace_option = click.option(
    "--workspace",
    default=None,
    help="Workspace root for manifest globs. Defaults to $GITHUB_WORKSPACE or the cwd.",
)
platform_option = click.option(
    "--platform",
    default=None,
    help="Platform segment of cache keys. Defaults to $RUNNER_OS.",
)
home_option = click.option(
    "--home",
    default=None,
    help="Home directory holding the dependency artifacts. Defaults to $HOME.",
)
verbose_option = click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")


def configure_logging(verbose: bool) -> None:
    """Route ``depcache`` log records to stderr at INFO (or DEBUG when verbose)."""
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"simple": {"format": DEFAULT_LOGGER_FORMAT}},
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "simple",
                    "stream": "ext://sys.stderr",
                }
            },
            "loggers": {
                LOGGER_NAME: {
                    "handlers": ["console"],
                    "level": "DEBUG" if verbose else "INFO",
                    "propagate": False,
                }
            },
        }
    )


def build_coordinator(
    backend: str | None,
    state_dir: str | None,
    workspace: str | None,
    platform: str | None,
    home: str | None,
) -> CacheCoordinator:
    """
    Build a coordinator from CLI options layered over the runner environment.

    Raises:
        click.UsageError: If the backend or state directory is missing.
        click.ClickException: If the backend cannot be loaded.
    """
    if not backend:
        raise click.UsageError("Missing option '--backend' (or $DEPCACHE_BACKEND).")
    if not state_dir:
        raise click.UsageError("Missing option '--state-dir' (or $DEPCACHE_STATE_DIR).")

    try:
        cache_backend = load_backend(backend)
    except (ValueError, ModuleNotFoundError, AttributeError, TypeError) as e:
        raise click.ClickException(str(e)) from e

    defaults = CacheSettings.from_environ()
    settings = CacheSettings(
        platform=platform or defaults.platform,
        workspace=workspace or defaults.workspace,
        home=home or defaults.home,
    )
    return CacheCoordinator(
        cache_backend,
        settings,
        state_store=DriverStateStore(state_dir),
        load_entry_points=True,
    )
