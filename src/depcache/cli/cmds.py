"""CLI ``restore`` and ``save`` commands."""

from __future__ import annotations

import asyncio

import click

from depcache.cli._shared import backend_option
from depcache.cli._shared import build_coordinator
from depcache.cli._shared import configure_logging
from depcache.cli._shared import home_option
from depcache.cli._shared import platform_option
from depcache.cli._shared import state_dir_option
from depcache.cli._shared import verbose_option
from depcache.cli._shared import workspace_option
from depcache.exceptions import DepcacheError


@click.command()
@click.argument("package_manager")
@backend_option
@state_dir_option
@workspace_option
@platform_option
@home_option
@verbose_option
def restore(
    package_manager: str,
    backend: str | None,
    state_dir: str | None,
    workspace: str | None,
    platform: str | None,
    home: str | None,
    verbose: bool,
) -> None:
    r"""
    Restore the dependency cache before a build.

    PACKAGE_MANAGER is the ecosystem to restore, e.g. 'maven' or 'gradle'.

    Examples:
    \b
    depcache restore maven --backend ci.backends.actions --state-dir /tmp/depcache-state
    """
    configure_logging(verbose)
    coordinator = build_coordinator(backend, state_dir, workspace, platform, home)

    try:
        asyncio.run(coordinator.restore(package_manager))
    except DepcacheError as e:
        raise click.ClickException(str(e)) from e


@click.command()
@click.argument("package_manager", envvar="INPUT_CACHE", required=False, default="")
@backend_option
@state_dir_option
@workspace_option
@platform_option
@home_option
@verbose_option
def save(
    package_manager: str,
    backend: str | None,
    state_dir: str | None,
    workspace: str | None,
    platform: str | None,
    home: str | None,
    verbose: bool,
) -> None:
    r"""
    Save the dependency cache after a build.

    PACKAGE_MANAGER defaults to $INPUT_CACHE; when it is empty nothing is saved.
    Run with the same --state-dir as the preceding restore so unchanged caches are
    not written again.

    Examples:
    \b
    depcache save gradle --backend ci.backends.actions --state-dir /tmp/depcache-state
    """
    configure_logging(verbose)
    if not package_manager:
        click.echo("No package manager specified, not saving cache.")
        return

    coordinator = build_coordinator(backend, state_dir, workspace, platform, home)

    try:
        asyncio.run(coordinator.save(package_manager))
    except DepcacheError as e:
        raise click.ClickException(str(e)) from e
