from __future__ import annotations

import click

import depcache
from depcache.cli.cmds import restore
from depcache.cli.cmds import save


@click.group(context_settings={"help_option_names": ["-h", "--help"], "max_content_width": 120})
@click.version_option(version=depcache.__version__)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Depcache - Restore and save build dependency caches keyed on manifest content."""


cli.add_command(restore)
cli.add_command(save)


if __name__ == "__main__":
    cli()
