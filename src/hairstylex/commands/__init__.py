"""Subcommand modules for hairstylex.

Provides register_commands() which uses deferred imports to keep
``hairstylex --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the record groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from hairstylex.commands.client import client
    from hairstylex.commands.hairdresser import hairdresser
    from hairstylex.commands.person import person

    cli.add_command(client)
    cli.add_command(hairdresser)
    cli.add_command(person)

    # --- Standalone commands ---
    from hairstylex.commands.clear import clear
    from hairstylex.commands.shell import shell
    from hairstylex.commands.stats import stats

    cli.add_command(clear)
    cli.add_command(stats)
    cli.add_command(shell)
