"""Command: clear — remove every record of every kind."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hairstylex.commands._examples import attach_examples
from hairstylex.services.delete import DeleteService

if TYPE_CHECKING:
    from hairstylex.commands._context import AppContext


@click.command()
@click.option("-y", "--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_obj
def clear(app: AppContext, yes: bool) -> None:
    """Delete all persons, clients, and hairdressers."""
    if not yes:
        if not app.interactive:
            msg = "Refusing to clear without --yes in non-interactive mode"
            raise click.UsageError(msg)
        click.confirm("Delete every person, client, and hairdresser?", abort=True)
    app.emit(app.service(DeleteService).clear())


attach_examples(
    clear,
    {"": ("hairstylex clear", "hairstylex clear --yes", "hairstylex --no-interact clear --yes")},
)
