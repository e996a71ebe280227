"""Command: stats — record counts and tag usage."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hairstylex.commands._examples import attach_examples
from hairstylex.services.query import QueryService

if TYPE_CHECKING:
    from hairstylex.commands._context import AppContext


@click.command()
@click.pass_obj
def stats(app: AppContext) -> None:
    """Show how many records of each kind exist, plus tag usage."""
    app.emit(app.service(QueryService).stats())


attach_examples(stats, {"": ("hairstylex stats", "hairstylex --json stats")})
