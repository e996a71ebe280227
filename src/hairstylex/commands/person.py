"""Command group: general contacts.

Persons have no ID. ``edit`` and ``delete`` take INDEX, the 1-based row
number shown by the most recent ``person list`` or ``person find``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hairstylex.commands._examples import attach_examples
from hairstylex.commands._fields import collect_changes, detail_options, split_tags
from hairstylex.services.create import CreateService
from hairstylex.services.delete import DeleteService
from hairstylex.services.query import QueryService
from hairstylex.services.update import UpdateService

if TYPE_CHECKING:
    from hairstylex.commands._context import AppContext

_INDEX = click.IntRange(min=1)


@click.group()
def person() -> None:
    """Manage general contacts."""


@person.command()
@click.argument("name")
@detail_options(required=True)
@click.pass_obj
def add(
    app: AppContext,
    name: str,
    phone: str,
    email: str,
    gender: str,
    tags: tuple[str, ...],
) -> None:
    """Add a contact."""
    result = app.service(CreateService).add_person(
        name, phone=phone, email=email, gender=gender, tags=split_tags(tags)
    )
    app.emit(result)


@person.command()
@click.argument("index", type=_INDEX)
@detail_options(required=False)
@click.option("--clear-tags", is_flag=True, help="Remove all tags.")
@click.pass_obj
def edit(
    app: AppContext,
    index: int,
    name: str | None,
    phone: str | None,
    email: str | None,
    gender: str | None,
    tags: tuple[str, ...],
    clear_tags: bool,
) -> None:
    """Edit the contact at INDEX in the displayed list."""
    changes = collect_changes(
        {"name": name, "phone": phone, "email": email, "gender": gender},
        tags=tags,
        clear_tags=clear_tags,
    )
    app.emit(app.service(UpdateService).edit_person(index, changes))


@person.command()
@click.argument("index", type=_INDEX)
@click.pass_obj
def delete(app: AppContext, index: int) -> None:
    """Delete the contact at INDEX in the displayed list."""
    app.emit(app.service(DeleteService).delete_person(index))


@person.command(name="list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all contacts (clears any active filter)."""
    app.emit(app.service(QueryService).list_persons())


@person.command()
@click.argument("keywords", nargs=-1)
@click.option("--tag", default=None, help="Only contacts carrying this tag.")
@click.pass_obj
def find(app: AppContext, keywords: tuple[str, ...], tag: str | None) -> None:
    """Find contacts whose name contains any KEYWORD as a whole word."""
    app.emit(app.service(QueryService).find_persons(keywords, tag=tag))


attach_examples(
    person,
    {
        "": (
            'hairstylex person add "Carol Lee" --phone 87654321 \\',
            "    --email carol@example.com --gender F",
            "hairstylex person list",
            "hairstylex person edit 1 --email carol@work.com",
            "hairstylex person find carol",
            "hairstylex person delete 1",
        ),
        "add": (
            'hairstylex person add "Carol Lee" --phone 87654321 \\',
            "    --email carol@example.com --gender F",
        ),
        "edit": (
            "hairstylex person edit 1 --email carol@work.com",
            "hairstylex person edit 2 --clear-tags",
        ),
        "delete": ("hairstylex person delete 1",),
        "list": ("hairstylex person list",),
        "find": ("hairstylex person find carol", "hairstylex person find --tag family"),
    },
)
