"""Command group: salon staff (add, edit, delete, list, find, show)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hairstylex.commands._examples import attach_examples
from hairstylex.commands._fields import ENTITY_ID, collect_changes, detail_options, split_tags
from hairstylex.services.create import CreateService
from hairstylex.services.delete import DeleteService
from hairstylex.services.query import QueryService
from hairstylex.services.update import UpdateService

if TYPE_CHECKING:
    from hairstylex.commands._context import AppContext


@click.group()
def hairdresser() -> None:
    """Manage hairdressers."""


@hairdresser.command()
@click.argument("name")
@detail_options(required=True)
@click.option("--title", required=True, help="Job title.")
@click.option(
    "--specialisation",
    "specialisations",
    multiple=True,
    help="Specialisation (repeatable; commas split one value).",
)
@click.pass_obj
def add(
    app: AppContext,
    name: str,
    phone: str,
    email: str,
    gender: str,
    tags: tuple[str, ...],
    title: str,
    specialisations: tuple[str, ...],
) -> None:
    """Add a hairdresser. The next free hairdresser ID is assigned."""
    result = app.service(CreateService).add_hairdresser(
        name,
        phone=phone,
        email=email,
        gender=gender,
        title=title,
        specialisations=split_tags(specialisations),
        tags=split_tags(tags),
    )
    app.emit(result)


@hairdresser.command()
@click.argument("hairdresser_id", metavar="ID", type=ENTITY_ID)
@detail_options(required=False)
@click.option("--title", default=None, help="New job title.")
@click.option(
    "--specialisation",
    "specialisations",
    multiple=True,
    help="Replace the specialisations (repeatable).",
)
@click.option("--clear-tags", is_flag=True, help="Remove all tags.")
@click.option("--clear-specialisations", is_flag=True, help="Remove all specialisations.")
@click.pass_obj
def edit(
    app: AppContext,
    hairdresser_id: int,
    name: str | None,
    phone: str | None,
    email: str | None,
    gender: str | None,
    tags: tuple[str, ...],
    title: str | None,
    specialisations: tuple[str, ...],
    clear_tags: bool,
    clear_specialisations: bool,
) -> None:
    """Edit the hairdresser with the given ID."""
    changes = collect_changes(
        {"name": name, "phone": phone, "email": email, "gender": gender, "title": title},
        tags=tags,
        clear_tags=clear_tags,
    )
    changes.update(
        collect_changes(
            {},
            tags=specialisations,
            clear_tags=clear_specialisations,
            tag_field="specialisations",
        )
    )
    app.emit(app.service(UpdateService).edit_hairdresser(hairdresser_id, changes))


@hairdresser.command()
@click.argument("hairdresser_id", metavar="ID", type=ENTITY_ID)
@click.pass_obj
def delete(app: AppContext, hairdresser_id: int) -> None:
    """Delete the hairdresser with the given ID."""
    app.emit(app.service(DeleteService).delete_hairdresser(hairdresser_id))


@hairdresser.command(name="list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all hairdressers (clears any active filter)."""
    app.emit(app.service(QueryService).list_hairdressers())


@hairdresser.command()
@click.argument("keywords", nargs=-1)
@click.option("--tag", default=None, help="Only hairdressers carrying this tag.")
@click.option("--specialisation", default=None, help="Only hairdressers with this specialisation.")
@click.pass_obj
def find(
    app: AppContext,
    keywords: tuple[str, ...],
    tag: str | None,
    specialisation: str | None,
) -> None:
    """Find hairdressers by name keyword, tag, or specialisation."""
    result = app.service(QueryService).find_hairdressers(
        keywords, tag=tag, specialisation=specialisation
    )
    app.emit(result)


@hairdresser.command()
@click.argument("hairdresser_id", metavar="ID", type=ENTITY_ID)
@click.pass_obj
def show(app: AppContext, hairdresser_id: int) -> None:
    """Show one hairdresser in full."""
    app.emit(app.service(QueryService).get_hairdresser(hairdresser_id))


attach_examples(
    hairdresser,
    {
        "": (
            'hairstylex hairdresser add "Ben Ong" --phone 81234567 --email ben@example.com \\',
            '    --gender M --title "Senior Stylist" --specialisation perm --specialisation colour',
            'hairstylex hairdresser edit 1 --title "Art Director"',
            "hairstylex hairdresser find --specialisation colour",
            "hairstylex hairdresser show 1",
        ),
        "add": (
            'hairstylex hairdresser add "Ben Ong" --phone 81234567 --email ben@example.com \\',
            '    --gender M --title "Senior Stylist" --specialisation perm,colour',
        ),
        "edit": (
            'hairstylex hairdresser edit 1 --title "Art Director"',
            "hairstylex hairdresser edit 1 --specialisation balayage",
            "hairstylex hairdresser edit 1 --clear-specialisations",
        ),
        "delete": ("hairstylex hairdresser delete 2",),
        "list": ("hairstylex hairdresser list",),
        "find": (
            "hairstylex hairdresser find ben",
            "hairstylex hairdresser find --specialisation colour",
            "hairstylex hairdresser find ben --tag weekend",
        ),
        "show": ("hairstylex hairdresser show 1",),
    },
)
