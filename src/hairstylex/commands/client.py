"""Command group: salon clients (add, edit, delete, list, find, show)."""

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
def client() -> None:
    """Manage salon clients."""


@client.command()
@click.argument("name")
@detail_options(required=True)
@click.option("--address", required=True, help="Home address.")
@click.pass_obj
def add(
    app: AppContext,
    name: str,
    phone: str,
    email: str,
    gender: str,
    tags: tuple[str, ...],
    address: str,
) -> None:
    """Add a client. The next free client ID is assigned."""
    result = app.service(CreateService).add_client(
        name,
        phone=phone,
        email=email,
        gender=gender,
        address=address,
        tags=split_tags(tags),
    )
    app.emit(result)


@client.command()
@click.argument("client_id", metavar="ID", type=ENTITY_ID)
@detail_options(required=False)
@click.option("--address", default=None, help="New address.")
@click.option("--clear-tags", is_flag=True, help="Remove all tags.")
@click.pass_obj
def edit(
    app: AppContext,
    client_id: int,
    name: str | None,
    phone: str | None,
    email: str | None,
    gender: str | None,
    tags: tuple[str, ...],
    address: str | None,
    clear_tags: bool,
) -> None:
    """Edit the client with the given ID. Unspecified fields keep their values."""
    changes = collect_changes(
        {"name": name, "phone": phone, "email": email, "gender": gender, "address": address},
        tags=tags,
        clear_tags=clear_tags,
    )
    app.emit(app.service(UpdateService).edit_client(client_id, changes))


@client.command()
@click.argument("client_id", metavar="ID", type=ENTITY_ID)
@click.pass_obj
def delete(app: AppContext, client_id: int) -> None:
    """Delete the client with the given ID."""
    app.emit(app.service(DeleteService).delete_client(client_id))


@client.command(name="list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all clients (clears any active filter)."""
    app.emit(app.service(QueryService).list_clients())


@client.command()
@click.argument("keywords", nargs=-1)
@click.option("--tag", default=None, help="Only clients carrying this tag.")
@click.pass_obj
def find(app: AppContext, keywords: tuple[str, ...], tag: str | None) -> None:
    """Find clients whose name contains any KEYWORD as a whole word."""
    app.emit(app.service(QueryService).find_clients(keywords, tag=tag))


@client.command()
@click.argument("client_id", metavar="ID", type=ENTITY_ID)
@click.pass_obj
def show(app: AppContext, client_id: int) -> None:
    """Show one client in full."""
    app.emit(app.service(QueryService).get_client(client_id))


attach_examples(
    client,
    {
        "": (
            'hairstylex client add "Alice Tan" --phone 91112222 --email alice@example.com \\',
            '    --gender F --address "Blk 1 Clementi Ave 2" --tag vip',
            "hairstylex client edit 1 --phone 93334444",
            "hairstylex client find alice --tag vip",
            "hairstylex client show 1",
            "hairstylex client delete 1",
        ),
        "add": (
            'hairstylex client add "Alice Tan" --phone 91112222 --email alice@example.com \\',
            '    --gender F --address "Blk 1 Clementi Ave 2"',
            "hairstylex client add Bob --phone 98765432 --email bob@example.com --gender M \\",
            '    --address "12 Kent Ridge" --tag vip --tag colour',
        ),
        "edit": (
            "hairstylex client edit 1 --phone 93334444",
            'hairstylex client edit 2 --name "Bobby Lim" --tag regular',
            "hairstylex client edit 2 --clear-tags",
        ),
        "delete": ("hairstylex client delete 3",),
        "list": ("hairstylex client list", "hairstylex --json client list"),
        "find": (
            "hairstylex client find alice",
            "hairstylex client find alice bob",
            "hairstylex client find --tag vip",
        ),
        "show": ("hairstylex client show 1",),
    },
)
