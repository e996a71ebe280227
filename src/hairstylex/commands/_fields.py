"""Shared Click parameters for the record commands.

``add`` commands require every detail field; ``edit`` commands take the
same options as optional overrides and turn them into a ``changes`` dict.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

import click

from hairstylex.domain.ids import parse_id
from hairstylex.domain.tags import parse_tag_list
from hairstylex.domain.types import Gender

_F = TypeVar("_F", bound=Callable[..., Any])


class EntityIdType(click.ParamType):
    """A positive integer record ID."""

    name = "id"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> int:
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            return value
        parsed = parse_id(str(value))
        if parsed is None:
            self.fail(f"{value!r} is not a valid ID (expected a positive integer)", param, ctx)
        return parsed


ENTITY_ID = EntityIdType()

GENDER_CHOICE = click.Choice([g.value for g in Gender], case_sensitive=False)


def detail_options(*, required: bool) -> Callable[[_F], _F]:
    """``--phone/--email/--gender/--tag`` (plus ``--name`` when editing).

    For ``add`` the name is a positional argument, so ``--name`` only
    appears on ``edit`` commands (``required=False``).
    """

    def decorator(func: _F) -> _F:
        func = click.option(
            "--tag",
            "tags",
            multiple=True,
            help="Tag (repeatable; commas split one value into several tags).",
        )(func)
        func = click.option(
            "--gender", type=GENDER_CHOICE, required=required, help="M, F or O."
        )(func)
        func = click.option("--email", required=required, help="Email address.")(func)
        func = click.option("--phone", required=required, help="Phone number (digits).")(func)
        if not required:
            func = click.option("--name", default=None, help="New name.")(func)
        return func

    return decorator


def split_tags(values: Iterable[str]) -> list[str]:
    """Flatten repeated ``--tag`` values, splitting each on commas."""
    tags: list[str] = []
    for value in values:
        tags.extend(parse_tag_list(value))
    return tags


def collect_changes(
    fields: dict[str, Any],
    *,
    tags: Iterable[str] = (),
    clear_tags: bool = False,
    tag_field: str = "tags",
) -> dict[str, Any]:
    """Build an edit ``changes`` dict from option values.

    Options left unset (None) are dropped. ``--tag`` replaces the tag set;
    ``--clear-tags`` empties it.
    """
    changes = {key: value for key, value in fields.items() if value is not None}
    tag_list = split_tags(tags)
    if clear_tags:
        changes[tag_field] = []
    elif tag_list:
        changes[tag_field] = tag_list
    return changes
