"""``--examples`` flags, attached once a command tree is built.

Each command module keeps one table from subcommand name to example lines
(``""`` for the group or command itself) and hands it to
:func:`attach_examples`. ``--help`` stays short, and ``--examples`` prints
the lines and exits before arguments are checked or the data file opened.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence

import click

ExampleTable = Mapping[str, Sequence[str]]


def _printer(lines: Sequence[str]) -> Callable[[click.Context, click.Parameter, bool], None]:
    def callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        for line in lines:
            click.echo(f"  {line}")
        ctx.exit(0)

    return callback


def attach_examples(command: click.Command, table: ExampleTable) -> None:
    """Give *command*, and each subcommand *table* names, an eager ``--examples`` flag.

    Raises:
        KeyError: *table* names a subcommand *command* does not have.
    """
    subcommands = command.commands if isinstance(command, click.Group) else {}
    for name, lines in table.items():
        target = subcommands[name] if name else command
        target.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=_printer(lines),
                help="Show usage examples.",
            )
        )
