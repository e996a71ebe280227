"""Command: shell — an interactive session over one store model.

Each input line is split with :mod:`shlex` and dispatched to the same Click
commands the one-shot CLI uses, under the root context, so global flags
(``--json``, ``--data-file``, ...) given before ``shell`` apply to every
line. Filters set by ``find`` persist until the next ``list``/``find`` or
mutation of that kind.
"""

from __future__ import annotations

import shlex
from typing import TYPE_CHECKING

import click

from hairstylex.commands._examples import attach_examples
from hairstylex.config.logging import bind_command, clear_command

if TYPE_CHECKING:
    from hairstylex.commands._context import AppContext

EXIT_WORDS = frozenset({"exit", "quit"})

_BANNER = "HairStyleX shell. Type 'help' for commands, 'exit' to leave."


def run_line(root: click.Context, line: str) -> None:
    """Execute one shell line against *root*'s command group.

    Errors are reported on stderr and never end the session.
    """
    try:
        args = shlex.split(line)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        return
    if not args:
        return
    if args[0] == "help":
        click.echo(root.get_help())
        return
    if args[0] == "shell":
        click.echo("Error: already in the shell", err=True)
        return

    group = root.command
    assert isinstance(group, click.Group)
    bind_command(args[0])
    try:
        cmd_name, cmd, rest = group.resolve_command(root, args)
        assert cmd is not None and cmd_name is not None
        with cmd.make_context(cmd_name, rest, parent=root) as sub_ctx:
            cmd.invoke(sub_ctx)
    except click.exceptions.Exit:
        pass
    except click.ClickException as exc:
        exc.show()
    except click.Abort:
        click.echo("Aborted!", err=True)
    except SystemExit:
        # AppContext.emit has already written the failure to stderr.
        pass
    finally:
        clear_command()


@click.command()
@click.pass_context
def shell(ctx: click.Context) -> None:
    """Start an interactive session (exit with 'exit', 'quit', or EOF)."""
    app: AppContext = ctx.obj
    root = ctx.find_root()
    _ = app.model
    click.echo(_BANNER)
    while True:
        try:
            line = click.prompt("hairstylex", default="", show_default=False, prompt_suffix="> ")
        except click.Abort:
            click.echo()
            break
        if line.strip() in EXIT_WORDS:
            break
        run_line(root, line)
    click.echo("Bye!")


attach_examples(shell, {"": ("hairstylex shell", "hairstylex --data-file salon.json shell")})
