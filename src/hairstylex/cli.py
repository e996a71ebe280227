"""Root CLI group for hairstylex with global flags and command registration."""

from __future__ import annotations

import click

from hairstylex import __version__
from hairstylex.commands import register_commands
from hairstylex.commands._context import AppContext
from hairstylex.config.settings import HairstylexSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hairstylex")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("--no-save", is_flag=True, help="Do not write changes to the data file.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--data-file",
    default=None,
    type=click.Path(dir_okay=False),
    help="Override the [data] file setting.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    no_save: bool,
    config_path: str | None,
    data_file: str | None,
) -> None:
    """hairstylex — contacts, clients, and staff for a hair salon."""
    settings = HairstylexSettings.from_cli(
        config_path=config_path,
        data_file=data_file,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
        no_save=no_save,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
