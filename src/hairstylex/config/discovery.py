"""Locating ``hairstylex.toml`` and the data file it names.

The config file in effect is, in order: the ``--config`` flag, the
``HAIRSTYLEX_CONFIG`` environment variable, or the nearest
``hairstylex.toml`` walking up from the start directory. The directory
that holds it is the salon root, and a relative ``[data] file`` resolves
against that root.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, NamedTuple

import click

CONFIG_FILENAME = "hairstylex.toml"
CONFIG_ENV_VAR = "HAIRSTYLEX_CONFIG"


class ConfigLocation(NamedTuple):
    """Where configuration came from and what relative paths resolve against."""

    config_path: Path | None
    root: Path


def _walk_up(start: Path) -> Path | None:
    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def locate_config(explicit: str | None = None, start: Path | None = None) -> ConfigLocation:
    """Resolve the config file and salon root.

    Without any config file the root is *start* (default: the CWD).

    Raises:
        click.ClickException: *explicit* or ``HAIRSTYLEX_CONFIG`` names a
            file that does not exist.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        if not path.is_file():
            msg = f"Config file not found: {named}"
            raise click.ClickException(msg)
        return ConfigLocation(path, path.parent)

    base = start or Path.cwd()
    found = _walk_up(base)
    return ConfigLocation(found, found.parent if found else base)


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*; a malformed file is a usage-level error, not a crash."""
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


def resolve_data_path(root: Path, configured: str, override: Path | None = None) -> Path:
    """The snapshot file: ``--data-file`` if given, else ``[data] file``, under *root*."""
    path = override if override is not None else Path(configured)
    return path if path.is_absolute() else root / path
