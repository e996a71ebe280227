"""Rich Console factory and theme for hairstylex output.

Consoles render to a StringIO buffer so every renderer returns a string.
In non-TTY environments (tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

HSX_THEME = Theme(
    {
        "hsx.ok": "bold green",
        "hsx.error": "bold red",
        "hsx.warning": "bold yellow",
        "hsx.op": "bold cyan",
        "hsx.key": "dim",
        "hsx.id": "bold blue",
        "hsx.name": "bold",
        "hsx.tag": "magenta",
        "hsx.kind.person": "white",
        "hsx.kind.client": "green",
        "hsx.kind.hairdresser": "cyan",
    }
)

_KIND_STYLES: dict[str, str] = {
    "person": "hsx.kind.person",
    "client": "hsx.kind.client",
    "hairdresser": "hsx.kind.hairdresser",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=HSX_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    return _KIND_STYLES.get(kind, "")
