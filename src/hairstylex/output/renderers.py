"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from hairstylex.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from hairstylex.services.result import ServiceResult


@dataclass(frozen=True)
class _Options:
    verbose: bool = False
    max_rows: int = 0
    show_tags: bool = True


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    max_rows: int = 0,
    show_tags: bool = True,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    opts = _Options(verbose=verbose, max_rows=max_rows, show_tags=show_tags)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, opts)
    else:
        _render_error(result, console, opts)
    if verbose:
        _render_meta(console, result)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Listings print one identifier per line: the ID for clients and
    hairdressers, the 1-based row number for persons.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(_row_key(i, item) for i, item in enumerate(items, start=1))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────

# Display order for entity fields; anything else is appended after these.
_ENTITY_KEYS = (
    "id",
    "name",
    "phone",
    "email",
    "gender",
    "address",
    "title",
    "specialisations",
    "tags",
)
_TAG_KEYS = frozenset({"tags", "specialisations"})


def _row_key(position: int, item: dict[str, Any]) -> str:
    return str(item["id"]) if "id" in item else str(position)


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="hsx.ok")
    op = Text(f"  {result.op}", style="hsx.op")
    console.print(label, op, end="")
    console.print()


def _format_value(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(str(v) for v in value) if value else "-"
    return str(value)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="hsx.key")
    if key == "id":
        v = Text(str(value), style="hsx.id")
    elif key == "name":
        v = Text(str(value), style="hsx.name")
    elif key in _TAG_KEYS:
        v = Text(_format_value(value), style="hsx.tag")
    else:
        v = Text(_format_value(value))
    console.print(k, v, end="")
    console.print()


def _entity_fields(entity: dict[str, Any], opts: _Options) -> list[tuple[str, Any]]:
    keys = [k for k in _ENTITY_KEYS if k in entity]
    keys += [k for k in entity if k not in _ENTITY_KEYS and k != "kind"]
    return [(k, entity[k]) for k in keys if opts.show_tags or k not in _TAG_KEYS]


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including call timings (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_timings(console, v)
        else:
            console.print(f"    {k}: {v}")


def _timing_markup(ms: float) -> str:
    if ms > 1000:
        style = "bold red"
    elif ms > 100:
        style = "yellow"
    else:
        style = "dim"
    return f"[{style}]{ms:>8.2f}ms[/{style}]"


def _render_timings(console: Console, timing: dict[str, Any]) -> None:
    """Render a call total followed by one line per stage."""
    line = f"    {_timing_markup(timing.get('total_ms', 0.0))}  {timing.get('name', '?')}"
    if "failed_at" in timing:
        line += f"  (failed at {timing['failed_at']})"
    console.print(line)
    for entry in timing.get("stages", []):
        console.print(f"        {_timing_markup(entry['ms'])}  {entry['stage']}")


def _entity_table(kind: str, items: list[dict[str, Any]], opts: _Options) -> Table:
    """Build a Rich Table for one kind of record.

    The first column is the 1-based row number, which is what ``person``
    commands take as INDEX.
    """
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", style="dim", justify="right")
    if kind != "person":
        table.add_column("ID", style="hsx.id", no_wrap=True)
    table.add_column("Name", style=style_for_kind(kind) or "hsx.name")
    table.add_column("Phone", no_wrap=True)
    table.add_column("Email")
    table.add_column("Gender")
    if kind == "client":
        table.add_column("Address")
    if kind == "hairdresser":
        table.add_column("Title")
        if opts.show_tags:
            table.add_column("Specialisations", style="hsx.tag")
    if opts.show_tags:
        table.add_column("Tags", style="hsx.tag")

    for position, item in enumerate(items, start=1):
        row: list[str] = [str(position)]
        if kind != "person":
            row.append(str(item.get("id", "")))
        row += [
            str(item.get("name", "")),
            str(item.get("phone", "")),
            str(item.get("email", "")),
            str(item.get("gender", "")),
        ]
        if kind == "client":
            row.append(str(item.get("address", "")))
        if kind == "hairdresser":
            row.append(str(item.get("title", "")))
            if opts.show_tags:
                row.append(_format_value(item.get("specialisations", [])))
        if opts.show_tags:
            row.append(_format_value(item.get("tags", [])))
        table.add_row(*row)

    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, opts: _Options) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="hsx.error")
    op = Text(f"  {result.op}", style="hsx.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if opts.verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Mutation renderers ────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, opts: _Options) -> None:
    """Render add/edit/delete results: message, then the record's fields."""
    _status_line(console, result)
    message = result.data.get("message")
    if message:
        console.print(Text(f"  {message}"))
    entity = result.data.get("entity") or {}
    for key, value in _entity_fields(entity, opts):
        _field(console, key, value)
    if "fields_changed" in result.data:
        _field(console, "fields_changed", result.data["fields_changed"])


def _render_clear(result: ServiceResult, console: Console, opts: _Options) -> None:
    _status_line(console, result)
    console.print(Text(f"  {result.data.get('message', '')}"))
    for kind, count in result.data.get("removed", {}).items():
        _field(console, f"removed {kind}", count)


# ── Query renderers ───────────────────────────────────────────────────


def _render_listing(result: ServiceResult, console: Console, opts: _Options) -> None:
    """Render list_*/find_* results as a table, honouring ``max_rows``."""
    kind = str(result.data.get("kind", ""))
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        console.print(f"No {kind}s to show.")
        return

    shown = items[: opts.max_rows] if opts.max_rows else items
    console.print(_entity_table(kind, shown, opts))
    hidden = len(items) - len(shown)
    if hidden:
        console.print(f"... and {hidden} more", style="dim")
    console.print(f"\n{result.data.get('message', f'{len(items)} {kind}s listed!')}")


def _render_single_entity(result: ServiceResult, console: Console, opts: _Options) -> None:
    """Render show_* results as a panel."""
    entity = result.data.get("entity", {})
    kind = str(entity.get("kind", ""))
    lines = [
        f"{key}: {_format_value(value)}"
        for key, value in _entity_fields(entity, opts)
        if key not in ("id", "name")
    ]
    title = f"#{entity.get('id', '?')} — {entity.get('name', '?')}"
    console.print(
        Panel(
            Text("\n".join(lines)),
            title=title,
            subtitle=kind,
            border_style=style_for_kind(kind) or "dim",
            expand=False,
        )
    )


def _render_stats(result: ServiceResult, console: Console, opts: _Options) -> None:
    counts: dict[str, int] = result.data.get("counts", {})
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Kind")
    table.add_column("Count", justify="right")
    for kind, count in counts.items():
        table.add_row(kind, str(count))
    table.add_row(Text("total", style="bold"), Text(str(sum(counts.values())), style="bold"))
    console.print(table)

    for key in ("tags", "specialisations"):
        usage: dict[str, int] = result.data.get(key, {})
        if usage:
            console.print()
            console.print(Text(f"{key}:", style="hsx.key"))
            for label, n in usage.items():
                console.print(Text(f"  {label}", style="hsx.tag"), Text(f" {n}"))


def _render_generic(result: ServiceResult, console: Console, opts: _Options) -> None:
    """Fallback: status line plus every data key."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console, _Options], None]] = {
    # Mutations
    "add_person": _render_mutation,
    "add_client": _render_mutation,
    "add_hairdresser": _render_mutation,
    "edit_person": _render_mutation,
    "edit_client": _render_mutation,
    "edit_hairdresser": _render_mutation,
    "delete_person": _render_mutation,
    "delete_client": _render_mutation,
    "delete_hairdresser": _render_mutation,
    "clear": _render_clear,
    # Query
    "list_persons": _render_listing,
    "list_clients": _render_listing,
    "list_hairdressers": _render_listing,
    "find_persons": _render_listing,
    "find_clients": _render_listing,
    "find_hairdressers": _render_listing,
    "show_client": _render_single_entity,
    "show_hairdresser": _render_single_entity,
    "stats": _render_stats,
}
