"""Output mode selection for ServiceResult.

Three modes, checked in order: JSON (``--json``), quiet (``-q``), and the
default Rich rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hairstylex.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from hairstylex.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Rendering options derived from CLI flags and the ``[display]`` section."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    max_rows: int = 0
    show_tags: bool = True


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output options; defaults to Rich rendering.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    settings = settings or OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        max_rows=settings.max_rows,
        show_tags=settings.show_tags,
    )
