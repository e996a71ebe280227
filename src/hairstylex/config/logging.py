"""structlog configuration for hairstylex.

Two output modes, both on stderr so stdout stays clean for results:
- Human (default): console renderer, colored only on a TTY
- JSON (--log-json): one JSON object per line

Every record carries the current command path once :func:`bind_command`
has been called (the shell rebinds it per input line).
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "hairstylex"


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and route stdlib logging through them.

    Args:
        verbose: DEBUG for the ``hairstylex`` logger tree.
        quiet: ERROR only. Ignored when *verbose* is set.
        log_json: JSON renderer instead of the console renderer.
    """
    if verbose:
        app_level = logging.DEBUG
    elif quiet:
        app_level = logging.ERROR
    else:
        app_level = logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(app_level)


def bind_command(command: str) -> None:
    """Attach *command* to every subsequent log record in this context."""
    structlog.contextvars.bind_contextvars(command=command)


def clear_command() -> None:
    structlog.contextvars.unbind_contextvars("command")
