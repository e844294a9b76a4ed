"""Logging setup for redirectctl.

All log output goes to stderr so stdout stays parseable with ``--json``.
Two loggers matter:

``redirectctl``
    Diagnostics. WARNING and up unless ``--verbose`` lowers it to DEBUG.
``redirectctl.changes``
    One INFO event per committed rule change, written by the built-in
    change log plugin. Shown only while ``[plugins] log_changes`` is on.

stdlib and structlog loggers share one handler, rendered as console lines
or, with ``--log-json``, one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "redirectctl"
CHANGES_LOGGER = "redirectctl.changes"


def _shared_processors(*, log_json: bool) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    # Console lines are read live; only the JSON stream gets timestamps.
    if log_json:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    return processors


def _stderr_handler(*, log_json: bool) -> logging.Handler:
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_shared_processors(log_json=log_json),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    log_changes: bool = False,
) -> None:
    """Route structlog and stdlib logging to stderr.

    Safe to call repeatedly; each call replaces the root handler.

    Args:
        verbose: Show DEBUG diagnostics from ``redirectctl``.
        log_json: Render JSON lines instead of console output.
        log_changes: Show the ``redirectctl.changes`` event stream.
    """
    structlog.configure(
        processors=[
            *_shared_processors(log_json=log_json),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_stderr_handler(log_json=log_json))
    root.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    # NOTSET falls back to the app level above.
    logging.getLogger(CHANGES_LOGGER).setLevel(logging.INFO if log_changes else logging.NOTSET)
