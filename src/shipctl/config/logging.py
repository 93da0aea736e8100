"""structlog setup for shipctl.

Everything logs to stderr so stdout stays clean for JSON and quiet output.
``--verbose`` opens the ``shipctl`` loggers up to DEBUG, ``--log-json``
switches the renderer to one JSON object per line. Each run binds its
reference timezone and whether the clock is pinned, so every line says
which calendar the numbers were computed against.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def _renderer(log_json: bool, stream: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route structlog and stdlib ``shipctl.*`` records to *stream*.

    *stream* defaults to the current ``sys.stderr``. Calling this again
    replaces the previous handler.
    """
    stream = stream or sys.stderr

    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json, stream),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger("shipctl").setLevel(logging.DEBUG if verbose else logging.WARNING)


def bind_run_context(*, timezone: str, pinned: bool) -> None:
    """Tag every following log line with the run's reference calendar."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(timezone=timezone, pinned_clock=pinned)
