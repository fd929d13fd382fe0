"""structlog configuration for ednprint.

The library only logs through :mod:`logging` (``logging.getLogger(__name__)``)
and never configures logging on import. Applications that want to see those
messages can call :func:`configure_logging`.

Two output modes:

+ Human (default): console renderer on stderr, colored if stderr is a tty
+ JSON (``log_json=True``): structured JSON lines on stderr
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

__all__ = ("configure_logging",)

LOGGER_NAME = "ednprint"


class _EdnprintHandler(logging.StreamHandler):  # type: ignore[type-arg]
    "Marker class so we can find the handler we installed"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route the ``ednprint`` loggers through structlog.

    Calling this function several times replaces the previous configuration.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        stream: Where to write the logs (defaults to :data:`sys.stderr`).
    """
    if stream is None:
        stream = sys.stderr

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = (
            structlog.processors.JSONRenderer()
        )
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = _EdnprintHandler(stream)
    handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    for previous in [
        h for h in logger.handlers if isinstance(h, _EdnprintHandler)
    ]:
        logger.removeHandler(previous)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
