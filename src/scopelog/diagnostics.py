"""
Self-logging for scopelog.

The library reports its own events (logger created, config merged, dump
selections, filter fall-through) through structlog, bound to the stdlib
``logging`` tree under the ``scopelog`` namespace. Nothing is printed
unless the host application configures that namespace, or calls
configure_diagnostics().

These events are about the logging facility itself and never go
through the LogStore or the sink.
"""

import logging
import sys
from typing import IO

import structlog

ROOT_LOGGER_NAME = "scopelog"

# structlog -> stdlib: drop disabled levels early, hand the event dict over
# to the stdlib record as `extra`
_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.stdlib.render_to_log_kwargs,
]

_HANDLER_MARK = "_scopelog_diagnostics"


def get_logger(name: str = ROOT_LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Get a structured logger inside the ``scopelog`` namespace.

    Args:
        name: Module name (usually __name__). Names outside the namespace
            are nested under it.

    Returns:
        structlog BoundLogger wrapping the matching stdlib logger
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_diagnostics(verbose: int = 0, stream: IO[str] | None = None) -> logging.Handler:
    """Print scopelog's own events to a stream.

    Calling it again replaces the previously installed handler.

    Args:
        verbose: 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        stream: Destination stream, stderr by default

    Returns:
        The installed handler
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)

    level = _verbose_to_level(verbose)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=False),
            foreign_pre_chain=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.ExtraAdder(),
                structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            ],
        )
    )
    setattr(handler, _HANDLER_MARK, True)

    root.setLevel(level)
    root.addHandler(handler)
    return handler


def _verbose_to_level(verbose: int) -> int:
    """Map a -v count to a stdlib logging level."""
    levels = {
        0: logging.WARNING,
        1: logging.INFO,
    }
    return levels.get(verbose, logging.DEBUG)
