"""
scopelog - hierarchical in-memory logging.

Named loggers emit leveled messages, every argument is serialized into
readable text, forwarding is decided per logger name with a wildcard
fallback, and every line is kept in memory for later dumps.

Public API:
    LogContext                 - owns config, loggers and history
    LogContext.get_logger(n)   - memoized Logger with debug/info/warn/error
    LogContext.config(opts)    - merge rootLogger/showTime/out/... and overrides
    LogContext.dump(name?)     - replay all, one logger, or 'Prefix::*'
"""

from .config import LoggingOptions, load_options
from .context import LogContext, local_clock, render_line
from .diagnostics import configure_diagnostics
from .errors import ConfigError, InvalidNameError, ScopelogError
from .levels import LEVEL_NAMES, NONE, Level
from .registry import Logger
from .serializer import UNDEFINED, SerializeContext, serialize
from .sinks import BaseSink, CallableSink, ConsoleSink

__version__ = "1.0.0"

__all__ = [
    "LogContext",
    "Logger",
    "LoggingOptions",
    "load_options",
    "local_clock",
    "render_line",
    "configure_diagnostics",
    "Level",
    "LEVEL_NAMES",
    "NONE",
    "serialize",
    "SerializeContext",
    "UNDEFINED",
    "BaseSink",
    "CallableSink",
    "ConsoleSink",
    "ScopelogError",
    "InvalidNameError",
    "ConfigError",
]
