"""
LogContext - the facade owning configuration, registry and store.

Create one per process (or per test) and hand it to the code that needs
loggers:

    ctx = LogContext()
    ctx.config({"rootLogger": "INFO", "Controller::*": "WARN"})
    log = ctx.get_logger("Controller::people")
    log.info("loaded", {"count": 3}, [1, 2])
    ctx.dump("Controller::*")

Emission pipeline: serialize args -> render line -> store (always) ->
filter -> dispatch to sink. Every emitted line is stored, whether or not
it is forwarded.

Threading: one RLock guards logger creation and store appends. The sink
is called after the lock is released.
"""

import threading
import time
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .config.schema import LoggingOptions
from .diagnostics import get_logger
from .dump import MISSING, DumpEngine
from .filters import FilterDecision, FilterResolver
from .levels import Level
from .registry import Logger, LoggerRegistry, validate_name
from .serializer import render_args
from .sinks import BaseSink, resolve_sink
from .store import LogStore

logger = get_logger(__name__)

Clock = Callable[[], str]


def local_clock() -> str:
    """Current local time as HH:MM:SS."""
    return time.strftime("%H:%M:%S")


def render_line(name: str, level: Level, args: Sequence[Any], timestamp: str | None = None) -> str:
    """Build a LogLine: `[HH:MM:SS ][name] LEVEL serialized args`."""
    prefix = f"{timestamp} " if timestamp else ""
    return f"{prefix}[{name}] {level.name} {render_args(args)}"


class LogContext:
    """Process-wide logging state behind a single object."""

    def __init__(
        self,
        options: LoggingOptions | Mapping[str, Any] | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Create an empty context.

        Args:
            options: Initial LoggingOptions, or a mapping merged over the defaults
            clock: Zero-arg callable returning the time prefix, local_clock by
                default. Its text must not contain "["
        """
        if isinstance(options, LoggingOptions):
            self._options = options
        else:
            self._options = LoggingOptions().merge(options or {})
        self._clock = clock or local_clock
        self._lock = threading.RLock()
        self._registry = LoggerRegistry()
        self._store = LogStore()
        self._resolver = FilterResolver(self._options)
        self._sink = resolve_sink(self._options.out)
        self._dump = DumpEngine(self._store, self._dispatch, self._lock)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_logger(self, name: str) -> Logger:
        """Get the logger for name, creating it (and its store entry) once.

        Raises:
            InvalidNameError: If name is empty, None or not a string
        """
        name = validate_name(name)
        with self._lock:
            handle, created = self._registry.get_or_create(name, self._new_logger)
            if created:
                self._store.create(name)
        if created:
            logger.debug("registry.logger_created", logger_name=name)
        return handle

    def config(self, options: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Merge options into the configuration.

        Control keys: rootLogger, showTime, out, remoteLoggingPort. Any
        other key is a level override for a logger name or 'Prefix::*'.

        Args:
            options: Mapping of options (needed for keys like 'A::*')
            **kwargs: More options, applied after `options`
        """
        merged = dict(options or {})
        merged.update(kwargs)
        with self._lock:
            self._options = self._options.merge(merged)
            self._resolver = FilterResolver(self._options)
            self._sink = resolve_sink(self._options.out)
        logger.debug("config.merged", keys=sorted(map(str, merged)))

    def dump(self, name: Any = MISSING) -> bool:
        """Replay stored lines to the sink.

        Args:
            name: Omit for every line; an exact logger name; or 'Prefix::*'

        Returns:
            True if anything was dispatched
        """
        return self._dump.dump(name)

    def should_forward(self, level: Level, name: str) -> bool:
        """Would a line at level from logger name reach the sink right now."""
        return self._resolver.should_forward(level, name)

    def explain(self, level: Level, name: str) -> FilterDecision:
        """Forwarding decision plus the tier that made it."""
        return self._resolver.explain(level, name)

    @property
    def options(self) -> LoggingOptions:
        return self._options

    @property
    def store(self) -> LogStore:
        return self._store

    @property
    def registry(self) -> LoggerRegistry:
        return self._registry

    @property
    def sink(self) -> BaseSink:
        return self._sink

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _new_logger(self, name: str) -> Logger:
        return Logger(name, self._emit)

    def _emit(self, name: str, level: Level, args: tuple[Any, ...]) -> None:
        # Serialization runs outside the lock; it may call user __repr__/getsource
        options = self._options
        timestamp = self._clock() if options.show_time else None
        line = render_line(name, level, args, timestamp)

        with self._lock:
            self._store.append(name, line)
            resolver = self._resolver
            sink = self._sink

        if resolver.should_forward(level, name):
            sink.dispatch(line)

    def _dispatch(self, lines: Sequence[str]) -> None:
        self._sink.dispatch(list(lines))

    def __repr__(self) -> str:
        return f"<LogContext({len(self._registry)} loggers, {len(self._store)} lines)>"
