"""
Logger registry - one memoized Logger handle per name.

A Logger owns no state: it is the logger name plus one emit method per
level, all delegating to the LogContext that created it. The registry
guarantees that asking twice for the same name returns the same handle.
"""

from collections.abc import Callable
from typing import Any

from .errors import InvalidNameError
from .levels import Level

EmitFn = Callable[[str, Level, tuple[Any, ...]], None]


def validate_name(name: Any) -> str:
    """Return name unchanged if it can name a logger.

    Raises:
        InvalidNameError: If name is None, empty or not a string
    """
    if not isinstance(name, str) or not name:
        raise InvalidNameError(f"A Logger must have a name, got {name!r}")
    return name


class Logger:
    """Named handle with one method per level.

    Usage:
        log = context.get_logger("Controller::people")
        log.debug("Person object was", person, "and data was", [1, 2, 3])
    """

    __slots__ = ("_name", "_emit")

    def __init__(self, name: str, emit: EmitFn) -> None:
        self._name = name
        self._emit = emit

    @property
    def name(self) -> str:
        return self._name

    def debug(self, *args: Any) -> None:
        self._emit(self._name, Level.DEBUG, args)

    def info(self, *args: Any) -> None:
        self._emit(self._name, Level.INFO, args)

    def warn(self, *args: Any) -> None:
        self._emit(self._name, Level.WARN, args)

    warning = warn

    def error(self, *args: Any) -> None:
        self._emit(self._name, Level.ERROR, args)

    def __repr__(self) -> str:
        return f"<Logger(name='{self._name}')>"


class LoggerRegistry:
    """Name -> Logger mapping.

    Not thread-safe on its own: LogContext calls get_or_create() under its
    lock so check-then-create is atomic.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._loggers: dict[str, Logger] = {}

    def get_or_create(self, name: str, factory: Callable[[str], Logger]) -> tuple[Logger, bool]:
        """Return the handle for name, creating it on first request.

        Args:
            name: Validated logger name
            factory: Builds the Logger when it does not exist yet

        Returns:
            (logger, created) where created is True on the first request
        """
        existing = self._loggers.get(name)
        if existing is not None:
            return existing, False

        logger = factory(name)
        self._loggers[name] = logger
        return logger, True

    def get(self, name: str) -> Logger | None:
        """Return the handle if it exists, None otherwise."""
        return self._loggers.get(name)

    def has(self, name: str) -> bool:
        return name in self._loggers

    def names(self) -> list[str]:
        """Registered names in creation order."""
        return list(self._loggers)

    def __len__(self) -> int:
        return len(self._loggers)

    def __repr__(self) -> str:
        return f"<LoggerRegistry({len(self)} loggers)>"
