"""
Sinks - where forwarded and dumped lines go.

A sink has one method, write(lines). LogContext picks the sink from the
`out` option:
    BaseSink instance -> used as-is
    callable          -> CallableSink
    anything else     -> ConsoleSink (the "console" default)
"""

import sys
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import IO, Any


class BaseSink(ABC):
    """Abstract output capability."""

    @abstractmethod
    def write(self, lines: Sequence[str]) -> None:
        """Write lines in order.

        Args:
            lines: Rendered log lines, oldest first
        """

    def dispatch(self, line_or_lines: str | Sequence[str]) -> None:
        """Write a single line or a sequence of lines."""
        if isinstance(line_or_lines, str):
            self.write([line_or_lines])
        else:
            self.write(list(line_or_lines))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class ConsoleSink(BaseSink):
    """Default sink: newline-joined lines on stdout."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> IO[str]:
        # Resolved on every write so redirected/captured stdout is honoured
        return self._stream or sys.stdout

    def write(self, lines: Sequence[str]) -> None:
        if not lines:
            return
        self.stream.write("\n".join(lines) + "\n")
        self.stream.flush()


class CallableSink(BaseSink):
    """Wraps a user function.

    The function receives a str when one line is forwarded at emission
    time and a list[str] when lines are dumped.
    """

    def __init__(self, func: Callable[[Any], Any]) -> None:
        self.func = func

    def write(self, lines: Sequence[str]) -> None:
        self.func(list(lines))

    def dispatch(self, line_or_lines: str | Sequence[str]) -> None:
        if isinstance(line_or_lines, str):
            self.func(line_or_lines)
        else:
            self.func(list(line_or_lines))

    def __repr__(self) -> str:
        return f"<CallableSink({getattr(self.func, '__name__', self.func)!r})>"


def resolve_sink(out: Any) -> BaseSink:
    """Turn the `out` option into a sink."""
    if isinstance(out, BaseSink):
        return out
    if callable(out):
        return CallableSink(out)
    return ConsoleSink()
