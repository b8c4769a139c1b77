"""
Dump/retrieval engine - replays stored lines to the sink.

    dump()                  -> every line, in emission order
    dump("Controller::x")   -> that logger's lines (if it exists)
    dump("Controller::*")   -> lines of every Controller:: logger, in order
    anything else           -> nothing is dispatched

Wildcard dumps match on the rendered `[name]` tag at the start of each
line (after the optional clock prefix), so `Controller::*` picks
`[Controller::people]` but neither `[ControllerX::people]` nor a message
that merely quotes a tag.

Retrieval ignores the filter configuration: suppressed lines are dumped
like any other.
"""

import re
import threading
from collections.abc import Callable, Sequence
from contextlib import AbstractContextManager
from typing import Any

from .diagnostics import get_logger
from .filters import wildcard_segment
from .store import LogStore

logger = get_logger(__name__)


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

# Optional clock prefix ("12:34:56 ", "12:34:56 PM ") before the tag; it may not contain "["
_CLOCK_PREFIX = r"(?:[^\[]* )?"


def wildcard_matcher(segment: str) -> Callable[[str], bool]:
    """Build a predicate matching lines tagged `[<segment>::...]`."""
    pattern = re.compile(r"^" + _CLOCK_PREFIX + r"\[" + re.escape(segment) + r"::.*?\] ")
    return lambda line: pattern.match(line) is not None


class DumpEngine:
    """Selects stored lines and hands them to a dispatch function."""

    def __init__(
        self,
        store: LogStore,
        dispatch: Callable[[Sequence[str]], None],
        lock: AbstractContextManager | None = None,
    ) -> None:
        self._store = store
        self._dispatch = dispatch
        self._lock = lock if lock is not None else threading.RLock()

    def select(self, name: Any = MISSING) -> list[str] | None:
        """Lines a dump of `name` would dispatch.

        Args:
            name: Omitted for everything, an exact logger name, or 'Prefix::*'

        Returns:
            The lines to dispatch, or None when nothing should be dispatched
        """
        with self._lock:
            if name is MISSING:
                return self._store.all_lines()

            if not isinstance(name, str):
                return None

            if self._store.has(name):
                return self._store.lines(name)

            segment = wildcard_segment(name)
            if segment is None:
                return None

            matches = wildcard_matcher(segment)
            selected = [line for line in self._store.all_lines() if matches(line)]

        logger.debug("dump.wildcard", pattern=name, matched=len(selected))
        return selected or None

    def dump(self, name: Any = MISSING) -> bool:
        """Dispatch the selection for `name`.

        Returns:
            True if anything was dispatched
        """
        lines = self.select(name)
        if lines is None:
            logger.debug("dump.skipped", target=repr(name))
            return False
        self._dispatch(lines)
        return True
