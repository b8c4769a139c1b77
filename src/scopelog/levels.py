"""
Severity levels for scopelog.

Ordered from most to least verbose:
    DEBUG (0) -> diagnostics, payload dumps
    INFO  (1) -> normal operation
    WARN  (2) -> non-fatal problems
    ERROR (3) -> failures

NONE is not a level. Assigned to rootLogger (or to a single logger or
wildcard key) it disables forwarding for that scope.
"""

from enum import IntEnum
from typing import Any


class Level(IntEnum):
    """Ordered severity levels. The value is the position in LEVEL_NAMES."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3


LEVEL_NAMES: tuple[str, ...] = tuple(level.name for level in Level)

NONE = "NONE"

NOT_FOUND = -1


def level_index(value: Any) -> int:
    """Return the position of a level in LEVEL_NAMES.

    Args:
        value: A Level, or a level name (case-insensitive)

    Returns:
        Index of the level, or -1 when the value is not a known level
    """
    if isinstance(value, Level):
        return int(value)
    if not isinstance(value, str):
        return NOT_FOUND
    name = value.strip().upper()
    if name in LEVEL_NAMES:
        return LEVEL_NAMES.index(name)
    return NOT_FOUND


def resolve_level(value: Any) -> Level | None:
    """Return the Level for a configured value, or None if it is not one."""
    index = level_index(value)
    return None if index == NOT_FOUND else Level(index)


def is_none(value: Any) -> bool:
    """True if the value is the NONE pseudo-level."""
    return isinstance(value, str) and value.strip().upper() == NONE


def compare(a: Any, b: Any) -> int:
    """Compare two levels by severity.

    Unknown values take index -1, so everything compares as at least as
    severe as them.

    Returns:
        index(a) - index(b)
    """
    return level_index(a) - level_index(b)
