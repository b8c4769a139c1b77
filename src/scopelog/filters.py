"""
Filter resolver - decides whether a stored line is forwarded to the sink.

Resolution order for a logger named `Controller::people`:
1. Exact override     -> config["Controller::people"]
2. Wildcard override  -> config["Controller::*"]
3. Disabled root      -> rootLogger == NONE forwards nothing
4. Root level         -> forward if level >= rootLogger

A tier only applies when its configured value is a known level or NONE.
Anything else (typos, None, numbers) falls through to the next tier, so
a malformed config never breaks emission.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .config.schema import LoggingOptions
from .diagnostics import get_logger
from .levels import Level, compare, is_none, resolve_level

logger = get_logger(__name__)

NAMESPACE_SEPARATOR = "::"
WILDCARD_SUFFIX = "::*"

_WILDCARD_PATTERN = re.compile(r"(.+?)::\*")


def is_wildcard(name: Any) -> bool:
    """True if name looks like 'Prefix::*'."""
    return isinstance(name, str) and _WILDCARD_PATTERN.fullmatch(name) is not None


def wildcard_key(name: str) -> str | None:
    """Wildcard key that covers a logger name.

    Example:
        >>> wildcard_key("Controller::people-nearby")
        'Controller::*'
        >>> wildcard_key("Controller") is None
        True
    """
    if NAMESPACE_SEPARATOR not in name:
        return None
    return name.split(NAMESPACE_SEPARATOR, 1)[0] + WILDCARD_SUFFIX


def wildcard_segment(pattern: Any) -> str | None:
    """'Controller::*' -> 'Controller'; None if pattern is not a wildcard."""
    if not isinstance(pattern, str):
        return None
    match = _WILDCARD_PATTERN.fullmatch(pattern)
    return match.group(1) if match else None


class FilterTier(Enum):
    """Which rule made a forwarding decision."""

    EXACT = "exact"
    WILDCARD = "wildcard"
    DISABLED = "disabled"
    ROOT = "root"


@dataclass(frozen=True)
class FilterDecision:
    """Outcome of resolving one (level, logger name) pair."""

    forward: bool
    tier: FilterTier
    key: str
    configured: Any

    def describe(self) -> str:
        verdict = "forward" if self.forward else "suppress"
        return f"{verdict} ({self.tier.value}: {self.key}={self.configured!r})"


class FilterResolver:
    """Forwarding decisions for one snapshot of LoggingOptions.

    LogContext builds a new resolver every time the options change.
    """

    def __init__(self, options: LoggingOptions) -> None:
        self._options = options

    def should_forward(self, level: Level, name: str) -> bool:
        """True if a line at `level` from logger `name` goes to the sink."""
        return self.explain(level, name).forward

    def explain(self, level: Level, name: str) -> FilterDecision:
        """Resolve the decision and report which tier made it.

        Args:
            level: Level of the message
            name: Logger name

        Returns:
            FilterDecision
        """
        candidates = (
            (FilterTier.EXACT, name),
            (FilterTier.WILDCARD, wildcard_key(name)),
        )
        for tier, key in candidates:
            if key is None:
                continue
            configured = self._options.override_for(key)
            if configured is None:
                continue
            if is_none(configured):
                return FilterDecision(False, tier, key, configured)
            if resolve_level(configured) is None:
                logger.debug(
                    "filter.override_skipped",
                    tier=tier.value,
                    key=key,
                    value=repr(configured),
                )
                continue
            return FilterDecision(compare(level, configured) >= 0, tier, key, configured)

        root = self._options.root_logger
        if is_none(root):
            return FilterDecision(False, FilterTier.DISABLED, "rootLogger", root)

        # An unknown root level has index -1: everything forwards
        return FilterDecision(compare(level, root) >= 0, FilterTier.ROOT, "rootLogger", root)
