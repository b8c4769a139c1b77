"""
Log store - append-only history of every rendered line.

Keeps one sequence per logger name plus the global `all` sequence, which
receives every line in emission order. Nothing is ever pruned.

The store does not lock; LogContext holds its lock around create() and
append() so `all` stays an order-preserving interleaving of the
per-name sequences.
"""


class LogStore:
    """Per-logger and global line history."""

    def __init__(self) -> None:
        self._all: list[str] = []
        self._by_name: dict[str, list[str]] = {}

    def create(self, name: str) -> None:
        """Create the (empty) sequence for a logger. No-op if it exists."""
        self._by_name.setdefault(name, [])

    def append(self, name: str, line: str) -> None:
        """Append a line to `all` and to the logger's own sequence."""
        self._all.append(line)
        self._by_name.setdefault(name, []).append(line)

    def has(self, name: str) -> bool:
        """True if a sequence exists for this exact logger name."""
        return name in self._by_name

    def lines(self, name: str) -> list[str]:
        """Copy of one logger's lines, empty if the logger is unknown."""
        return list(self._by_name.get(name, ()))

    def all_lines(self) -> list[str]:
        """Copy of every line in emission order."""
        return list(self._all)

    def names(self) -> list[str]:
        """Logger names in creation order."""
        return list(self._by_name)

    def __len__(self) -> int:
        return len(self._all)

    def __repr__(self) -> str:
        return f"<LogStore({len(self._by_name)} loggers, {len(self._all)} lines)>"
