"""
Pydantic model for scopelog configuration.

The four control options are typed fields. Every other key handed to
LogContext.config() lands in `overrides`, an insertion-ordered mapping of
logger name or wildcard key -> level name (or NONE).
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_OUT = "console"

# Public option key -> field name. snake_case spellings are accepted too.
CONTROL_KEYS: dict[str, str] = {
    "rootLogger": "root_logger",
    "root_logger": "root_logger",
    "showTime": "show_time",
    "show_time": "show_time",
    "out": "out",
    "remoteLoggingPort": "remote_logging_port",
    "remote_logging_port": "remote_logging_port",
}


class LoggingOptions(BaseModel):
    """Process-wide logging configuration."""

    root_logger: str = Field(
        default="DEBUG",
        alias="rootLogger",
        description="Minimum level forwarded when no override applies, or NONE",
    )
    show_time: bool = Field(
        default=True,
        alias="showTime",
        description="Prefix every line with the HH:MM:SS clock reading",
    )
    out: Any = Field(
        default=DEFAULT_OUT,
        description="'console', a BaseSink, or a callable receiving the line(s)",
    )
    remote_logging_port: int = Field(
        default=1337,
        alias="remoteLoggingPort",
        description="Stored for an external transport; scopelog opens no sockets",
    )
    overrides: dict[str, Any] = Field(
        default_factory=dict,
        description="Logger name or 'Prefix::*' -> level name or NONE",
    )

    model_config = {"populate_by_name": True, "arbitrary_types_allowed": True}

    def merge(self, options: Mapping[str, Any]) -> "LoggingOptions":
        """Return a copy with `options` merged in.

        Later keys win, absent keys keep their value. Values are not
        validated here: a malformed level is kept as given and the filter
        resolver skips it.

        Args:
            options: Control keys and/or logger overrides

        Returns:
            New LoggingOptions
        """
        updates: dict[str, Any] = {}
        overrides = dict(self.overrides)
        for key, value in options.items():
            field = CONTROL_KEYS.get(key)
            if field is not None:
                updates[field] = value
            else:
                overrides[str(key)] = value
        updates["overrides"] = overrides
        return self.model_copy(update=updates)

    def override_for(self, key: str) -> Any:
        """Configured value for a logger name or wildcard key, None if unset."""
        return self.overrides.get(key)
