"""
Exception types raised by scopelog.

Emission, filtering and dumping never raise for malformed configuration;
the only error callers see from the core is InvalidNameError.
"""


class ScopelogError(Exception):
    """Base class for every error raised by scopelog."""

    pass


class InvalidNameError(ScopelogError, ValueError):
    """Error raised when a logger is requested without a usable name."""

    pass


class ConfigError(ScopelogError):
    """Error raised when a configuration file or env override cannot be loaded."""

    pass
