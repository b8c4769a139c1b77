"""
Configuration module for scopelog.

Exports the main components for convenient imports.
"""

from .loader import load_env_overrides, load_options, load_yaml_options
from .schema import CONTROL_KEYS, DEFAULT_OUT, LoggingOptions

__all__ = [
    "load_options",
    "load_yaml_options",
    "load_env_overrides",
    "LoggingOptions",
    "CONTROL_KEYS",
    "DEFAULT_OUT",
]
