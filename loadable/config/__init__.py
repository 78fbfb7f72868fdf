"""Configuration defaults, loading and validation."""

from .defaults import CellParams, DefaultConfig, LoggingParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "CellParams",
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "LoggingParams",
    "ValidationError",
    "get_default_config",
]
