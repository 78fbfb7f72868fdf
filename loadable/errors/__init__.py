"""
Exception hierarchy for the loadable package.

Loadable containers never raise: failures of the resource operation are
reported through ``to_failed``/``set_failed`` and stored as data. These
exceptions cover status label parsing, synchronized cells and configuration.
"""

from .failures import (
    LoadableError,
    StatusParseError,
    StaleTransitionError,
    ConfigurationError,
)

__all__ = [
    "LoadableError",
    "StatusParseError",
    "StaleTransitionError",
    "ConfigurationError",
]
