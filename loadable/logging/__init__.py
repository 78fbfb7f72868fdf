"""
Logging configuration and utilities for the loadable package.
"""
from .config import (
    configure_logging,
    configure_logging_from_config,
    get_logger,
    get_state_logger,
    log_status_transition,
)

__all__ = ["configure_logging", "configure_logging_from_config", "get_logger", "get_state_logger", "log_status_transition"]
