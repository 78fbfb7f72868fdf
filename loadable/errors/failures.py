"""
Error classifications for the loadable package.

Each error carries a ``context`` dict so it can be logged as structured data.
"""

from typing import Any, Dict, List, Optional


class LoadableError(Exception):
    """Base class for loadable package errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class StatusParseError(LoadableError, ValueError):
    """A status label that names none of the known statuses."""

    def __init__(self, label: Any, **kwargs):
        super().__init__(f"Unknown loadable status label: {label!r}", **kwargs)
        self.label = label
        self.context.setdefault("label", label)


class StaleTransitionError(LoadableError):
    """Completion of an operation that a newer operation has superseded."""

    def __init__(self, resource: str, token: int, current_epoch: int, **kwargs):
        super().__init__(
            f"Stale transition for {resource}: token {token} superseded by epoch {current_epoch}",
            **kwargs
        )
        self.resource = resource
        self.token = token
        self.current_epoch = current_epoch
        self.context.update({
            "resource": resource,
            "token": token,
            "current_epoch": current_epoch,
        })


class ConfigurationError(LoadableError):
    """Configuration values that failed validation."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
