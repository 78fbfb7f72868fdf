"""
Resource state module.

Defines the loadable status vocabulary, the Loadable container with its pure
(``to_*``) and in-place (``set_*``) transitions, and the synchronized
LoadableCell for snapshots shared between concurrent operations.
"""

from .cell import LoadableCell
from .models import (
    INITIAL_OR_LOADED_STATUSES,
    IN_PROGRESS_STATUSES,
    PERSISTED_STATUSES,
    SETTLED_STATUSES,
    Loadable,
    LoadableStatus,
)

__all__ = [
    "INITIAL_OR_LOADED_STATUSES",
    "IN_PROGRESS_STATUSES",
    "PERSISTED_STATUSES",
    "SETTLED_STATUSES",
    "Loadable",
    "LoadableCell",
    "LoadableStatus",
]
