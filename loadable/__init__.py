"""
Loadable - lifecycle state for asynchronously obtained resources.

A Loadable pairs a status (initial, loading, loaded, creating, created,
updating, updated, deleting, deleted, failed) with the last-known data and
the last reported error, so application code does not track loading flags
by hand.
"""

from .state import (
    INITIAL_OR_LOADED_STATUSES,
    IN_PROGRESS_STATUSES,
    PERSISTED_STATUSES,
    SETTLED_STATUSES,
    Loadable,
    LoadableCell,
    LoadableStatus,
)

__version__ = "0.1.0"
__author__ = "Loadable Team"

__all__ = [
    "INITIAL_OR_LOADED_STATUSES",
    "IN_PROGRESS_STATUSES",
    "PERSISTED_STATUSES",
    "SETTLED_STATUSES",
    "Loadable",
    "LoadableCell",
    "LoadableStatus",
]
