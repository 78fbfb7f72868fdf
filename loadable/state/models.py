"""
Resource state data models.

This module defines the status vocabulary for an asynchronously obtained
resource and the ``Loadable`` container that pairs the current status with
the last-known data and the last-known error.
"""

from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from ..errors import StatusParseError

D = TypeVar("D")
E = TypeVar("E")


class LoadableStatus(str, Enum):
    """Lifecycle statuses of a loadable resource."""
    INITIAL = "INITIAL"
    LOADING = "LOADING"
    LOADED = "LOADED"
    CREATING = "CREATING"
    CREATED = "CREATED"
    UPDATING = "UPDATING"
    UPDATED = "UPDATED"
    DELETING = "DELETING"
    DELETED = "DELETED"
    FAILED = "FAILED"

    @classmethod
    def from_label(cls, label: str) -> "LoadableStatus":
        """
        Parse a persisted or transmitted status label.

        Exact labels are matched first, then labels and member names
        case-insensitively.

        Raises:
            StatusParseError: If the label names no status.
        """
        if isinstance(label, cls):
            return label

        if isinstance(label, str):
            try:
                return cls(label)
            except ValueError:
                pass

            normalized = label.strip().upper()
            for status in cls:
                if status.value == normalized or status.name == normalized:
                    return status

        raise StatusParseError(label)


IN_PROGRESS_STATUSES = frozenset({
    LoadableStatus.LOADING,
    LoadableStatus.CREATING,
    LoadableStatus.UPDATING,
    LoadableStatus.DELETING,
})

SETTLED_STATUSES = frozenset({
    LoadableStatus.LOADED,
    LoadableStatus.CREATED,
    LoadableStatus.UPDATED,
    LoadableStatus.DELETED,
})

PERSISTED_STATUSES = frozenset({LoadableStatus.CREATED, LoadableStatus.UPDATED})

INITIAL_OR_LOADED_STATUSES = frozenset({LoadableStatus.INITIAL, LoadableStatus.LOADED})


class Loadable(Generic[D, E]):
    """
    State of a loadable resource: status, last-known data and last error.

    Every transition comes in two forms. ``to_*`` methods return a new
    instance and leave the receiver untouched; ``set_*`` methods update the
    receiver in place and return ``None``.

    In-progress transitions keep the current data so consumers can keep
    showing it while an operation is in flight. ``FAILED`` keeps it as well.
    Only ``DELETED`` drops it. Every transition except ``FAILED`` clears the
    error.

    Transitions are not guarded: any status can move to any other status
    (``set_loaded`` after ``set_deleted`` simply reports LOADED again).
    Callers rely on this, so it stays permissive even though it lets
    nonsensical sequences through.

    The in-place form is not synchronized. Concurrent operations that
    mutate the same instance are last-write-wins; share snapshots produced
    by ``to_*`` or use ``LoadableCell`` when several operations race.
    """

    __slots__ = ("_data", "_status", "_error")

    # Mutable, so not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        data: Optional[D] = None,
        status: LoadableStatus = LoadableStatus.INITIAL,
        error: Optional[E] = None
    ):
        self._data = data
        self._status = status
        self._error = error

    # Status predicates

    @property
    def is_initial(self) -> bool:
        return self._status == LoadableStatus.INITIAL

    @property
    def is_loading(self) -> bool:
        return self._status == LoadableStatus.LOADING

    @property
    def is_loaded(self) -> bool:
        return self._status == LoadableStatus.LOADED

    @property
    def is_creating(self) -> bool:
        return self._status == LoadableStatus.CREATING

    @property
    def is_created(self) -> bool:
        return self._status == LoadableStatus.CREATED

    @property
    def is_updating(self) -> bool:
        return self._status == LoadableStatus.UPDATING

    @property
    def is_updated(self) -> bool:
        return self._status == LoadableStatus.UPDATED

    @property
    def is_deleting(self) -> bool:
        return self._status == LoadableStatus.DELETING

    @property
    def is_deleted(self) -> bool:
        return self._status == LoadableStatus.DELETED

    @property
    def is_failed(self) -> bool:
        return self._status == LoadableStatus.FAILED

    # Group predicates

    @property
    def is_in_progress(self) -> bool:
        """True while loading, creating, updating or deleting."""
        return self.is_loading or self.is_creating or self.is_updating or self.is_deleting

    @property
    def is_initial_or_loaded(self) -> bool:
        return self.is_initial or self.is_loaded

    @property
    def is_persisted(self) -> bool:
        """True once created or updated."""
        return self.is_created or self.is_updated

    @property
    def is_completed(self) -> bool:
        """True after a successful load, create, update or delete."""
        return self.is_loaded or self.is_created or self.is_updated or self.is_deleted

    # Accessors

    @property
    def data(self) -> Optional[D]:
        """Current data, or None if nothing has been loaded."""
        return self._data

    @property
    def status(self) -> LoadableStatus:
        return self._status

    @property
    def error(self) -> Optional[E]:
        """Error reported by the last failed operation, or None."""
        return self._error

    # Pure transitions

    def to_initial(self, data: Optional[D] = None) -> "Loadable[D, E]":
        return Loadable(data, LoadableStatus.INITIAL)

    def to_loading(self) -> "Loadable[D, E]":
        return Loadable(self._data, LoadableStatus.LOADING)

    def to_loaded(self, data: D) -> "Loadable[D, E]":
        return Loadable(data, LoadableStatus.LOADED)

    def to_creating(self) -> "Loadable[D, E]":
        return Loadable(self._data, LoadableStatus.CREATING)

    def to_created(self, data: D) -> "Loadable[D, E]":
        return Loadable(data, LoadableStatus.CREATED)

    def to_updating(self) -> "Loadable[D, E]":
        return Loadable(self._data, LoadableStatus.UPDATING)

    def to_updated(self, data: D) -> "Loadable[D, E]":
        return Loadable(data, LoadableStatus.UPDATED)

    def to_deleting(self) -> "Loadable[D, E]":
        return Loadable(self._data, LoadableStatus.DELETING)

    def to_deleted(self) -> "Loadable[D, E]":
        return Loadable(None, LoadableStatus.DELETED)

    def to_failed(self, error: E) -> "Loadable[D, E]":
        """Return a FAILED copy that keeps the current data."""
        return Loadable(self._data, LoadableStatus.FAILED, error)

    # In-place transitions

    def set_initial(self, data: Optional[D] = None) -> None:
        self._set_status(LoadableStatus.INITIAL, data)

    def set_loading(self) -> None:
        self._set_status(LoadableStatus.LOADING, self._data)

    def set_loaded(self, data: D) -> None:
        self._set_status(LoadableStatus.LOADED, data)

    def set_creating(self) -> None:
        self._set_status(LoadableStatus.CREATING, self._data)

    def set_created(self, data: D) -> None:
        self._set_status(LoadableStatus.CREATED, data)

    def set_updating(self) -> None:
        self._set_status(LoadableStatus.UPDATING, self._data)

    def set_updated(self, data: D) -> None:
        self._set_status(LoadableStatus.UPDATED, data)

    def set_deleting(self) -> None:
        self._set_status(LoadableStatus.DELETING, self._data)

    def set_deleted(self) -> None:
        self._set_status(LoadableStatus.DELETED)

    def set_failed(self, error: E) -> None:
        """Move to FAILED in place, keeping the current data."""
        self._set_status(LoadableStatus.FAILED, self._data, error)

    def _set_status(
        self,
        status: LoadableStatus,
        data: Optional[D] = None,
        error: Optional[E] = None
    ) -> None:
        self._status = status
        self._data = data
        self._error = error

    def copy(self) -> "Loadable[D, E]":
        """Independent container with the same status, data and error."""
        return Loadable(self._data, self._status, self._error)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Loadable):
            return NotImplemented
        return (
            self._status == other._status
            and self._data == other._data
            and self._error == other._error
        )

    def __repr__(self) -> str:
        return (
            f"Loadable(status={self._status.value}, "
            f"data={self._data!r}, error={self._error!r})"
        )
