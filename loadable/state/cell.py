"""
Synchronized holder for a shared Loadable.

A ``Loadable`` mutated in place by several concurrent operations is
last-write-wins. ``LoadableCell`` stores only snapshots produced by pure
transitions, swaps them under a lock and hands out epoch tokens so that the
completion of a superseded operation can be discarded.
"""

import threading
from typing import Any, Callable, Generic, Optional

from ..errors import StaleTransitionError
from ..logging.config import get_state_logger, log_status_transition
from .models import D, E, Loadable

Transition = Callable[[Loadable[D, E]], Loadable[D, E]]


class LoadableCell(Generic[D, E]):
    """
    Thread-safe single-owner cell around a Loadable snapshot.

    Typical use::

        token = cell.begin(Loadable.to_loading)
        rows = fetch()
        cell.settle(token, lambda s: s.to_loaded(rows))

    ``begin`` starts a new epoch. ``settle`` only applies when its token is
    still the latest epoch; otherwise the update is dropped (or raises, with
    ``raise_on_stale``). ``apply`` replaces the snapshot unconditionally.
    """

    def __init__(
        self,
        initial: Optional[Loadable[D, E]] = None,
        name: str = "resource",
        raise_on_stale: bool = False,
        log_transitions: bool = True
    ):
        self.name = name
        self.raise_on_stale = raise_on_stale
        self.log_transitions = log_transitions
        self.logger = get_state_logger(__name__).bind(resource=name)
        self._lock = threading.Lock()
        self._current: Loadable[D, E] = initial.copy() if initial is not None else Loadable()
        self._epoch = 0

    @classmethod
    def from_config(
        cls,
        config: dict[str, Any],
        initial: Optional[Loadable[D, E]] = None,
        name: str = "resource"
    ) -> "LoadableCell[D, E]":
        """Create a cell from a merged configuration dict (see ConfigLoader.load)."""
        cell_config = config.get("cell", {})
        return cls(
            initial=initial,
            name=name,
            raise_on_stale=cell_config.get("raise_on_stale", False),
            log_transitions=cell_config.get("log_transitions", True),
        )

    @property
    def current(self) -> Loadable[D, E]:
        """Latest snapshot. Treat it as read-only; use the cell to change it."""
        with self._lock:
            return self._current

    @property
    def epoch(self) -> int:
        with self._lock:
            return self._epoch

    def begin(self, transition: Transition) -> int:
        """Apply ``transition``, start a new epoch and return its token."""
        with self._lock:
            # The epoch only moves once the transition has produced a valid snapshot.
            updated = self._evaluate(transition)
            self._epoch += 1
            self._commit(updated, "begin")
            return self._epoch

    def settle(self, token: int, transition: Transition) -> bool:
        """
        Apply ``transition`` if ``token`` is still the latest epoch.

        Returns:
            True if applied, False if the update was stale and discarded.

        Raises:
            StaleTransitionError: If stale and ``raise_on_stale`` is set.
        """
        with self._lock:
            if token != self._epoch:
                if self.raise_on_stale:
                    self.logger.warning(
                        "Rejected stale transition",
                        token=token,
                        current_epoch=self._epoch
                    )
                    raise StaleTransitionError(self.name, token, self._epoch)

                self.logger.info(
                    "Discarded stale transition",
                    token=token,
                    current_epoch=self._epoch
                )
                return False

            self._commit(self._evaluate(transition), "settle")
            return True

    def apply(self, transition: Transition) -> Loadable[D, E]:
        """Replace the snapshot unconditionally (last write wins)."""
        with self._lock:
            return self._commit(self._evaluate(transition), "apply")

    def _evaluate(self, transition: Transition) -> Loadable[D, E]:
        """Run ``transition`` against the current snapshot without storing the result."""
        previous = self._current
        updated = transition(previous)

        if not isinstance(updated, Loadable):
            raise TypeError(
                f"Transition for {self.name} returned {type(updated).__name__}, expected Loadable"
            )
        if updated is previous:
            # In-place mutation would change a snapshot readers may hold.
            raise TypeError(f"Transition for {self.name} must return a new Loadable")

        return updated

    def _commit(self, updated: Loadable[D, E], trigger: str) -> Loadable[D, E]:
        previous = self._current
        self._current = updated

        if self.log_transitions:
            log_status_transition(
                self.logger,
                resource=self.name,
                from_status=previous.status.value,
                to_status=updated.status.value,
                trigger=trigger,
                context={"epoch": self._epoch}
            )

        return updated
