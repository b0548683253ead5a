"""Append-only, thread-safe in-memory event log.

This is the only component that holds events. Everything above it reads
snapshots and never mutates a stored record.
"""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Protocol

from pychargeview.exceptions import EventNotFoundError
from pychargeview.models.events import Event

_logger = logging.getLogger(__name__)


class EventLog(Protocol):
    """Contract the ingest gateway and projections depend on."""

    def create(self, event: Event) -> str: ...

    def get(self, event_id: str) -> Event: ...

    def get_by_correlation_id(self, correlation_id: str) -> list[Event]: ...

    def get_all(self) -> list[Event]: ...


class InMemoryEventLog:
    """Event log backed by a dict and guarded by a single lock.

    Every operation holds the lock for its whole duration, so all calls are
    linearizable with respect to each other and a reader never observes a
    partially applied :meth:`create`.

    Events are copied on the way in and on the way out, so no caller can
    mutate a stored record.

    Identifiers for events submitted without one come from a monotonic
    counter (``<prefix>1``, ``<prefix>2``...) that is independent of the
    number of stored records and skips identifiers already in use.
    """

    def __init__(self, *, id_prefix: str = "event-") -> None:
        self._id_prefix = id_prefix
        self._counter = itertools.count(1)
        self._events: dict[str, Event] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def _next_id(self) -> str:
        while True:
            candidate = f"{self._id_prefix}{next(self._counter)}"
            if candidate not in self._events:
                return candidate

    def create(self, event: Event) -> str:
        """Store *event* and return its identifier.

        An identifier is generated when the event has none. Re-creating an
        existing identifier replaces the stored record; callers must avoid it.
        """
        with self._lock:
            event_id = event.id or self._next_id()
            if event_id in self._events:
                _logger.warning("Replacing stored event %s", event_id)
            self._events[event_id] = event.model_copy(update={"id": event_id}, deep=True)
        return event_id

    def get(self, event_id: str) -> Event:
        with self._lock:
            event = self._events.get(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event.model_copy(deep=True)

    def get_by_correlation_id(self, correlation_id: str) -> list[Event]:
        """Return every event sharing *correlation_id* (possibly none), unordered."""
        with self._lock:
            return [
                event.model_copy(deep=True)
                for event in self._events.values()
                if event.correlation_id == correlation_id
            ]

    def get_all(self) -> list[Event]:
        """Return an unordered snapshot of the whole log."""
        with self._lock:
            return [event.model_copy(deep=True) for event in self._events.values()]
