"""Deterministic newest-wins policy.

Events are ordered by occurrence time; equal timestamps fall back to the
event id so the outcome never depends on the order the log was scanned in.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from pychargeview.models.events import Event


def recency_key(event: Event) -> tuple[datetime, str]:
    return (event.occurred_at, event.id or "")


def is_newer(candidate: Event, current: Event | None) -> bool:
    """Return ``True`` when *candidate* should replace *current*."""
    if current is None:
        return True
    return recency_key(candidate) > recency_key(current)


def newest(events: Iterable[Event]) -> Event | None:
    """Return the most recent event of *events*, or ``None`` if there are none."""
    result: Event | None = None
    for event in events:
        if is_newer(event, result):
            result = event
    return result


def should_overwrite_reading(current_updated_at: datetime | None, incoming_at: datetime) -> bool:
    """A stored reading is replaced only by a strictly newer one."""
    return current_updated_at is not None and current_updated_at < incoming_at


def later(current: datetime | None, candidate: datetime) -> datetime:
    if current is None or candidate > current:
        return candidate
    return current
