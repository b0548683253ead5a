"""Ingest gateway.

Accepts events one at a time (or as an ordered batch), rejects records whose
type tag or payload cannot be decoded, and appends the rest to the event log.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from pychargeview.eventlog.store import EventLog
from pychargeview.exceptions import AggregateIngestError
from pychargeview.models.events import Event
from pychargeview.models.payloads import decode_payload

_logger = logging.getLogger(__name__)


class EventProcessor(Protocol):
    def process_event(self, event: Event) -> str: ...


class LogEventProcessor:
    """Event processor that validates and appends to an :class:`EventLog`."""

    def __init__(self, event_log: EventLog) -> None:
        self._event_log = event_log

    def process_event(self, event: Event) -> str:
        """Validate *event* and append it to the log, returning its id.

        Raises
        ------
        UnknownEventTypeError
            If the type tag is not recognized.
        DecodeError
            If the payload does not match the tag's shape.
        """
        decode_payload(event)
        event_id = self._event_log.create(event)
        _logger.debug("Stored %s event %s", event.message_type, event_id)
        return event_id

    def process_events(self, records: Iterable[Event | Mapping[str, Any]]) -> list[str]:
        """Process a batch strictly in input order.

        Raw mappings are parsed with :meth:`Event.from_raw`. Failures do not
        stop the batch; once every record has been attempted, an
        :class:`AggregateIngestError` carrying all failures is raised.
        """
        stored: list[str] = []
        errors: list[tuple[int, Exception]] = []
        for index, record in enumerate(records):
            try:
                event = record if isinstance(record, Event) else Event.from_raw(record)
                stored.append(self.process_event(event))
            except Exception as exc:  # noqa: BLE001 - collected and re-raised below
                _logger.warning("Failed to process event #%d: %s", index, exc)
                errors.append((index, exc))

        if errors:
            raise AggregateIngestError(errors)
        return stored
