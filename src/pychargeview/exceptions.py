"""Custom exception hierarchy for pychargeview."""

from __future__ import annotations


class ChargeViewError(Exception):
    """Base exception for all pychargeview errors."""


class ChargeViewConfigError(ChargeViewError):
    """Invalid configuration value."""


class EventNotFoundError(ChargeViewError):
    """No event is stored under the requested identifier."""

    def __init__(self, event_id: str) -> None:
        self.event_id = event_id
        super().__init__(f"event not found: {event_id!r}")


class StationNotFoundError(ChargeViewError):
    """No event in the log references the requested station."""

    def __init__(self, station_id: str) -> None:
        self.station_id = station_id
        super().__init__(f"charging station not found: {station_id!r}")


class DecodeError(ChargeViewError):
    """An event record or payload does not match the shape of its message type."""

    def __init__(
        self,
        message: str,
        *,
        event_id: str | None = None,
        message_type: str = "",
    ) -> None:
        self.event_id = event_id
        self.message_type = message_type
        super().__init__(message)


class UnknownEventTypeError(DecodeError):
    """Message type tag is not one of the recognized tags.

    Subclasses :class:`DecodeError` so callers that only care about
    "this event could not be decoded" can catch a single type.
    """

    def __init__(self, message_type: str, *, event_id: str | None = None) -> None:
        super().__init__(
            f"unknown event type: {message_type!r}",
            event_id=event_id,
            message_type=message_type,
        )


class AggregateIngestError(ChargeViewError):
    """One or more events of a batch failed ingestion.

    The batch is still processed to completion. ``errors`` holds
    ``(index, exception)`` pairs in input order, where ``index`` is the
    position of the failing record in the batch.
    """

    def __init__(self, errors: list[tuple[int, Exception]]) -> None:
        self.errors = list(errors)
        details = "; ".join(f"#{index}: {error}" for index, error in self.errors)
        super().__init__(f"{len(self.errors)} event(s) failed ingestion: {details}")
