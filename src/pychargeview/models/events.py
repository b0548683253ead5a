"""Event records and the closed set of message types.

An :class:`Event` is immutable once constructed. The payload is kept in its
generic decoded-JSON form; :mod:`pychargeview.models.payloads` turns it into
the typed payload selected by ``message_type``.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import Field, ValidationError

from pychargeview.exceptions import DecodeError
from pychargeview.models._base import ChargeViewBaseModel, UtcDatetime


class MessageType(StrEnum):
    CONNECTOR_LIST_REQUEST = "ConnectorListRequest"
    CONNECTOR_LIST_RESPONSE = "ConnectorListResponse"
    METER_VALUES_REQUEST = "MeterValuesRequest"
    METER_VALUES_RESPONSE = "MeterValuesResponse"
    METER_VALUES_NOTIFICATION = "MeterValuesNotification"


# Request type -> response type sharing its correlation id.
RESPONSE_TYPE_FOR_REQUEST: dict[MessageType, MessageType] = {
    MessageType.CONNECTOR_LIST_REQUEST: MessageType.CONNECTOR_LIST_RESPONSE,
    MessageType.METER_VALUES_REQUEST: MessageType.METER_VALUES_RESPONSE,
}


class Event(ChargeViewBaseModel):
    """A single protocol event as stored in the event log."""

    id: str | None = None
    """Log-unique identifier; ``None`` until the log assigns one."""
    message_id: str = ""
    """Producer-assigned message identifier."""
    correlation_id: str = ""
    """Groups a request with its response(s)."""
    message_type: str
    """Type tag; kept as a string so unknown tags can be rejected explicitly."""
    occurred_at: UtcDatetime
    payload: dict[str, Any] = Field(default_factory=dict)
    """Generic decoded-JSON payload, shaped per ``message_type``."""

    @classmethod
    def from_raw(cls, raw: Any) -> Event:
        """Parse one generic JSON record into an :class:`Event`.

        Raises
        ------
        DecodeError
            If the record is not an object or misses required fields.
        """
        if not isinstance(raw, Mapping):
            raise DecodeError(f"event record must be an object, got {type(raw).__name__}")
        try:
            return cls.model_validate(dict(raw))
        except ValidationError as exc:
            raise DecodeError(
                f"invalid event record: {exc}",
                event_id=raw.get("id") if isinstance(raw.get("id"), str) else None,
                message_type=str(raw.get("messageType", "")),
            ) from exc
