"""Typed payloads and the tag-dispatched payload decoder.

Each message type has exactly one payload model. :func:`decode_payload`
resolves the model from the event's tag and validates the generic payload
against it; unknown tags are rejected rather than falling through.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError, field_validator

from pychargeview.exceptions import DecodeError, UnknownEventTypeError
from pychargeview.models._base import ChargeViewBaseModel
from pychargeview.models.events import Event, MessageType


class MeterValue(ChargeViewBaseModel):
    """A reading reported for a single connector."""

    connector_id: str
    reading: str

    @field_validator("connector_id", "reading", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> Any:
        # Readings and ids are opaque; accept bare JSON numbers.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class ConnectorListRequestPayload(ChargeViewBaseModel):
    station_id: str


class ConnectorListResponsePayload(ChargeViewBaseModel):
    num_connectors: int


class MeterValuesRequestPayload(ChargeViewBaseModel):
    station_id: str
    connector_id: str | None = None


class MeterValuesResponsePayload(ChargeViewBaseModel):
    meter_values: list[MeterValue]


class MeterValuesNotificationPayload(ChargeViewBaseModel):
    station_id: str
    meter_values: list[MeterValue]


Payload = (
    ConnectorListRequestPayload
    | ConnectorListResponsePayload
    | MeterValuesRequestPayload
    | MeterValuesResponsePayload
    | MeterValuesNotificationPayload
)

PAYLOAD_MODELS: dict[MessageType, type[ChargeViewBaseModel]] = {
    MessageType.CONNECTOR_LIST_REQUEST: ConnectorListRequestPayload,
    MessageType.CONNECTOR_LIST_RESPONSE: ConnectorListResponsePayload,
    MessageType.METER_VALUES_REQUEST: MeterValuesRequestPayload,
    MessageType.METER_VALUES_RESPONSE: MeterValuesResponsePayload,
    MessageType.METER_VALUES_NOTIFICATION: MeterValuesNotificationPayload,
}


def message_type_of(event: Event) -> MessageType:
    """Return the event's tag as a :class:`MessageType`.

    Raises
    ------
    UnknownEventTypeError
        If the tag is not one of the recognized message types.
    """
    try:
        return MessageType(event.message_type)
    except ValueError:
        raise UnknownEventTypeError(event.message_type, event_id=event.id) from None


def decode_payload(event: Event) -> Payload:
    """Convert the event's generic payload into its typed payload.

    Raises
    ------
    UnknownEventTypeError
        If the tag is not recognized.
    DecodeError
        If the payload cannot be coerced into the tag's shape.
    """
    message_type = message_type_of(event)
    model = PAYLOAD_MODELS[message_type]
    try:
        payload: Payload = model.model_validate(event.payload)  # type: ignore[assignment]
    except ValidationError as exc:
        raise DecodeError(
            f"invalid {message_type} payload in event {event.id!r}: {exc}",
            event_id=event.id,
            message_type=message_type,
        ) from exc
    return payload


def station_id_of(payload: Payload) -> str | None:
    """Return the station id named by *payload*.

    Responses carry no station id of their own and yield ``None``; an empty
    station id is treated as absent.
    """
    if isinstance(
        payload,
        (ConnectorListRequestPayload, MeterValuesRequestPayload, MeterValuesNotificationPayload),
    ):
        return payload.station_id or None
    return None
