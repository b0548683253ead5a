"""Data models for events, payloads and derived stations."""

from pychargeview.models._base import ChargeViewBaseModel, UtcDatetime, ensure_utc
from pychargeview.models.events import (
    RESPONSE_TYPE_FOR_REQUEST,
    Event,
    MessageType,
)
from pychargeview.models.payloads import (
    PAYLOAD_MODELS,
    ConnectorListRequestPayload,
    ConnectorListResponsePayload,
    MeterValue,
    MeterValuesNotificationPayload,
    MeterValuesRequestPayload,
    MeterValuesResponsePayload,
    Payload,
    decode_payload,
    message_type_of,
    station_id_of,
)
from pychargeview.models.station import ChargingStation, Connector

__all__ = [
    "ChargeViewBaseModel",
    "ChargingStation",
    "Connector",
    "ConnectorListRequestPayload",
    "ConnectorListResponsePayload",
    "Event",
    "MessageType",
    "MeterValue",
    "MeterValuesNotificationPayload",
    "MeterValuesRequestPayload",
    "MeterValuesResponsePayload",
    "PAYLOAD_MODELS",
    "Payload",
    "RESPONSE_TYPE_FOR_REQUEST",
    "UtcDatetime",
    "decode_payload",
    "ensure_utc",
    "message_type_of",
    "station_id_of",
]
