"""Tests for event record parsing and tag-dispatched payload decoding."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from pychargeview.exceptions import DecodeError, UnknownEventTypeError
from pychargeview.models.events import Event, MessageType
from pychargeview.models.payloads import (
    ConnectorListRequestPayload,
    ConnectorListResponsePayload,
    MeterValue,
    MeterValuesNotificationPayload,
    MeterValuesRequestPayload,
    MeterValuesResponsePayload,
    decode_payload,
    station_id_of,
)


def _event(message_type: str, payload: dict[str, Any]) -> Event:
    return Event(
        id="e1",
        correlation_id="c1",
        message_type=message_type,
        occurred_at=datetime(2024, 1, 1, tzinfo=UTC),
        payload=payload,
    )


# ------------------------------------------------------------------
# Event.from_raw
# ------------------------------------------------------------------


class TestEventFromRaw:
    SAMPLE: dict = {
        "id": "event-7",
        "messageId": "m-7",
        "correlationId": "c-7",
        "messageType": "MeterValuesNotification",
        "occurredAt": "2024-03-01T10:15:00Z",
        "payload": {"stationId": "CS-1", "meterValues": [{"connectorId": "1", "reading": "12.5"}]},
    }

    def test_parses_camel_case_record(self) -> None:
        event = Event.from_raw(self.SAMPLE)

        assert event.id == "event-7"
        assert event.message_id == "m-7"
        assert event.correlation_id == "c-7"
        assert event.message_type == MessageType.METER_VALUES_NOTIFICATION
        assert event.occurred_at == datetime(2024, 3, 1, 10, 15, tzinfo=UTC)
        assert event.payload["stationId"] == "CS-1"

    def test_naive_timestamp_is_utc(self) -> None:
        event = Event.from_raw({**self.SAMPLE, "occurredAt": "2024-03-01T10:15:00"})

        assert event.occurred_at.tzinfo is UTC

    def test_missing_id_is_none(self) -> None:
        raw = dict(self.SAMPLE)
        del raw["id"]

        assert Event.from_raw(raw).id is None

    def test_unknown_message_type_is_still_a_record(self) -> None:
        event = Event.from_raw({**self.SAMPLE, "messageType": "Heartbeat"})

        assert event.message_type == "Heartbeat"

    def test_missing_timestamp_raises_decode_error(self) -> None:
        raw = dict(self.SAMPLE)
        del raw["occurredAt"]

        with pytest.raises(DecodeError) as exc_info:
            Event.from_raw(raw)

        assert exc_info.value.event_id == "event-7"
        assert exc_info.value.message_type == "MeterValuesNotification"

    def test_non_object_record_raises_decode_error(self) -> None:
        with pytest.raises(DecodeError):
            Event.from_raw(["not", "an", "object"])

    def test_dump_uses_wire_names(self) -> None:
        dumped = Event.from_raw(self.SAMPLE).model_dump(by_alias=True)

        assert set(dumped) == {"id", "messageId", "correlationId", "messageType", "occurredAt", "payload"}


# ------------------------------------------------------------------
# decode_payload
# ------------------------------------------------------------------


class TestDecodePayload:
    def test_connector_list_request(self) -> None:
        payload = decode_payload(_event("ConnectorListRequest", {"stationId": "CS-1"}))

        assert payload == ConnectorListRequestPayload(station_id="CS-1")

    def test_connector_list_response_coerces_numeric_string(self) -> None:
        payload = decode_payload(_event("ConnectorListResponse", {"numConnectors": "2"}))

        assert isinstance(payload, ConnectorListResponsePayload)
        assert payload.num_connectors == 2

    def test_meter_values_request_with_optional_connector(self) -> None:
        payload = decode_payload(_event("MeterValuesRequest", {"stationId": "CS-1", "connectorId": "2"}))

        assert payload == MeterValuesRequestPayload(station_id="CS-1", connector_id="2")

    def test_meter_values_response(self) -> None:
        payload = decode_payload(
            _event("MeterValuesResponse", {"meterValues": [{"connectorId": "1", "reading": "100"}]})
        )

        assert isinstance(payload, MeterValuesResponsePayload)
        assert payload.meter_values == [MeterValue(connector_id="1", reading="100")]

    def test_meter_values_notification_accepts_numeric_readings(self) -> None:
        payload = decode_payload(
            _event(
                "MeterValuesNotification",
                {"stationId": "CS-1", "meterValues": [{"connectorId": 1, "reading": 12.5}]},
            )
        )

        assert isinstance(payload, MeterValuesNotificationPayload)
        assert payload.meter_values[0].connector_id == "1"
        assert payload.meter_values[0].reading == "12.5"

    def test_extra_fields_are_ignored(self) -> None:
        payload = decode_payload(_event("ConnectorListRequest", {"stationId": "CS-1", "vendor": "ACME"}))

        assert payload == ConnectorListRequestPayload(station_id="CS-1")

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(UnknownEventTypeError) as exc_info:
            decode_payload(_event("BootNotification", {}))

        assert exc_info.value.message_type == "BootNotification"
        assert exc_info.value.event_id == "e1"

    @pytest.mark.parametrize(
        ("message_type", "payload"),
        [
            ("ConnectorListRequest", {}),
            ("ConnectorListResponse", {"numConnectors": "many"}),
            ("MeterValuesResponse", {"meterValues": "100"}),
            ("MeterValuesNotification", {"stationId": "CS-1", "meterValues": [{"reading": "1"}]}),
        ],
    )
    def test_shape_mismatch_raises_decode_error(self, message_type: str, payload: dict[str, Any]) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_payload(_event(message_type, payload))

        assert not isinstance(exc_info.value, UnknownEventTypeError)
        assert exc_info.value.message_type == message_type


# ------------------------------------------------------------------
# station_id_of
# ------------------------------------------------------------------


def test_station_id_of_requests_and_notifications() -> None:
    assert station_id_of(ConnectorListRequestPayload(station_id="CS-1")) == "CS-1"
    assert station_id_of(MeterValuesRequestPayload(station_id="CS-2")) == "CS-2"
    assert station_id_of(MeterValuesNotificationPayload(station_id="CS-3", meter_values=[])) == "CS-3"


def test_station_id_of_responses_is_none() -> None:
    assert station_id_of(ConnectorListResponsePayload(num_connectors=2)) is None
    assert station_id_of(MeterValuesResponsePayload(meter_values=[])) is None


def test_empty_station_id_is_absent() -> None:
    assert station_id_of(ConnectorListRequestPayload(station_id="")) is None
