"""Full-rescan projection of charging stations from the event log.

:class:`BasicProjection` keeps no derived state. Every query scans the log,
decodes each event once, isolates the newest relevant event per message
type for the station, follows request -> response correlation ids and
merges meter readings newest-wins. Two calls on an unchanged log produce
identical results.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TypeVar

from pychargeview.eventlog.store import EventLog
from pychargeview.exceptions import ChargeViewError, DecodeError, StationNotFoundError
from pychargeview.models._base import ChargeViewBaseModel
from pychargeview.models.events import RESPONSE_TYPE_FOR_REQUEST, Event, MessageType
from pychargeview.models.payloads import (
    ConnectorListResponsePayload,
    MeterValuesNotificationPayload,
    MeterValuesResponsePayload,
    Payload,
    decode_payload,
    station_id_of,
)
from pychargeview.models.station import ChargingStation, Connector
from pychargeview.projection.policy import is_newer, later, newest, should_overwrite_reading

_logger = logging.getLogger(__name__)

_P = TypeVar("_P", bound=ChargeViewBaseModel)

# Event types whose payload tells how many connectors a station has.
_CONNECTOR_COUNT_TYPES: tuple[MessageType, ...] = (
    MessageType.CONNECTOR_LIST_RESPONSE,
    MessageType.METER_VALUES_NOTIFICATION,
    MessageType.METER_VALUES_RESPONSE,
)


def _decode_as(event: Event, model: type[_P]) -> _P:
    payload = decode_payload(event)
    if not isinstance(payload, model):
        raise DecodeError(
            f"event {event.id!r} decoded to {type(payload).__name__}, expected {model.__name__}",
            event_id=event.id,
            message_type=event.message_type,
        )
    return payload


def _connector_count(payload: Payload) -> int:
    if isinstance(payload, ConnectorListResponsePayload):
        return payload.num_connectors
    if isinstance(payload, (MeterValuesNotificationPayload, MeterValuesResponsePayload)):
        return len(payload.meter_values)
    return 0


def _find_connector(connectors: list[Connector], connector_id: str) -> int | None:
    for index, connector in enumerate(connectors):
        if connector.id == connector_id:
            return index
    return None


class BasicProjection:
    """Read-only current-state view over an :class:`EventLog`."""

    def __init__(self, event_log: EventLog, *, skip_broken_stations: bool = True) -> None:
        self._event_log = event_log
        self._skip_broken_stations = skip_broken_stations

    def _decoded_events(self) -> list[tuple[Event, Payload]]:
        return [(event, decode_payload(event)) for event in self._event_log.get_all()]

    def station_ids(self) -> list[str]:
        """Return the distinct station ids in first-encounter order.

        Only requests and notifications name a station; responses are skipped.
        """
        seen: set[str] = set()
        station_ids: list[str] = []
        for _event, payload in self._decoded_events():
            station_id = station_id_of(payload)
            if station_id is not None and station_id not in seen:
                seen.add(station_id)
                station_ids.append(station_id)
        return station_ids

    def latest_events_for(self, station_id: str) -> dict[MessageType, Event]:
        """Return the newest relevant event per message type for *station_id*.

        Requests and notifications are matched on their payload's station id.
        Responses carry none, so each retained request pulls in the newest
        response sharing its correlation id. The mapping is empty when the
        station is unknown.
        """
        latest: dict[MessageType, Event] = {}
        for event, payload in self._decoded_events():
            if station_id_of(payload) != station_id:
                continue
            message_type = MessageType(event.message_type)
            if is_newer(event, latest.get(message_type)):
                latest[message_type] = event

        for request_type, response_type in RESPONSE_TYPE_FOR_REQUEST.items():
            request = latest.get(request_type)
            if request is None:
                continue
            response = newest(
                candidate
                for candidate in self._event_log.get_by_correlation_id(request.correlation_id)
                if candidate.message_type == response_type
            )
            if response is not None:
                latest[response_type] = response

        _logger.debug("Latest events for %s: %s", station_id, {str(t): e.id for t, e in latest.items()})
        return latest

    def num_charging_stations(self) -> int:
        return len(self.station_ids())

    def num_connectors(self, station_id: str) -> int:
        """Return the connector count reported by the station's newest counting event.

        Raises
        ------
        StationNotFoundError
            If no event references *station_id*.
        """
        latest = self.latest_events_for(station_id)
        if not latest:
            raise StationNotFoundError(station_id)

        counting_event = newest(latest[t] for t in _CONNECTOR_COUNT_TYPES if t in latest)
        if counting_event is None:
            return 0
        return _connector_count(decode_payload(counting_event))

    def charging_station(self, station_id: str) -> ChargingStation:
        """Reconstruct the current state of *station_id* from the log.

        Raises
        ------
        StationNotFoundError
            If no event references *station_id*.
        DecodeError
            If a contributing event's payload cannot be decoded.
        """
        latest = self.latest_events_for(station_id)
        if not latest:
            raise StationNotFoundError(station_id)

        connectors: list[Connector] = []
        latest_event_time: datetime | None = None

        notification = latest.get(MessageType.METER_VALUES_NOTIFICATION)
        if notification is not None:
            notification_payload = _decode_as(notification, MeterValuesNotificationPayload)
            connectors = [
                Connector(
                    id=meter_value.connector_id,
                    charging_station_id=station_id,
                    reading=meter_value.reading,
                    updated_at=notification.occurred_at,
                )
                for meter_value in notification_payload.meter_values
            ]
            latest_event_time = notification.occurred_at

        response = latest.get(MessageType.METER_VALUES_RESPONSE)
        if response is not None:
            response_payload = _decode_as(response, MeterValuesResponsePayload)
            for meter_value in response_payload.meter_values:
                index = _find_connector(connectors, meter_value.connector_id)
                if index is not None and should_overwrite_reading(connectors[index].updated_at, response.occurred_at):
                    connectors[index] = connectors[index].model_copy(
                        update={"reading": meter_value.reading, "updated_at": response.occurred_at}
                    )
                else:
                    # Unknown ids and readings that are not newer both become a new entry.
                    connectors.append(
                        Connector(
                            id=meter_value.connector_id,
                            charging_station_id=station_id,
                            reading=meter_value.reading,
                            updated_at=response.occurred_at,
                        )
                    )
            latest_event_time = later(latest_event_time, response.occurred_at)

        num_connectors = len(connectors)
        if not connectors:
            connector_list = latest.get(MessageType.CONNECTOR_LIST_RESPONSE)
            if connector_list is not None:
                num_connectors = _decode_as(connector_list, ConnectorListResponsePayload).num_connectors
                latest_event_time = later(latest_event_time, connector_list.occurred_at)

        return ChargingStation(
            id=station_id,
            num_connectors=num_connectors,
            connectors=connectors,
            updated_at=latest_event_time,
        )

    def charging_stations(self) -> list[ChargingStation]:
        """Reconstruct every known station.

        Stations that fail to project are skipped (and logged) unless the
        projection was created with ``skip_broken_stations=False``.
        """
        stations: list[ChargingStation] = []
        for station_id in self.station_ids():
            try:
                stations.append(self.charging_station(station_id))
            except ChargeViewError as exc:
                if not self._skip_broken_stations:
                    raise
                _logger.warning("Skipping charging station %s: %s", station_id, exc)
        return stations
