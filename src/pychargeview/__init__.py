"""pychargeview - Event-sourced current-state projection for charging stations."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pychargeview")
except PackageNotFoundError:
    __version__ = "0+local"
from pychargeview.config import ChargeViewConfig
from pychargeview.eventlog import EventLog, InMemoryEventLog
from pychargeview.exceptions import (
    AggregateIngestError,
    ChargeViewConfigError,
    ChargeViewError,
    DecodeError,
    EventNotFoundError,
    StationNotFoundError,
    UnknownEventTypeError,
)
from pychargeview.ingestion import EventProcessor, LogEventProcessor
from pychargeview.models import (
    ChargingStation,
    Connector,
    Event,
    MessageType,
    MeterValue,
    decode_payload,
)
from pychargeview.projection import BasicProjection

__all__ = [
    "__version__",
    "AggregateIngestError",
    "BasicProjection",
    "ChargeViewConfig",
    "ChargeViewConfigError",
    "ChargeViewError",
    "ChargingStation",
    "Connector",
    "DecodeError",
    "Event",
    "EventLog",
    "EventNotFoundError",
    "EventProcessor",
    "InMemoryEventLog",
    "LogEventProcessor",
    "MessageType",
    "MeterValue",
    "StationNotFoundError",
    "UnknownEventTypeError",
    "decode_payload",
]
