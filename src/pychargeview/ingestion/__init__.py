"""Ingestion layer: the producer side of the event log."""

from pychargeview.ingestion.processor import EventProcessor, LogEventProcessor

__all__ = ["EventProcessor", "LogEventProcessor"]
