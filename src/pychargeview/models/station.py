"""Derived current-state entities.

These are never stored: they are recomputed from the event log by
:class:`pychargeview.projection.basic.BasicProjection` on every query.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from pychargeview.models._base import ChargeViewBaseModel


class Connector(ChargeViewBaseModel):
    """A single charging port with its latest reading."""

    id: str
    charging_station_id: str
    reading: str
    updated_at: datetime | None = None
    """Occurrence time of the event that last set the reading."""


class ChargingStation(ChargeViewBaseModel):
    """A charging station as seen through the event history."""

    id: str
    num_connectors: int = 0
    connectors: list[Connector] = Field(default_factory=list)
    updated_at: datetime | None = None
    """Occurrence time of the latest contributing event (``None`` if only requests were seen)."""
