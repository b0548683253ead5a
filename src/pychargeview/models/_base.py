"""Base model shared by every pychargeview record.

:class:`ChargeViewBaseModel` provides:

* ``alias_generator=to_camel`` so the camelCase keys of the JSON event
  records map automatically to snake_case fields.
* ``frozen=True`` so a record never changes once constructed.
* ``extra="ignore"`` so producers may add fields without breaking decoding.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def ensure_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC so all timestamps are comparable."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]
"""Annotated type that parses ISO-8601 timestamps into timezone-aware datetimes."""


class ChargeViewBaseModel(BaseModel):
    """Base for event records, payloads and derived entities."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
