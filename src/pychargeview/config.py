"""Runtime configuration for pychargeview."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pychargeview.exceptions import ChargeViewConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class ChargeViewConfig:
    """Configuration shared by the event log, projection and CLI.

    Parameters
    ----------
    event_id_prefix : str
        Prefix for identifiers the event log generates for events
        submitted without one (``"event-"`` yields ``event-1``, ``event-2``...).
    log_level : str
        Logging level name used by the command-line harness.
    json_indent : int
        Indentation used when pretty-printing derived stations.
    skip_broken_stations : bool
        When ``True`` (default) the station listing skips stations whose
        projection fails. When ``False`` the first failure propagates.
    """

    event_id_prefix: str = "event-"
    log_level: str = "INFO"
    json_indent: int = 2
    skip_broken_stations: bool = True

    @classmethod
    def from_env(cls, **overrides: Any) -> ChargeViewConfig:
        """Create configuration from ``CHARGEVIEW_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        ChargeViewConfigError
            If a numeric variable cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        prefix = env.get("CHARGEVIEW_EVENT_ID_PREFIX")
        if prefix is not None:
            config_kwargs["event_id_prefix"] = prefix

        level = env.get("CHARGEVIEW_LOG_LEVEL")
        if level is not None:
            config_kwargs["log_level"] = level.strip().upper()

        indent_env = env.get("CHARGEVIEW_JSON_INDENT")
        if indent_env is not None and "json_indent" not in overrides:
            try:
                config_kwargs["json_indent"] = int(indent_env)
            except ValueError:
                raise ChargeViewConfigError(
                    f"CHARGEVIEW_JSON_INDENT must be an integer, got {indent_env!r}"
                ) from None

        config_kwargs["skip_broken_stations"] = _env_bool(
            env.get("CHARGEVIEW_SKIP_BROKEN_STATIONS"),
            True,
        )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
