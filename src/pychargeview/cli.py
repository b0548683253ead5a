"""Command-line harness: load a JSON array of events and print derived stations.

Usage::

    pychargeview --input events.json
    python -m pychargeview --input events.json --log-level DEBUG
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pychargeview.config import ChargeViewConfig
from pychargeview.eventlog.store import InMemoryEventLog
from pychargeview.exceptions import AggregateIngestError, ChargeViewConfigError, ChargeViewError
from pychargeview.ingestion.processor import LogEventProcessor
from pychargeview.projection.basic import BasicProjection

_logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pychargeview",
        description="Project charging-station state from a JSON file of protocol events.",
    )
    parser.add_argument("--input", default="", help="Path to a JSON array of event records")
    parser.add_argument("--log-level", default=None, help="Logging level (default: CHARGEVIEW_LOG_LEVEL or INFO)")
    return parser


def run(path: Path, config: ChargeViewConfig) -> int:
    """Ingest the events in *path* and log the projected stations. Returns an exit code."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _logger.error("failed to read file: %s", exc)
        return 1

    try:
        records = json.loads(text)
    except json.JSONDecodeError as exc:
        _logger.error("failed to parse json: %s", exc)
        return 1
    if not isinstance(records, list):
        _logger.error("failed to parse json: expected an array of events, got %s", type(records).__name__)
        return 1

    event_log = InMemoryEventLog(id_prefix=config.event_id_prefix)
    processor = LogEventProcessor(event_log)
    try:
        processor.process_events(records)
    except AggregateIngestError as exc:
        for index, error in exc.errors:
            _logger.error("failed to process event #%d: %s", index, error)
        _logger.error("failed to process events: %d of %d failed", len(exc.errors), len(records))
        return 1

    _logger.info("processed %d events", len(records))

    projection = BasicProjection(event_log, skip_broken_stations=config.skip_broken_stations)
    try:
        _logger.info("num charging stations: %d", projection.num_charging_stations())
        stations = projection.charging_stations()
    except ChargeViewError as exc:
        _logger.error("failed to project charging stations: %s", exc)
        return 1

    for station in stations:
        _logger.info(
            "charging station: %s",
            station.model_dump_json(by_alias=True, indent=config.json_indent),
        )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    overrides = {"log_level": args.log_level.upper()} if args.log_level else {}
    try:
        config = ChargeViewConfig.from_env(**overrides)
    except ChargeViewConfigError as exc:
        print(f"pychargeview: configuration error: {exc}", file=sys.stderr)
        return 1

    if not args.input:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(Path(args.input), config)
