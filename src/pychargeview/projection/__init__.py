"""Projection layer: derived current-state views over the event log."""

from pychargeview.projection.basic import BasicProjection

__all__ = ["BasicProjection"]
