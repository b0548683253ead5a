"""Event log layer.

The event log is the single source of truth; every derived view is
recomputed from it.
"""

from pychargeview.eventlog.store import EventLog, InMemoryEventLog

__all__ = ["EventLog", "InMemoryEventLog"]
