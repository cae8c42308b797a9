"""Event signals emitted by the dispatch pipeline.

Usage:
    from entitygate.domain.events import EntityOperation, EventSignal, event_signal
"""

from entitygate.domain.events.event_signal import (
    EntityOperation,
    EventSignal,
    event_signal,
)

__all__ = ["EntityOperation", "EventSignal", "event_signal"]
