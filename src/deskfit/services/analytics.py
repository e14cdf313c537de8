"""Analytics event sinks.

Events are fire-and-forget: a failing sink is logged and never interrupts
scoring or insight generation.
"""

from typing import Any, Protocol, runtime_checkable

import structlog

logger = structlog.get_logger()

SESSION_COMPLETED = "session_completed"
INSIGHT_GENERATED = "insight_generated"


@runtime_checkable
class AnalyticsSink(Protocol):
    """Protocol for analytics event sinks."""

    def track(self, event: str, **properties: Any) -> None:
        """Record one event with its properties."""
        ...


class LoggingAnalytics:
    """Default sink that writes events to the structured log."""

    def track(self, event: str, **properties: Any) -> None:
        logger.info("analytics_event", analytics_event=event, **properties)


class RecordingAnalytics:
    """Sink that keeps events in memory, for inspection by callers."""

    def __init__(self):
        self.events: list[tuple[str, dict]] = []

    def track(self, event: str, **properties: Any) -> None:
        self.events.append((event, properties))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


def safe_track(sink: AnalyticsSink | None, event: str, **properties: Any) -> None:
    """Send an event, logging and discarding any sink failure."""
    if sink is None:
        return
    try:
        sink.track(event, **properties)
    except Exception as e:
        logger.warning("Analytics sink failed", analytics_event=event, error=str(e))
