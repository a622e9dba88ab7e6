"""Timeline feature - merged, filterable feed of all health records."""

from app.features.timeline.aggregator import build_timeline
from app.features.timeline.schemas import TimelineEntry, TimelineFilter

__all__ = ["build_timeline", "TimelineEntry", "TimelineFilter"]
