"""Chronological timeline text output.

Renders merged timeline events as one line per event, newest first,
with a per-kind message template.
"""

import logging

from profile_insights.analytics.timeline import EventKind, TimelineEvent
from profile_insights.config import Config

logger = logging.getLogger(__name__)

# One template per event kind; positional args come from TimelineEvent.args
EVENT_TEMPLATES: dict[EventKind, str] = {
    EventKind.ACCOUNT_JOINED: "@{0} joined",
    EventKind.CONTENT_CREATED: "Created project '{0}'",
    EventKind.CONTENT_RANKED: "'{0}' made the popular projects",
    EventKind.CONTENT_FEATURED: "'{0}' was picked by staff",
}

NO_DATE = "-" * 10
EMPTY_TIMELINE = "No activity yet."


def describe_event(event: TimelineEvent) -> str:
    """Format the message for a single event."""
    return EVENT_TEMPLATES[event.kind].format(*event.args)


def generate_timeline(events: list[TimelineEvent], config: Config) -> str:
    """Generate a formatted chronological timeline.

    Args:
        events: Merged timeline events, already in display order.
        config: Application configuration.

    Returns:
        Formatted timeline string.
    """
    if not events:
        return EMPTY_TIMELINE

    lines = []
    for event in events:
        date = event.timestamp.strftime(config.date_format) if event.timestamp else NO_DATE
        lines.append(f"{date}  {describe_event(event)}")
    logger.debug(f"Rendered {len(lines)} timeline lines")
    return "\n".join(lines)
