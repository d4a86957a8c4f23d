"""Activity timeline: merge profile history into one feed.

Four sources feed the timeline:
- the account's join date
- each project's creation date
- projects that made the popular ranking
- projects picked by staff

Each source is mapped to a ``TimelineEvent`` and the union is sorted
newest first. The renderer only has to know about ``EventKind``.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, Optional

from profile_insights.models import UserProfile

logger = logging.getLogger(__name__)

# Missing timestamps sort as the Unix epoch
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class EventKind(str, Enum):
    ACCOUNT_JOINED = "AccountJoined"
    CONTENT_CREATED = "ContentCreated"
    CONTENT_RANKED = "ContentRanked"
    CONTENT_FEATURED = "ContentFeatured"


@dataclass(frozen=True)
class TimelineEvent:
    """One entry of the activity feed.

    ``args`` holds display parameters (username or project name);
    formatting them is up to the renderer.
    """

    kind: EventKind
    timestamp: Optional[datetime]
    args: tuple[str, ...] = field(default_factory=tuple)


def _sort_key(event: TimelineEvent) -> datetime:
    ts = event.timestamp
    if ts is None:
        return EPOCH
    if ts.tzinfo is None:
        # Naive timestamps are taken as UTC so they compare with aware ones
        return ts.replace(tzinfo=timezone.utc)
    return ts


def merge(events: Iterable[TimelineEvent]) -> list[TimelineEvent]:
    """Sort events newest first.

    Events without a timestamp sort as the epoch, i.e. last. Events with
    equal timestamps keep their input order.
    """
    return sorted(events, key=_sort_key, reverse=True)


def collect_events(profile: UserProfile) -> list[TimelineEvent]:
    """Map the profile's four history sources to timeline events.

    Returns the events source by source, unsorted.
    """
    joined = [
        TimelineEvent(EventKind.ACCOUNT_JOINED, profile.joined, (profile.username,))
    ]
    created = [
        TimelineEvent(EventKind.CONTENT_CREATED, p.created, (p.name,))
        for p in profile.projects
    ]
    ranked = [
        TimelineEvent(EventKind.CONTENT_RANKED, p.ranked, (p.name,))
        for p in profile.projects
        if p.ranked
    ]
    featured = [
        TimelineEvent(EventKind.CONTENT_FEATURED, p.staff_picked, (p.name,))
        for p in profile.projects
        if p.staff_picked
    ]
    logger.debug(
        f"Timeline sources for @{profile.username}: {len(created)} created, "
        f"{len(ranked)} ranked, {len(featured)} featured"
    )
    return joined + created + ranked + featured


def build_timeline(profile: UserProfile) -> list[TimelineEvent]:
    """Build the merged, newest-first activity feed for a profile."""
    return merge(collect_events(profile))
