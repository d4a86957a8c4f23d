"""Profile analytics — popularity ranking, activity timeline, summary.

Key modules:
- ranking: weighted popularity scores reduced to chart buckets
- timeline: merge of the profile's history sources into one feed
- summary: totals for the profile's info cards
"""

from profile_insights.analytics.ranking import (
    RankBucket,
    RawItem,
    ScoredItem,
    Weights,
    bucket_sum,
    rank,
    rank_profile,
    score_item,
    share_percent,
)
from profile_insights.analytics.summary import ProfileSummary, summarize
from profile_insights.analytics.timeline import (
    EventKind,
    TimelineEvent,
    build_timeline,
    collect_events,
    merge,
)

__all__ = [
    # Ranking
    "RankBucket",
    "RawItem",
    "ScoredItem",
    "Weights",
    "bucket_sum",
    "rank",
    "rank_profile",
    "score_item",
    "share_percent",
    # Timeline
    "EventKind",
    "TimelineEvent",
    "build_timeline",
    "collect_events",
    "merge",
    # Summary
    "ProfileSummary",
    "summarize",
]
