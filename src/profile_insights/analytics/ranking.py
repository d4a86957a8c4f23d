"""Popularity ranking — weighted scores reduced to chart buckets.

Each project gets a popularity score from its engagement counters:

    score = views * view + likes * like + comments * comment + remakes * remake

Scores are rounded up to whole numbers, sorted from most to least
popular, and capped at ``max_buckets`` entries. When there are more
projects than that, the tail is folded into one "other" bucket so the
chart stays readable.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from profile_insights.config import Config
from profile_insights.models import UserProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Weights:
    """Multipliers for the four engagement counters."""

    view: float = 0.02
    like: float = 1.0
    comment: float = 1.1
    remake: float = 5.0


@dataclass(frozen=True)
class RawItem:
    """Minimal scoring input. ``ContentItem`` has the same attributes."""

    name: str
    views: float = 0
    likes: float = 0
    comments: float = 0
    remakes: float = 0


@dataclass(frozen=True)
class ScoredItem:
    name: str
    score: float


@dataclass(frozen=True)
class RankBucket:
    """One slice of the popularity chart."""

    name: str
    amount: int


def score_item(item: RawItem, weights: Weights) -> ScoredItem:
    """Compute the unrounded popularity score of one item."""
    score = (
        item.views * weights.view
        + item.likes * weights.like
        + item.comments * weights.comment
        + item.remakes * weights.remake
    )
    return ScoredItem(name=item.name, score=score)


def rank(
    items: Iterable[RawItem],
    weights: Weights,
    max_buckets: int,
    other_label: str = "Other",
) -> list[RankBucket]:
    """Reduce items to a bounded, descending list of chart buckets.

    Items are scored, rounded up and sorted by amount (ties keep their
    input order). If there are more than ``max_buckets`` items, the first
    ``max_buckets - 1`` are kept and everything from index
    ``max_buckets - 1`` onward is summed into a trailing ``other_label``
    bucket, so ``max_buckets=1`` collapses the whole input into it.

    Inputs are not validated; counters and weights must be non-negative.

    Args:
        items: Anything with name/views/likes/comments/remakes attributes.
        weights: Multipliers for the engagement counters.
        max_buckets: Maximum number of buckets returned (>= 1).
        other_label: Name of the synthetic remainder bucket.

    Returns:
        Buckets sorted by amount, remainder bucket last.
    """
    buckets = [
        RankBucket(name=scored.name, amount=math.ceil(scored.score))
        for scored in (score_item(item, weights) for item in items)
    ]
    buckets.sort(key=lambda b: b.amount, reverse=True)

    if len(buckets) <= max_buckets:
        return buckets

    keep = max_buckets - 1
    overflow = buckets[keep:]
    logger.debug(f"Folding {len(overflow)} items into '{other_label}' bucket")
    other = RankBucket(name=other_label, amount=sum(b.amount for b in overflow))
    return buckets[:keep] + [other]


def bucket_sum(buckets: Sequence[RankBucket]) -> int:
    """Total amount across buckets, the denominator for percentages."""
    return sum(b.amount for b in buckets)


def share_percent(amount: int, total: int) -> float:
    """Percentage of ``total`` taken by ``amount``, to two decimals."""
    if total == 0:
        return 0.0
    return round(amount / total * 100, 2)


def rank_profile(profile: UserProfile, config: Config) -> list[RankBucket]:
    """Rank a profile's public projects with the configured weights."""
    return rank(
        profile.projects,
        config.weights,
        config.max_project_rank,
        other_label=config.other_label,
    )
