"""Tests for popularity ranking.

Tests cover:
- Weighted scoring and ceiling rounding
- Bucket cap with the trailing "other" bucket
- The max_buckets - 1 overflow slice
- Totals and share percentages
"""

import math

import pytest

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
from profile_insights.config import Config
from profile_insights.models import UserProfile

DEFAULT_WEIGHTS = Weights(view=0.02, like=1, comment=1.1, remake=5)
UNIT_WEIGHTS = Weights(view=1, like=1, comment=1, remake=1)


def _items(*likes: int) -> list[RawItem]:
    """One item per likes count, named p0, p1, ..."""
    return [RawItem(name=f"p{i}", likes=n) for i, n in enumerate(likes)]


# ------------------------------------------------------------------ #
#  Scoring                                                            #
# ------------------------------------------------------------------ #


class TestScoreItem:
    """Tests for score_item()."""

    def test_weighted_sum(self):
        item = RawItem(name="A", views=100, likes=10, comments=0, remakes=0)
        assert score_item(item, DEFAULT_WEIGHTS) == ScoredItem(name="A", score=12.0)

    def test_remake_weight(self):
        item = RawItem(name="B", remakes=1)
        assert score_item(item, DEFAULT_WEIGHTS).score == 5.0

    def test_zero_counters_score_zero(self):
        assert score_item(RawItem(name="empty"), DEFAULT_WEIGHTS).score == 0


# ------------------------------------------------------------------ #
#  rank()                                                             #
# ------------------------------------------------------------------ #


class TestRank:
    """Tests for rank()."""

    def test_reference_example(self):
        """Two items under the cap come back sorted, no other bucket."""
        items = [
            RawItem(name="A", views=100, likes=10, comments=0, remakes=0),
            RawItem(name="B", views=0, likes=0, comments=0, remakes=1),
        ]
        result = rank(items, DEFAULT_WEIGHTS, max_buckets=12)
        assert result == [RankBucket("A", 12), RankBucket("B", 5)]
        assert bucket_sum(result) == 17

    def test_empty_input(self):
        assert rank([], DEFAULT_WEIGHTS, 12) == []

    def test_empty_input_with_single_bucket(self):
        assert rank([], DEFAULT_WEIGHTS, 1) == []

    def test_amount_is_ceiling(self):
        """Fractional scores round up."""
        result = rank([RawItem(name="c", comments=1)], DEFAULT_WEIGHTS, 12)
        assert result == [RankBucket("c", 2)]

    def test_sorted_descending(self):
        result = rank(_items(3, 9, 1, 5), UNIT_WEIGHTS, 10)
        assert [b.amount for b in result] == [9, 5, 3, 1]

    def test_ties_keep_input_order(self):
        result = rank(_items(4, 7, 4, 4), UNIT_WEIGHTS, 10)
        assert [b.name for b in result] == ["p1", "p0", "p2", "p3"]

    def test_exactly_max_buckets_has_no_other(self):
        result = rank(_items(1, 2, 3), UNIT_WEIGHTS, 3)
        assert len(result) == 3
        assert all(b.name != "Other" for b in result)

    def test_overflow_keeps_max_minus_one(self):
        """With more items than the cap, max_buckets - 1 items are kept."""
        result = rank(_items(10, 9, 8, 7, 6), UNIT_WEIGHTS, 3)
        assert result == [
            RankBucket("p0", 10),
            RankBucket("p1", 9),
            RankBucket("Other", 8 + 7 + 6),
        ]

    def test_other_bucket_is_last_even_when_largest(self):
        result = rank(_items(5, 4, 4, 4, 4), UNIT_WEIGHTS, 2)
        assert result[-1] == RankBucket("Other", 16)
        assert result[0] == RankBucket("p0", 5)

    def test_custom_other_label(self):
        result = rank(_items(3, 2, 1), UNIT_WEIGHTS, 2, other_label="기타")
        assert result[-1].name == "기타"

    def test_single_bucket_collapses_everything(self):
        """max_buckets=1 folds every item, the top one included."""
        items = _items(50, 3, 2)
        result = rank(items, UNIT_WEIGHTS, 1)
        assert result == [RankBucket("Other", 55)]

    def test_single_item_single_bucket_kept(self):
        assert rank(_items(7), UNIT_WEIGHTS, 1) == [RankBucket("p0", 7)]

    @pytest.mark.parametrize("count,cap", [(1, 12), (5, 5), (6, 5), (20, 12), (3, 1)])
    def test_length_is_min_of_count_and_cap(self, count, cap):
        result = rank(_items(*range(count)), UNIT_WEIGHTS, cap)
        assert len(result) == min(count, cap)

    def test_accepts_generator(self):
        result = rank((item for item in _items(1, 2)), UNIT_WEIGHTS, 5)
        assert [b.amount for b in result] == [2, 1]

    def test_idempotent(self):
        items = _items(3, 1, 4, 1, 5, 9, 2, 6)
        assert rank(items, UNIT_WEIGHTS, 4) == rank(items, UNIT_WEIGHTS, 4)

    def test_does_not_mutate_input(self):
        items = _items(1, 3, 2)
        before = list(items)
        rank(items, UNIT_WEIGHTS, 2)
        assert items == before


# ------------------------------------------------------------------ #
#  Totals                                                             #
# ------------------------------------------------------------------ #


class TestBucketSum:
    """Tests for bucket_sum() and the other-bucket total."""

    def test_sum_matches_per_item_ceilings(self):
        items = [
            RawItem(name=f"p{i}", views=i * 7, likes=i, comments=i % 3, remakes=i % 2)
            for i in range(25)
        ]
        expected = sum(math.ceil(score_item(i, DEFAULT_WEIGHTS).score) for i in items)
        assert bucket_sum(rank(items, DEFAULT_WEIGHTS, 12)) == expected

    def test_other_bucket_equals_its_members(self):
        """The pre-summed other bucket matches summing the tail independently."""
        items = _items(9, 8, 7, 6, 5, 4)
        full = rank(items, UNIT_WEIGHTS, len(items))
        capped = rank(items, UNIT_WEIGHTS, 3)
        assert capped[-1].amount == bucket_sum(full[2:])
        assert bucket_sum(capped) == bucket_sum(full)

    def test_empty(self):
        assert bucket_sum([]) == 0


class TestSharePercent:
    """Tests for share_percent()."""

    def test_two_decimals(self):
        assert share_percent(1, 3) == 33.33

    def test_whole(self):
        assert share_percent(12, 12) == 100.0

    def test_zero_total(self):
        assert share_percent(0, 0) == 0.0

    def test_shares_of_reference_example(self):
        assert share_percent(12, 17) == 70.59
        assert share_percent(5, 17) == 29.41


# ------------------------------------------------------------------ #
#  Profile integration                                                #
# ------------------------------------------------------------------ #


def test_rank_profile_uses_config():
    """rank_profile reads weights, cap and label from Config."""
    profile = UserProfile.model_validate(
        {
            "username": "maker",
            "projects": [
                {"name": "a", "likes": 3},
                {"name": "b", "likes": 2},
                {"name": "c", "likes": 1},
            ],
        }
    )
    config = Config(
        view_weight=1, like_weight=2, comment_weight=1, remake_weight=1,
        max_project_rank=2, other_label="Rest",
    )
    assert rank_profile(profile, config) == [RankBucket("a", 6), RankBucket("Rest", 6)]
