"""Totals over a user's projects for the profile summary cards."""

import logging
from dataclasses import asdict, dataclass
from typing import Optional

from profile_insights.models import UserProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProfileSummary:
    total_projects: int
    ranked_projects: int
    staff_picked_projects: int
    private_projects: int
    total_views: int
    total_likes: int
    total_comments: int
    total_remakes: int
    joined_year: Optional[int]
    followers: int
    followings: int
    badge_count: int

    def to_dict(self) -> dict:
        return asdict(self)


def summarize(profile: UserProfile) -> ProfileSummary:
    """Compute the stats shown in the profile's info section.

    ``total_projects`` counts private projects too; the other project
    counts and totals only cover public ones.
    """
    projects = profile.projects
    logger.debug(f"Summarizing {len(projects)} public projects for @{profile.username}")
    return ProfileSummary(
        total_projects=len(projects) + profile.private_projects,
        ranked_projects=sum(1 for p in projects if p.ranked),
        staff_picked_projects=sum(1 for p in projects if p.staff_picked),
        private_projects=profile.private_projects,
        total_views=round(sum(p.views for p in projects)),
        total_likes=round(sum(p.likes for p in projects)),
        total_comments=round(sum(p.comments for p in projects)),
        total_remakes=round(sum(p.remakes for p in projects)),
        joined_year=profile.joined.year if profile.joined else None,
        followers=profile.followers,
        followings=profile.followings,
        badge_count=len(profile.badges),
    )
