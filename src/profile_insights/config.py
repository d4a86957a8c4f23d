"""Central configuration for the profile insights package."""

import os
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from profile_insights.analytics.ranking import Weights

# Load .env file from project root
load_dotenv()


class Config(BaseModel):
    """All configuration for the profile analytics.

    Popularity weights and the chart bucket cap can be overridden
    via environment or .env file.
    """

    # Popularity weights (score = views*view + likes*like + ...)
    view_weight: float = Field(default=float(os.getenv("PI_VIEW_WEIGHT", "0.02")))
    like_weight: float = Field(default=float(os.getenv("PI_LIKE_WEIGHT", "1")))
    comment_weight: float = Field(default=float(os.getenv("PI_COMMENT_WEIGHT", "1.1")))
    remake_weight: float = Field(default=float(os.getenv("PI_REMAKE_WEIGHT", "5")))

    # Popularity chart
    max_project_rank: int = Field(default=int(os.getenv("PI_MAX_PROJECT_RANK", "12")))
    other_label: str = Field(default=os.getenv("PI_OTHER_LABEL", "Other"))

    # Timeline output
    date_format: str = "%Y-%m-%d"

    @property
    def weights(self) -> "Weights":
        """Popularity weights as a ``Weights`` value."""
        from profile_insights.analytics.ranking import Weights

        return Weights(
            view=self.view_weight,
            like=self.like_weight,
            comment=self.comment_weight,
            remake=self.remake_weight,
        )
