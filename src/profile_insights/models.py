"""Profile record models.

The profile record arrives as plain JSON from the platform's remote
query layer. These models parse it once at the boundary so the
analytics functions can work on typed values.
"""

import json
import logging
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


class Role(str, Enum):
    STUDENT = "student"
    MEMBER = "member"
    TEACHER = "teacher"
    ADMIN = "admin"


class Badge(BaseModel):
    """Badge shown next to the user's name."""

    image: str
    label: str


class ContentItem(BaseModel):
    """A single public project and its engagement counters.

    Timestamps the platform leaves blank (``""``) are parsed to ``None``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = ""
    name: str
    thumb: Optional[str] = None
    category: str = ""
    views: float = 0
    likes: float = 0
    comments: float = 0
    remakes: float = 0
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    ranked: Optional[datetime] = None
    staff_picked: Optional[datetime] = Field(default=None, alias="staffPicked")

    @field_validator("created", "updated", "ranked", "staff_picked", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class UserProfile(BaseModel):
    """Profile record for one user, as returned by the user info query."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    username: str
    id: str = ""
    nickname: str = ""
    description: str = ""
    profile_image: Optional[str] = Field(default=None, alias="profileImage")
    cover_image: Optional[str] = Field(default=None, alias="coverImage")
    role: str = Role.MEMBER.value
    joined: Optional[datetime] = None
    followers: int = 0
    followings: int = 0
    badges: list[Badge] = Field(default_factory=list)
    private_projects: int = Field(default=0, alias="privateProjects")
    projects: list[ContentItem] = Field(default_factory=list)

    @field_validator("joined", mode="before")
    @classmethod
    def blank_joined(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def known_role(self) -> Optional[Role]:
        """The role as a ``Role`` member, or None for codes we don't know."""
        try:
            return Role(self.role)
        except ValueError:
            return None


def load_profile(path: Path) -> UserProfile:
    """Load and validate a profile record from a JSON file.

    Args:
        path: Path to a JSON file holding one user info record.

    Returns:
        The parsed profile.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the file is not valid JSON.
        pydantic.ValidationError: If the record does not match the model.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    profile = UserProfile.model_validate(data)
    logger.info(f"Loaded profile @{profile.username} with {len(profile.projects)} projects")
    return profile
