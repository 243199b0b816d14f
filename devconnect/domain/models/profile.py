"""
Profile Model
=============

Domain models for a user's developer profile and its nested
experience/education entries.
These are pure domain objects with no infrastructure dependencies.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from devconnect.utils.datetime_utils import now


SOCIAL_NETWORKS = ("youtube", "twitter", "instagram", "linkedin", "facebook")


@dataclass
class SocialLinks:
    """Links to a user's social network pages."""
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    facebook: Optional[str] = None


@dataclass
class Experience:
    """
    A single job entry.

    The id is assigned by the repository when the entry is stored.
    """
    title: str
    company: str
    from_date: datetime
    location: Optional[str] = None
    to_date: Optional[datetime] = None
    current: bool = False
    description: Optional[str] = None
    id: Optional[str] = None

    def validate(self) -> None:
        """Check that the entry starts before it ends."""
        _check_date_range(self.from_date, self.to_date)


@dataclass
class Education:
    """A single school entry. Same ordering rules as Experience."""
    school: str
    degree: str
    fieldofstudy: str
    from_date: datetime
    to_date: Optional[datetime] = None
    current: bool = False
    description: Optional[str] = None
    id: Optional[str] = None

    def validate(self) -> None:
        """Check that the entry starts before it ends."""
        _check_date_range(self.from_date, self.to_date)


@dataclass
class UserSummary:
    """The user fields attached to a profile when it is returned."""
    id: str
    name: Optional[str] = None
    avatar: Optional[str] = None


@dataclass
class Profile:
    """
    Profile domain model.

    One profile exists per user; the user id is the profile's natural key.
    Experience and education lists are ordered most-recent-first.
    """
    user_id: str
    status: str
    skills: List[str]
    id: Optional[str] = None
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    usegithubavatar: bool = False
    social: SocialLinks = field(default_factory=SocialLinks)
    experience: List[Experience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    date: datetime = field(default_factory=lambda: now())
    user: Optional[UserSummary] = None


def _check_date_range(from_date: datetime, to_date: Optional[datetime]) -> None:
    if to_date is not None and not from_date < to_date:
        raise ValueError("From date must be before the to date")
