from .profile import Education, Experience, Profile, SocialLinks, UserSummary, SOCIAL_NETWORKS
from .user import User

__all__ = [
    "Education",
    "Experience",
    "Profile",
    "SocialLinks",
    "UserSummary",
    "SOCIAL_NETWORKS",
    "User",
]
