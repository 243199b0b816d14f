from typing import TYPE_CHECKING
from ...domain.repositories.profile_repository import ProfileRepository
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.post_repository import PostRepository
from ...infrastructure.github.github_client import GitHubClient
from ...application.services.profile_service import ProfileService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProfileProvider:
    """Profile service provider - registers profile-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register profile service.
        Service is created with repositories and the GitHub client from container.
        """
        container.register_factory(
            ProfileService,
            lambda: ProfileService(
                profile_repository=container.get(ProfileRepository),
                user_repository=container.get(UserRepository),
                post_repository=container.get(PostRepository),
                github_client=container.get(GitHubClient),
            ),
        )
