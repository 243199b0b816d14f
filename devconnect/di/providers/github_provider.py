from typing import TYPE_CHECKING
from ...infrastructure.github.github_client import GitHubClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class GitHubProvider:
    """GitHub client provider - configured from settings"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(GitHubClient, GitHubClient)
