from .github_client import GitHubClient

__all__ = ["GitHubClient"]
