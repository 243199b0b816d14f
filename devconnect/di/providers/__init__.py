"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .github_provider import GitHubProvider
from .profile_provider import ProfileProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "GitHubProvider",
    "ProfileProvider",
]
