# Local application imports
from typing import Optional

from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    GitHubProvider,
    ProfileProvider,
    RepositoryProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. External clients (GitHubProvider)
    4. Services (ProfileProvider) - depend on repositories and clients
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → clients → services
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        GitHubProvider.register(self)
        ProfileProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
