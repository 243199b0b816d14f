"""
Domain Exceptions
=================

Errors raised by use cases and mapped to HTTP responses by the API layer.
Business-rule validation failures are raised as plain ValueError.
"""


class ProfileNotFoundError(LookupError):
    """No profile exists for the requested user."""


class UserNotFoundError(LookupError):
    """The referenced user document does not exist."""


class GitHubLookupError(Exception):
    """A GitHub API call failed, for whatever reason."""
