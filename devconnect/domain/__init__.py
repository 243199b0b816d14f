"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: Profile, Experience, Education, User
- Repository Interfaces: Abstract contracts for data access
- Exceptions: errors the application layer raises
"""
