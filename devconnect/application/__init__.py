"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- DTOs: Pydantic request/response models
- Use Cases: Business operations (upsert profile, add experience, etc.)
- Services: Application services that coordinate multiple use cases
"""
