"""
Infrastructure Layer
====================

Implementations of the domain repository interfaces and clients for
external services.

Contains:
- db: MongoDB connection manager and repositories
- github: GitHub REST API client
"""
