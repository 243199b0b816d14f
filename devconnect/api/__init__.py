"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- v1: FastAPI controllers and their dependencies
- error_handlers: mapping of errors to JSON responses
"""
