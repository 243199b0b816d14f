"""DevConnect profile service: developer profiles over FastAPI and MongoDB."""

__version__ = "1.0.0"
