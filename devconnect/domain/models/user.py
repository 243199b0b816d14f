"""
User Model
==========

Domain model for an account owned by the surrounding application.
This service reads users and only ever changes their avatar.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """User domain model."""
    id: str
    name: str
    email: str
    avatar: Optional[str] = None
    date: Optional[datetime] = None
