"""Collection schemas organized by collection type."""

from schemas.user import User
from schemas.exercise import Exercise

__all__ = [
    "User",
    "Exercise",
]
