"""User collection schema."""

from pydantic import BaseModel, Field


class User(BaseModel):
    """User collection model. Usernames are not required to be unique."""
    username: str = Field(..., min_length=1, description="Display name of the user")
