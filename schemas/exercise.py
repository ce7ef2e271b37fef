"""Exercise collection schema."""

from datetime import datetime, timezone
from typing import Union
from pydantic import BaseModel, Field


class Exercise(BaseModel):
    """Exercise collection model.

    ``userId`` is an unchecked reference to a user's ``_id``; an exercise may
    point at a user that does not exist.
    """
    userId: str = Field(..., min_length=1, description="Identifier of the owning user")
    description: str = Field(..., min_length=1, description="What was done")
    duration: Union[int, float] = Field(..., description="Duration in minutes")
    date: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the exercise took place"
    )
