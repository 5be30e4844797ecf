"""Session record models."""

from typing import List, Optional

from pydantic import BaseModel, Field

# Fallback label for records that arrive without a difficulty
UNKNOWN_DIFFICULTY = "N/A"


class SessionRecord(BaseModel):
    """One learning session as held by the record store."""

    id: int | str
    title: str
    tags: List[str] = Field(default_factory=list)
    mins: int = 0
    difficulty: str = UNKNOWN_DIFFICULTY
    popularity: int | float = 0
    completed: bool = False


class SessionCard(BaseModel):
    """Display form of a SessionRecord, with the labels the list shows."""

    id: int | str
    title: str
    tags: List[str] = []
    mins: int
    difficulty: str
    popularity: int | float
    completed: bool
    tags_label: str
    duration_label: str
    completion_label: str
    position: Optional[int] = None
