"""Pydantic models for records, view state, and requests."""

from .records import (
    UNKNOWN_DIFFICULTY,
    SessionCard,
    SessionRecord,
)
from .requests import SearchRequest, SimulateFailureRequest
from .view import BrowserView, LoadPhase, SortOrder

__all__ = [
    "UNKNOWN_DIFFICULTY",
    "SessionCard",
    "SessionRecord",
    "SearchRequest",
    "SimulateFailureRequest",
    "BrowserView",
    "LoadPhase",
    "SortOrder",
]
