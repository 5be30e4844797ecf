"""
Session Data Source abstraction.

Supplies the session catalog to the load controller. The only
implementation is the mock source, which serves the bundled dataset after
a fixed artificial delay and can be told to fail instead.
"""

import asyncio
import logging
import math
import re
from typing import Any, Dict, List, Protocol

from ..models import UNKNOWN_DIFFICULTY, SessionRecord

logger = logging.getLogger(__name__)

FETCH_FAILURE_MESSAGE = "Failed to fetch sessions. Please try again."

_LEADING_INT = re.compile(r"^\s*([-+]?\d+)")


class FetchFailure(Exception):
    """The data source could not deliver sessions."""

    def __init__(self, message: str = FETCH_FAILURE_MESSAGE):
        super().__init__(message)
        self.message = message


class SessionDataSource(Protocol):
    """Protocol for async session fetch. Implement for mock or real backends."""

    async def fetch(self, simulate_failure: bool = False) -> List[SessionRecord]:
        """
        Return the full, normalized session list.
        Raises FetchFailure when simulate_failure is set (or the backend fails).
        """
        ...


def coerce_mins(value: Any) -> int:
    """Leading-integer parse of a raw duration: 45, "45", "45 mins", 45.9 -> 45. Unparseable, NaN or infinite -> 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    match = _LEADING_INT.match(str(value)) if value is not None else None
    return int(match.group(1)) if match else 0


def normalize_session(raw: Dict) -> SessionRecord:
    """Build a SessionRecord from a raw dataset dict."""
    return SessionRecord(
        id=raw["id"],
        title=raw.get("title") or "",
        tags=list(raw.get("tags") or []),
        mins=coerce_mins(raw.get("mins")),
        difficulty=raw.get("difficulty") or UNKNOWN_DIFFICULTY,
        popularity=raw.get("popularity") or 0,
        completed=False,
    )


class MockSessionDataSource:
    """
    Data source backed by an in-memory list of raw sessions.

    Raw sessions are normalized once at construction. Each successful fetch
    returns fresh copies so loads never share record instances.
    """

    def __init__(self, raw_sessions: List[Dict], latency: float = 0.5):
        self._records = [normalize_session(s) for s in raw_sessions]
        self.latency = latency

    async def fetch(self, simulate_failure: bool = False) -> List[SessionRecord]:
        await asyncio.sleep(self.latency)
        if simulate_failure:
            raise FetchFailure()
        return [r.model_copy(deep=True) for r in self._records]
