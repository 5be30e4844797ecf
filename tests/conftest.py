"""Shared fixtures for the session browser tests."""

import asyncio
from typing import List, Optional

import pytest

from session_browser.models import SessionRecord
from session_browser.services import FetchFailure

RAW_SESSIONS = [
    {"id": 1, "title": "Intro to X", "tags": ["x"], "mins": "30", "difficulty": "beginner", "popularity": 10},
    {"id": 2, "title": "Advanced Y", "tags": ["y", "deep"], "mins": "45", "difficulty": "advanced", "popularity": 10},
    {"id": 3, "title": "Basics Z", "tags": [], "mins": 20.7, "popularity": 5},
]


@pytest.fixture
def raw_sessions() -> List[dict]:
    return [dict(s) for s in RAW_SESSIONS]


@pytest.fixture
def records() -> List[SessionRecord]:
    return [
        SessionRecord(id=1, title="Intro to X", popularity=10),
        SessionRecord(id=2, title="Advanced Y", popularity=10),
        SessionRecord(id=3, title="Basics Z", popularity=5),
    ]


class ScriptedSource:
    """Data source whose per-call latency is scripted, for overlapping-load tests."""

    def __init__(self, records: List[SessionRecord], delays: Optional[List[float]] = None):
        self.records = records
        self.delays = list(delays or [])
        self.calls: List[bool] = []

    async def fetch(self, simulate_failure: bool = False) -> List[SessionRecord]:
        self.calls.append(simulate_failure)
        delay = self.delays.pop(0) if self.delays else 0
        await asyncio.sleep(delay)
        if simulate_failure:
            raise FetchFailure()
        return [r.model_copy(deep=True) for r in self.records]


class BrokenSource:
    """Data source that fails with something other than FetchFailure."""

    async def fetch(self, simulate_failure: bool = False):
        raise RuntimeError("backend exploded")


@pytest.fixture
def scripted_source(records) -> ScriptedSource:
    return ScriptedSource(records)


@pytest.fixture
def broken_source() -> BrokenSource:
    return BrokenSource()


@pytest.fixture
def make_source(records):
    """Build a ScriptedSource with the given per-call delays."""

    def _make(delays=None) -> ScriptedSource:
        return ScriptedSource(records, delays)

    return _make
