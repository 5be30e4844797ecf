"""View-state models: load phase, sort order, and the render payload."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from .records import SessionCard


class LoadPhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    SUCCESS = "success"


class SortOrder(str, Enum):
    DESC = "desc"
    ASC = "asc"

    def toggled(self) -> "SortOrder":
        return SortOrder.ASC if self is SortOrder.DESC else SortOrder.DESC


class BrowserView(BaseModel):
    """Everything the presentation layer needs to paint the list."""

    phase: LoadPhase
    error: Optional[str] = None
    records: List[SessionCard] = []
    search_input: str = ""
    search_term: str = ""
    sort_order: SortOrder = SortOrder.DESC
    total_count: int = 0
    filtered_count: int = 0
    no_results: bool = False
    summary: str = ""
    simulate_failure: bool = False
