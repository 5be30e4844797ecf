"""Session load lifecycle and completion toggle endpoints."""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Query

from ..models import BrowserView, SimulateFailureRequest
from ..state import get_state

logger = logging.getLogger(__name__)

router = APIRouter()


async def _respond(task: Optional[asyncio.Task], wait: bool) -> BrowserView:
    """Optionally wait for a load to settle, then return the view."""
    if task is not None and wait:
        await asyncio.shield(task)
    return get_state().view()


@router.post("/load", response_model=BrowserView)
async def load_sessions(wait: bool = Query(False, description="Wait for the load to settle")):
    """Fetch sessions with the current fail-simulation flag."""
    state = get_state()
    return await _respond(state.start_load(), wait)


@router.post("/retry", response_model=BrowserView)
async def retry_sessions(wait: bool = Query(False, description="Wait for the load to settle")):
    """Manual retry after a failed load."""
    state = get_state()
    return await _respond(state.start_retry(), wait)


@router.post("/simulate-failure", response_model=BrowserView)
async def set_simulate_failure(
    request: SimulateFailureRequest,
    wait: bool = Query(False, description="Wait for the triggered reload to settle"),
):
    """Set the fail-simulation flag. Changing it reloads immediately."""
    state = get_state()
    task = state.set_simulate_failure(request.enabled)
    if task is None:
        logger.debug("[sessions] simulate_failure already %s, no reload", request.enabled)
    return await _respond(task, wait)


@router.post("/{session_id}/toggle", response_model=BrowserView)
async def toggle_complete(session_id: str):
    """Flip a session's completion flag. Unknown ids leave the view unchanged."""
    state = get_state()
    record_id = state.find_record_id(session_id)
    state.toggle_complete(record_id if record_id is not None else session_id)
    return state.view()
