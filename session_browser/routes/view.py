"""List view endpoints: current render state, search input, sort direction."""

from fastapi import APIRouter

from ..models import BrowserView, SearchRequest
from ..state import get_state

router = APIRouter()


@router.get("", response_model=BrowserView)
async def get_view():
    """Current render state."""
    return get_state().view()


@router.post("/search", response_model=BrowserView)
async def set_search(request: SearchRequest):
    """
    Set the raw search input. The filter applies once the input has been
    quiet for the debounce delay; until then search_term keeps its old value.
    """
    state = get_state()
    state.set_search_input(request.query)
    return state.view()


@router.post("/sort/toggle", response_model=BrowserView)
async def toggle_sort():
    state = get_state()
    state.toggle_sort()
    return state.view()
