"""Root and health endpoints."""

from fastapi import APIRouter

from ..state import get_state

router = APIRouter()


@router.get("/")
async def root():
    state = get_state()
    return {
        "name": "Learning Sessions Browser API",
        "version": "1.0.0",
        "phase": state.controller.phase.value,
        "endpoints": {
            "view": ["/api/view", "/api/view/search", "/api/view/sort/toggle"],
            "sessions": [
                "/api/sessions/load",
                "/api/sessions/retry",
                "/api/sessions/simulate-failure",
                "/api/sessions/{id}/toggle",
            ],
        },
    }


@router.get("/api/health")
async def health():
    state = get_state()
    return {
        "status": "healthy",
        "phase": state.controller.phase.value,
        "sessions_loaded": len(state.store),
        "simulate_failure": state.controller.simulate_failure,
    }
