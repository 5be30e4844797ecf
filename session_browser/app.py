"""
Learning Sessions Browser — FastAPI app factory.

Use: uvicorn session_browser.app:app
Or:  from session_browser import app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_config
from .routes import register_routes
from .state import get_state, reset_state

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = get_config()
    setup_logging(config.log_level)
    ok, errors = config.validate()
    if not ok:
        for err in errors:
            logger.error("[startup] %s", err)
        raise RuntimeError(f"Invalid configuration: {'; '.join(errors)}")

    state = get_state()
    logger.info(
        "[startup] latency=%dms debounce=%dms simulate_failure=%s",
        config.fetch_latency_ms, config.search_debounce_ms, config.simulate_failure,
    )
    # Initial mount load
    state.start_load()
    try:
        yield
    finally:
        await state.aclose()
        reset_state()
        logger.info("[shutdown] state released")


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, routes, and the startup load."""
    app = FastAPI(
        title="Learning Sessions Browser API",
        description="Search, sort and complete learning sessions from a mock catalog",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)
    return app


app = create_app()
