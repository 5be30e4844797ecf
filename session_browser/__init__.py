"""
Learning Sessions Browser

Usage: uvicorn session_browser:app --reload --port 8000
"""

from .app import app, create_app
from .config import BrowserConfig, get_config, reload_config
from .state import BrowserState, get_state, reset_state

__all__ = [
    "app",
    "create_app",
    "BrowserConfig",
    "get_config",
    "reload_config",
    "BrowserState",
    "get_state",
    "reset_state",
]
