"""
Browser Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Single .env at the project root
root_env = Path(__file__).resolve().parent.parent / ".env"
if root_env.exists():
    load_dotenv(root_env)

DEFAULT_DATA_PATH = Path(__file__).parent / "data" / "sessions.json"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class BrowserConfig:
    """Browser configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000

    # Mock data source
    sessions_data_path: Path = DEFAULT_DATA_PATH
    fetch_latency_ms: int = 500
    simulate_failure: bool = False

    # View pipeline
    search_debounce_ms: int = 300

    log_level: str = "INFO"

    @property
    def fetch_latency(self) -> float:
        """Fetch latency in seconds."""
        return self.fetch_latency_ms / 1000

    @property
    def search_debounce(self) -> float:
        """Debounce quiet period in seconds."""
        return self.search_debounce_ms / 1000

    @classmethod
    def from_env(cls) -> "BrowserConfig":
        """Load configuration from environment variables."""
        base_dir = Path(__file__).parent.parent

        def _path_env(key: str, default: Path) -> Path:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            sessions_data_path=_path_env("SESSIONS_DATA_PATH", DEFAULT_DATA_PATH),
            fetch_latency_ms=int(os.getenv("FETCH_LATENCY_MS", "500")),
            simulate_failure=os.getenv("SIMULATE_FAILURE", "").strip().lower() in _TRUE_VALUES,
            search_debounce_ms=int(os.getenv("SEARCH_DEBOUNCE_MS", "300")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if not self.sessions_data_path.exists():
            errors.append(f"Sessions data file not found: {self.sessions_data_path}")

        if self.fetch_latency_ms < 0:
            errors.append(f"FETCH_LATENCY_MS must be >= 0, got {self.fetch_latency_ms}")

        if self.search_debounce_ms < 0:
            errors.append(f"SEARCH_DEBOUNCE_MS must be >= 0, got {self.search_debounce_ms}")

        return len(errors) == 0, errors


# Global config instance
_config: Optional[BrowserConfig] = None


def get_config() -> BrowserConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = BrowserConfig.from_env()
    return _config


def reload_config() -> BrowserConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
