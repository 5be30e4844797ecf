#!/usr/bin/env python3
"""
Learning Sessions Browser server — entrypoint for `session-browser` and
`python -m session_browser.server`.
"""

import uvicorn

from .app import app
from .config import get_config


def main() -> None:
    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
