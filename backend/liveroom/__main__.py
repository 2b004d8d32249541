"""Run the service with uvicorn: `python -m liveroom`."""

from __future__ import annotations

import uvicorn

from liveroom.core.config import load_settings
from liveroom.core.logging import setup_logging


def main() -> None:
    settings = load_settings()
    setup_logging(settings.liveroom_log_level)
    uvicorn.run(
        "liveroom.main:app",
        host=settings.liveroom_app_host,
        port=settings.liveroom_app_port,
        log_level=settings.liveroom_log_level.lower(),
    )


if __name__ == "__main__":
    main()
