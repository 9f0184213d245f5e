# src/flowlist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console on one asyncio
event loop: the welcome surface first (optional), then the task list.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state, shutdown
from ..config import get_settings
from ..connectors.console_connector import run_console_loop, run_welcome
from ..core.state import AppState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def _run(state: AppState) -> None:
    try:
        if await run_welcome(state):
            await run_console_loop(state)
    finally:
        await shutdown(state)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/flowlist")
    setup_logging(log_dir=log_dir, console_level=console_level)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logger.info("Starting %s...", getattr(settings, "app_name", "FlowList"))

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    try:
        asyncio.run(_run(state))
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt, shutting down...")
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
