import time
from pathlib import Path

import aiofiles
from fastapi import FastAPI

from ..store import LeaderboardStore
from ..logger import get_logger

logger = get_logger(__name__)

PAGE_PATH = Path(__file__).resolve().parent.parent / 'static' / 'index.html'

async def startup_event(app: FastAPI):
    """Create the leaderboard store and load the game page"""
    config = app.state.leaderboard_config
    app.state.leaderboard = LeaderboardStore(capacity=config.capacity)
    app.state.start_time = time.time()
    try:
        async with aiofiles.open(app.state.page_path, mode='r', encoding='utf-8') as f:
            app.state.page = await f.read()
    except OSError as e:
        logger.error(f"Failed to load game page from {app.state.page_path}: {e}")
        raise
    logger.info(f"Leaderboard ready (capacity {config.capacity})")

async def shutdown_event(app: FastAPI):
    """Release the leaderboard store; its contents are not persisted"""
    store = getattr(app.state, 'leaderboard', None)
    if store is not None:
        logger.info(f"Discarding leaderboard with {len(store)} entries")
    app.state.leaderboard = None
