from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from .config import server, leaderboard, ServerConfig, LeaderboardConfig
from .core.events import startup_event, shutdown_event, PAGE_PATH
from .core.errors import register_exception_handlers
from .routes import health, leaderboard as leaderboard_routes, page, score
from .logger import get_logger

logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup_event(app)
    try:
        yield
    finally:
        await shutdown_event(app)

def create_app(
    server_config: Optional[ServerConfig] = None,
    leaderboard_config: Optional[LeaderboardConfig] = None,
    page_path: Optional[Path] = None,
) -> FastAPI:
    """Build the game server; the leaderboard store is created on startup"""
    server_config = server_config or server
    app = FastAPI(
        default_response_class=ORJSONResponse,
        title=server_config.TITLE,
        description="Memory matching game with an in-memory top-score leaderboard",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.server_config = server_config
    app.state.leaderboard_config = leaderboard_config or leaderboard
    app.state.page_path = page_path or PAGE_PATH

    register_exception_handlers(app)

    app.include_router(page.router)
    app.include_router(leaderboard_routes.router, prefix="/api")
    app.include_router(score.router, prefix="/api")
    app.include_router(health.router)
    return app

app = create_app()
