import uvicorn

from .config import server
from .logger import get_logger

logger = get_logger()

def main():
    logger.info(f"Memory Match game server starting on http://{server.HOST}:{server.PORT}")
    # One worker: the leaderboard is process-local.
    uvicorn.run(
        "memory_match.main:app",
        host=server.HOST,
        port=server.PORT,
        workers=1,
        log_level=server.LOG_LEVEL.lower()
    )

if __name__ == "__main__":
    main()
