import time
from fastapi import APIRouter, Depends, HTTPException, Request
from ..models.response import HealthResponse
from ..store import LeaderboardStore
from ..core.dependencies import get_leaderboard
from ..logger import get_logger

logger = get_logger(__name__)
router = APIRouter()

@router.get("/health", response_model=HealthResponse)
@router.head("/health")
async def health_check(request: Request, store: LeaderboardStore = Depends(get_leaderboard)):
    """Health check endpoint"""
    try:
        response = HealthResponse(
            uptime=time.time() - request.app.state.start_time,
            entries=len(store)
        )
        logger.debug(f"Health check response: {response.model_dump()}")
        return response
    except Exception as e:
        logger.error(f"Health check error: {e}")
        raise HTTPException(status_code=500, detail="Health check failed")
