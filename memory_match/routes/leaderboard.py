from typing import List
from fastapi import APIRouter, Depends, HTTPException
from ..models.response import LeaderboardEntry
from ..store import LeaderboardStore
from ..core.dependencies import get_leaderboard
from ..logger import get_logger

logger = get_logger(__name__)
router = APIRouter()

@router.get("/leaderboard", response_model=List[LeaderboardEntry])
async def get_leaderboard_entries(store: LeaderboardStore = Depends(get_leaderboard)):
    """Get the current ranking, best score first."""
    try:
        entries = [LeaderboardEntry(**entry.to_dict()) for entry in store.snapshot()]
        logger.debug(f"Serving {len(entries)} leaderboard entries")
        return entries
    except Exception as e:
        logger.error(f"Error getting leaderboard: {e}")
        raise HTTPException(status_code=500, detail="Failed to get leaderboard")
