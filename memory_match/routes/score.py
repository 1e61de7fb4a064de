from fastapi import APIRouter, Depends, HTTPException, Request
from ..models.score import ScoreRequest
from ..models.response import ScoreResponse
from ..models.data import ScoreEntry
from ..store import LeaderboardStore
from ..core.dependencies import get_leaderboard
from ..logger import get_logger

logger = get_logger(__name__)
router = APIRouter()

@router.post("/score", response_model=ScoreResponse)
async def submit_score(request: Request, data: ScoreRequest, store: LeaderboardStore = Depends(get_leaderboard)):
    """
    Record a finished game on the leaderboard.

    - **playerName**: Name shown on the leaderboard
    - **moves**: Number of card-pair flips used to clear the board
    - **timeTaken**: Seconds from first flip to last match

    The timestamp is assigned by the server; a client-supplied one is ignored.
    """
    max_length = request.app.state.leaderboard_config.player_name_max_length
    if len(data.playerName) > max_length:
        logger.warning(f"Rejected score: player name longer than {max_length} characters")
        raise HTTPException(status_code=400, detail="Invalid request body")
    try:
        entry = ScoreEntry.from_dict(data.model_dump())
        store.submit(entry)
        logger.info(f"Recorded score for {entry.player_name}: {entry.moves} moves in {entry.time_taken}s")
        return ScoreResponse()
    except ValueError as e:
        logger.warning(f"Rejected score: {e}")
        raise HTTPException(status_code=400, detail="Invalid request body")
    except Exception as e:
        logger.error(f"Error recording score: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
