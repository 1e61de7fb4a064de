from fastapi import HTTPException, Request

from ..store import LeaderboardStore

def get_leaderboard(request: Request) -> LeaderboardStore:
    store = getattr(request.app.state, 'leaderboard', None)
    if store is None:
        raise HTTPException(status_code=503, detail="Leaderboard not initialized")
    return store
