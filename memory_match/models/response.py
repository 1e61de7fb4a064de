from datetime import datetime
from pydantic import BaseModel
from typing import Literal

class LeaderboardEntry(BaseModel):
    playerName: str
    moves: int
    timeTaken: float
    timestamp: datetime

class ScoreResponse(BaseModel):
    status: Literal["success"] = "success"

class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    uptime: float
    entries: int
