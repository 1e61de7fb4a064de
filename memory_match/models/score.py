from pydantic import BaseModel, Field, StrictInt, field_validator

# Largest value a signed 64-bit JSON encoder can emit
MAX_MOVES = 2**63 - 1

class ScoreRequest(BaseModel):
    playerName: str = Field(..., min_length=1)
    moves: StrictInt = Field(..., ge=0, le=MAX_MOVES)
    timeTaken: float = Field(..., ge=0, strict=True, allow_inf_nan=False)

    @field_validator('playerName')
    @classmethod
    def validate_player_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Player name cannot be empty or whitespace')
        return v
