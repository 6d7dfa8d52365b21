"""Result models returned when match data is requested."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MatchSpan(BaseModel):
    """Location of the matched window in the original key string."""
    
    index: int = Field(..., ge=0, description="Offset of the window in the original string")
    length: int = Field(..., ge=0, description="Length of the window in the original string")
    
    model_config = ConfigDict(frozen=True)


class MatchData(BaseModel):
    """Scored candidate together with the key and span that produced the score."""
    
    item: Any = Field(..., description="The candidate as it was passed in")
    original: str = Field(..., description="The raw key string that was matched")
    key: str = Field(..., description="The normalized form of the matched key")
    score: float = Field(..., ge=0.0, le=1.0, description="Match score (0-1)")
    match: MatchSpan = Field(..., description="Matched window in raw key offsets")
    
    model_config = ConfigDict(frozen=True)
