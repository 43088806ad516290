from enum import Enum
from typing import List
from pydantic import BaseModel, Field

class FishingRating(str, Enum):
    POOR = "Poor"
    FAIR = "Fair"
    GOOD = "Good"
    EXCELLENT = "Excellent"

    @property
    def color(self) -> str:
        return RATING_COLORS[self]

RATING_COLORS = {
    FishingRating.POOR: "#FF8A8A",
    FishingRating.FAIR: "#FFB84D",
    FishingRating.GOOD: "#90EE90",
    FishingRating.EXCELLENT: "#72E5A2",
}

class TimeOfDay(str, Enum):
    DAWN = "dawn"
    MORNING = "morning"
    AFTERNOON = "afternoon"
    DUSK = "dusk"
    NIGHT = "night"

class FishingScoreResult(BaseModel):
    """Heuristic fishing score with the adjustments that produced it."""
    score: int = Field(..., ge=0, le=100)
    rating: FishingRating
    color: str = Field(..., description="Hex color for the rating")
    reasons: List[str] = Field(default_factory=list, description="Triggered adjustments in evaluation order")
