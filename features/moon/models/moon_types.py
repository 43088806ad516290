from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field

class MoonPhaseName(str, Enum):
    NEW_MOON = "New Moon"
    WAXING_CRESCENT = "Waxing Crescent"
    FIRST_QUARTER = "First Quarter"
    WAXING_GIBBOUS = "Waxing Gibbous"
    FULL_MOON = "Full Moon"
    WANING_GIBBOUS = "Waning Gibbous"
    LAST_QUARTER = "Last Quarter"
    WANING_CRESCENT = "Waning Crescent"

    @property
    def emoji(self) -> str:
        return MOON_EMOJI[self]

MOON_EMOJI = {
    MoonPhaseName.NEW_MOON: "🌑",
    MoonPhaseName.WAXING_CRESCENT: "🌒",
    MoonPhaseName.FIRST_QUARTER: "🌓",
    MoonPhaseName.WAXING_GIBBOUS: "🌔",
    MoonPhaseName.FULL_MOON: "🌕",
    MoonPhaseName.WANING_GIBBOUS: "🌖",
    MoonPhaseName.LAST_QUARTER: "🌗",
    MoonPhaseName.WANING_CRESCENT: "🌘",
}

class MoonPhase(BaseModel):
    """Approximate lunar phase for an instant."""
    phase: MoonPhaseName
    illumination: float = Field(..., ge=0, le=1, description="Approximate illuminated fraction")
    age: int = Field(..., ge=0, description="Whole days since the last new moon")
    next_new: datetime
    next_full: datetime
    emoji: str
