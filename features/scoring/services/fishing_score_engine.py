from typing import List, Optional, Union

from features.scoring.models.score_types import FishingRating, FishingScoreResult, TimeOfDay
from features.tides.models.tide_types import TideType

BASELINE_SCORE = 50

def _rating_for_score(score: int) -> FishingRating:
    if score >= 80:
        return FishingRating.EXCELLENT
    if score >= 65:
        return FishingRating.GOOD
    if score < 40:
        return FishingRating.POOR
    return FishingRating.FAIR

def calculate_fishing_score(
    pressure: Optional[float] = None,
    wind_speed: Optional[float] = None,
    moon_phase: Optional[str] = None,
    tide_type: Optional[Union[TideType, str]] = None,
    time_of_day: Optional[Union[TimeOfDay, str]] = None
) -> FishingScoreResult:
    """Score fishing conditions from 0 to 100.

    Starts from a neutral 50 and applies each adjustment independently, in the
    order pressure, wind, moon, tide, time of day. Missing inputs are skipped.

    Args:
        pressure: Barometric pressure in hPa
        wind_speed: Wind speed in mph
        moon_phase: Phase name, e.g. "Full Moon"
        tide_type: Next tide, "H" or "L"
        time_of_day: One of dawn, morning, afternoon, dusk, night
    """
    score = BASELINE_SCORE
    reasons: List[str] = []

    # Barometric pressure (best: 1015-1020 hPa)
    if pressure is not None:
        if 1015 <= pressure <= 1020:
            score += 15
            reasons.append("Ideal pressure")
        elif pressure > 1020:
            score += 5
            reasons.append("High pressure")
        elif pressure < 1000:
            score -= 10
            reasons.append("Low pressure")

    # Wind (best: 5-10 mph); 5 exactly counts as perfect
    if wind_speed is not None:
        if wind_speed < 5:
            score += 10
            reasons.append("Calm winds")
        elif wind_speed <= 10:
            score += 15
            reasons.append("Perfect wind")
        elif wind_speed > 20:
            score -= 15
            reasons.append("Strong winds")

    # Moon phase (best: new/full)
    if moon_phase:
        if moon_phase in ("New Moon", "Full Moon"):
            score += 15
            reasons.append("Major lunar phase")
        elif "Quarter" in moon_phase:
            score += 8
            reasons.append("Minor lunar phase")

    if tide_type == TideType.HIGH:
        score += 10
        reasons.append("High tide incoming")

    if time_of_day in (TimeOfDay.DAWN, TimeOfDay.DUSK):
        score += 10
        reasons.append("Prime feeding time")

    score = max(0, min(100, score))
    rating = _rating_for_score(score)

    return FishingScoreResult(score=score, rating=rating, color=rating.color, reasons=reasons)
