import math
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from features.moon.models.moon_types import MoonPhase, MoonPhaseName

# Reference new moon and mean lunar cycle length
KNOWN_NEW_MOON = datetime(2024, 1, 11, tzinfo=timezone.utc)
SYNODIC_MONTH = 29.53058867  # days

# (upper bound on age in days, phase); the last band runs to the end of the cycle
PHASE_BANDS = [
    (1, MoonPhaseName.NEW_MOON),
    (7, MoonPhaseName.WAXING_CRESCENT),
    (9, MoonPhaseName.FIRST_QUARTER),
    (14, MoonPhaseName.WAXING_GIBBOUS),
    (16, MoonPhaseName.FULL_MOON),
    (22, MoonPhaseName.WANING_GIBBOUS),
    (24, MoonPhaseName.LAST_QUARTER),
]

def _phase_for_age(age: int) -> Tuple[MoonPhaseName, float]:
    """Phase name and linear illumination estimate for a moon age."""
    phase = next((name for upper, name in PHASE_BANDS if age < upper), MoonPhaseName.WANING_CRESCENT)

    if phase == MoonPhaseName.NEW_MOON:
        illumination = 0.0
    elif phase == MoonPhaseName.WAXING_CRESCENT:
        illumination = age / 14
    elif phase in (MoonPhaseName.FIRST_QUARTER, MoonPhaseName.LAST_QUARTER):
        illumination = 0.5
    elif phase == MoonPhaseName.WAXING_GIBBOUS:
        illumination = (age - 7) / 7 * 0.5 + 0.5
    elif phase == MoonPhaseName.FULL_MOON:
        illumination = 1.0
    elif phase == MoonPhaseName.WANING_GIBBOUS:
        illumination = 1 - ((age - 15) / 7 * 0.5)
    else:
        illumination = 0.5 - ((age - 22) / 7 * 0.5)

    return phase, illumination

def calculate_moon_phase(now: Optional[datetime] = None) -> MoonPhase:
    """Calculate the moon phase for an instant.

    This is a simple mean-cycle approximation anchored on a known new moon,
    good to about a day. It is not an ephemeris.

    Args:
        now: Instant to evaluate; naive datetimes are treated as UTC.
            Defaults to the current time.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    days_since_known_new = (now - KNOWN_NEW_MOON).total_seconds() / 86400
    cycle_position = days_since_known_new % SYNODIC_MONTH
    age = math.floor(cycle_position)

    phase, illumination = _phase_for_age(age)

    days_to_next_new = SYNODIC_MONTH - cycle_position
    # Jumps from 1 day to a full cycle once age reaches 15
    days_to_next_full = 15 - age if age < 15 else SYNODIC_MONTH - age + 15

    return MoonPhase(
        phase=phase,
        illumination=math.floor(illumination * 100 + 0.5) / 100,
        age=age,
        next_new=now + timedelta(days=days_to_next_new),
        next_full=now + timedelta(days=days_to_next_full),
        emoji=phase.emoji
    )
