from datetime import datetime, timedelta, timezone

import pytest

from features.moon.models.moon_types import MoonPhaseName
from features.moon.services.moon_phase_calculator import (
    calculate_moon_phase,
    KNOWN_NEW_MOON,
    SYNODIC_MONTH
)

def days_after_epoch(days: float) -> datetime:
    return KNOWN_NEW_MOON + timedelta(days=days)

def test_epoch_is_new_moon():
    moon = calculate_moon_phase(datetime(2024, 1, 11, tzinfo=timezone.utc))
    assert moon.phase == MoonPhaseName.NEW_MOON
    assert moon.phase == "New Moon"
    assert moon.illumination == 0
    assert moon.age == 0
    assert moon.emoji == "🌑"
    assert moon.next_new == KNOWN_NEW_MOON + timedelta(days=SYNODIC_MONTH)
    assert moon.next_full == KNOWN_NEW_MOON + timedelta(days=15)

def test_naive_instant_is_treated_as_utc():
    moon = calculate_moon_phase(datetime(2024, 1, 11))
    assert moon.age == 0
    assert moon.next_new.tzinfo is not None

@pytest.mark.parametrize("days, phase, illumination", [
    (0.5, MoonPhaseName.NEW_MOON, 0.0),
    (3.2, MoonPhaseName.WAXING_CRESCENT, 0.21),
    (7.5, MoonPhaseName.FIRST_QUARTER, 0.5),
    (10.0, MoonPhaseName.WAXING_GIBBOUS, 0.71),
    (14.0, MoonPhaseName.FULL_MOON, 1.0),
    (15.9, MoonPhaseName.FULL_MOON, 1.0),
    (18.0, MoonPhaseName.WANING_GIBBOUS, 0.79),
    (23.0, MoonPhaseName.LAST_QUARTER, 0.5),
    (26.0, MoonPhaseName.WANING_CRESCENT, 0.21),
    (29.5, MoonPhaseName.WANING_CRESCENT, 0.0),
])
def test_phase_bands(days, phase, illumination):
    moon = calculate_moon_phase(days_after_epoch(days))
    assert moon.phase == phase
    assert moon.illumination == illumination
    assert 0 <= moon.illumination <= 1

def test_cycle_repeats():
    moon = calculate_moon_phase(days_after_epoch(SYNODIC_MONTH * 3 + 7.5))
    assert moon.phase == MoonPhaseName.FIRST_QUARTER
    assert moon.age == 7

def test_instant_before_epoch_wraps_to_end_of_cycle():
    moon = calculate_moon_phase(days_after_epoch(-1))
    assert moon.age == 28
    assert moon.phase == MoonPhaseName.WANING_CRESCENT
    assert moon.illumination == 0.07
    assert moon.next_new == days_after_epoch(0)

def test_next_full_just_before_age_15():
    now = days_after_epoch(14.5)
    moon = calculate_moon_phase(now)
    assert moon.age == 14
    assert moon.next_full == now + timedelta(days=1)

def test_next_full_jumps_a_cycle_at_age_15():
    now = days_after_epoch(15.5)
    moon = calculate_moon_phase(now)
    assert moon.age == 15
    assert moon.next_full == now + timedelta(days=SYNODIC_MONTH)

def test_defaults_to_current_time():
    moon = calculate_moon_phase()
    assert moon.next_new > datetime.now(timezone.utc)
