import pytest

from features.moon.models.moon_types import MoonPhaseName
from features.scoring.models.score_types import FishingRating, TimeOfDay
from features.scoring.services.fishing_score_engine import calculate_fishing_score
from features.tides.models.tide_types import TideType

def test_no_inputs_is_neutral_fair():
    result = calculate_fishing_score()
    assert result.score == 50
    assert result.rating == FishingRating.FAIR
    assert result.color == "#FFB84D"
    assert result.reasons == []

def test_ideal_pressure_only():
    result = calculate_fishing_score(pressure=1018)
    assert result.score == 65
    assert result.rating == "Good"
    assert result.color == "#90EE90"
    assert result.reasons == ["Ideal pressure"]

def test_clamped_to_100_with_reasons_in_order():
    result = calculate_fishing_score(pressure=1018, wind_speed=7, moon_phase="Full Moon", tide_type="H")
    assert result.score == 100
    assert result.rating == FishingRating.EXCELLENT
    assert result.color == "#72E5A2"
    assert result.reasons == ["Ideal pressure", "Perfect wind", "Major lunar phase", "High tide incoming"]

def test_every_adjustment_in_evaluation_order():
    result = calculate_fishing_score(
        pressure=995,
        wind_speed=25,
        moon_phase=MoonPhaseName.LAST_QUARTER,
        tide_type=TideType.HIGH,
        time_of_day=TimeOfDay.DAWN
    )
    assert result.score == 50 - 10 - 15 + 8 + 10 + 10
    assert result.reasons == [
        "Low pressure", "Strong winds", "Minor lunar phase", "High tide incoming", "Prime feeding time"
    ]

@pytest.mark.parametrize("pressure, delta, reason", [
    (1015, 15, "Ideal pressure"),
    (1020, 15, "Ideal pressure"),
    (1020.5, 5, "High pressure"),
    (1010, 0, None),
    (1000, 0, None),
    (999.9, -10, "Low pressure"),
])
def test_pressure_bands(pressure, delta, reason):
    result = calculate_fishing_score(pressure=pressure)
    assert result.score == 50 + delta
    assert result.reasons == ([reason] if reason else [])

@pytest.mark.parametrize("wind_speed, delta, reason", [
    (0, 10, "Calm winds"),
    (4.9, 10, "Calm winds"),
    (5, 15, "Perfect wind"),
    (10, 15, "Perfect wind"),
    (15, 0, None),
    (20, 0, None),
    (21, -15, "Strong winds"),
])
def test_wind_bands(wind_speed, delta, reason):
    result = calculate_fishing_score(wind_speed=wind_speed)
    assert result.score == 50 + delta
    assert result.reasons == ([reason] if reason else [])

@pytest.mark.parametrize("phase, delta", [
    ("New Moon", 15),
    (MoonPhaseName.FULL_MOON, 15),
    ("First Quarter", 8),
    ("Waxing Gibbous", 0),
    ("", 0),
])
def test_moon_phase(phase, delta):
    assert calculate_fishing_score(moon_phase=phase).score == 50 + delta

def test_low_tide_and_midday_do_not_adjust():
    result = calculate_fishing_score(tide_type="L", time_of_day="afternoon")
    assert result.score == 50
    assert result.reasons == []

def test_dusk_is_prime_feeding_time():
    result = calculate_fishing_score(time_of_day="dusk")
    assert result.score == 60
    assert result.reasons == ["Prime feeding time"]

@pytest.mark.parametrize("kwargs, rating", [
    ({"pressure": 1018, "moon_phase": "Full Moon"}, FishingRating.EXCELLENT),  # 80
    ({"pressure": 990}, FishingRating.FAIR),  # 40
    ({"wind_speed": 25}, FishingRating.POOR),  # 35
    ({"pressure": 990, "wind_speed": 25}, FishingRating.POOR),  # 25
])
def test_rating_thresholds(kwargs, rating):
    result = calculate_fishing_score(**kwargs)
    assert result.rating == rating
    assert result.color == rating.color
