import math
from typing import Optional

class UnitConversions:
    """Centralized utility for unit conversions across the application."""

    COMPASS_POINTS = ["N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
                      "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW"]

    @staticmethod
    def round_half_up(value: float) -> int:
        """Round halves toward +inf, matching display rounding."""
        return math.floor(value + 0.5)

    @staticmethod
    def mps_to_mph(mps: float) -> int:
        """Convert meters per second to whole miles per hour."""
        return UnitConversions.round_half_up(mps * 2.237)

    @staticmethod
    def wind_direction(degrees: float) -> str:
        """Convert degrees to a 16-point compass direction."""
        points = UnitConversions.COMPASS_POINTS
        index = UnitConversions.round_half_up(degrees / 22.5) % len(points)
        return points[index]

    @staticmethod
    def celsius_to_fahrenheit(celsius: Optional[float]) -> Optional[float]:
        if celsius is None:
            return None
        return round(celsius * 9 / 5 + 32, 1)

    @staticmethod
    def meters_to_feet(meters: Optional[float]) -> Optional[float]:
        """Convert meters to feet."""
        if meters is None:
            return None
        return round(meters * 3.28084, 2)
