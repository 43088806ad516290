import math
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

from features.buoys.models.buoy_types import BuoyObservation, PressureTrend, TrendDirection
from features.common.exceptions.marine_exceptions import ParseError
from core.config import settings

# Row 1 is field names, row 2 is units, observations start at row 3 (newest first)
DATA_START_ROW = 2
MISSING_VALUE = "MM"

def _parse_value(value: Optional[str]) -> Optional[float]:
    """Parse an NDBC value, treating the MM sentinel and non-finite numbers as absent."""
    if value is None or value == MISSING_VALUE:
        return None
    try:
        number = float(value)
    except (ValueError, TypeError):
        return None
    return number if math.isfinite(number) else None

def _split_lines(text: str) -> List[str]:
    lines = [line for line in text.strip().splitlines() if line.strip()]
    if len(lines) < 3:
        raise ParseError(
            f"Buoy report needs a header, a units row and at least one observation "
            f"(got {len(lines)} lines)"
        )
    return lines

def _build_timestamp(row: Dict[str, str]) -> str:
    fields = {
        "YY": row.get("#YY") or row.get("YY"),
        "MM": row.get("MM"),
        "DD": row.get("DD"),
        "hh": row.get("hh"),
        "mm": row.get("mm")
    }
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise ParseError(f"Buoy report is missing timestamp fields: {', '.join(missing)}")

    timestamp = (
        f"{fields['YY'].zfill(4)}-{fields['MM'].zfill(2)}-{fields['DD'].zfill(2)}"
        f"T{fields['hh'].zfill(2)}:{fields['mm'].zfill(2)}:00Z"
    )
    try:
        datetime.strptime(timestamp, "%Y-%m-%dT%H:%M:%SZ")
    except ValueError:
        raise ParseError(f"Buoy report has an invalid timestamp: {timestamp}")
    return timestamp

def _parse_row(headers: List[str], line: str) -> BuoyObservation:
    row = dict(zip(headers, line.split()))
    return BuoyObservation(
        timestamp=_build_timestamp(row),
        water_temp_c=_parse_value(row.get("WTMP")),
        air_temp_c=_parse_value(row.get("ATMP")),
        pressure_hpa=_parse_value(row.get("PRES")),
        wind_speed_mps=_parse_value(row.get("WSPD")),
        wind_direction_deg=_parse_value(row.get("WDIR")),
        wind_gust_mps=_parse_value(row.get("GST"))
    )

def parse_buoy_report(text: str) -> BuoyObservation:
    """Parse the newest observation from an NDBC standard meteorological report.

    Args:
        text: Raw report body, e.g. the contents of ``44020.txt``

    Returns:
        BuoyObservation built from the first data row. Fields the buoy did not
        report ("MM") are None.

    Raises:
        ParseError: fewer than three lines, or an incomplete timestamp
    """
    lines = _split_lines(text)
    headers = lines[0].split()
    return _parse_row(headers, lines[DATA_START_ROW])

def parse_buoy_history(text: str, limit: Optional[int] = None) -> List[BuoyObservation]:
    """Parse up to ``limit`` rows, newest first.

    The newest row must parse. Older rows with a broken timestamp are skipped.
    """
    lines = _split_lines(text)
    headers = lines[0].split()
    rows = lines[DATA_START_ROW:]
    if limit is not None:
        rows = rows[:limit]

    history = [_parse_row(headers, rows[0])]
    for line in rows[1:]:
        try:
            history.append(_parse_row(headers, line))
        except ParseError:
            continue
    return history

def parse_observation_and_trend(
    text: str,
    limit: Optional[int] = None
) -> Tuple[BuoyObservation, PressureTrend]:
    """Newest observation plus the pressure trend over the first ``limit`` rows."""
    limit = settings.pressure_history_rows if limit is None else limit
    history = parse_buoy_history(text, limit=max(limit, 1))
    trend = calculate_pressure_trend([obs.pressure_hpa for obs in history])
    return history[0], trend

def calculate_pressure_trend(
    pressures: Sequence[Optional[float]],
    threshold: Optional[float] = None
) -> PressureTrend:
    """Compare the latest pressure against the average of the earlier readings.

    Readings are ordered newest first; absent readings are skipped. Fewer than
    three usable readings is reported as steady.
    """
    threshold = settings.pressure_trend_threshold if threshold is None else threshold
    readings = [p for p in pressures if p is not None and math.isfinite(p)]

    if len(readings) < 3:
        return PressureTrend(
            label=TrendDirection.STEADY,
            icon=TrendDirection.STEADY.icon,
            delta=None,
            samples=len(readings)
        )

    latest, *rest = readings
    delta = round(latest - sum(rest) / len(rest), 2)

    if delta > threshold:
        label = TrendDirection.RISING
    elif delta < -threshold:
        label = TrendDirection.FALLING
    else:
        label = TrendDirection.STEADY

    return PressureTrend(label=label, icon=label.icon, delta=delta, samples=len(readings))
