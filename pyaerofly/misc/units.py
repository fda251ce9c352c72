"""
Unit constants and conversions used by the mission file format.

Aerofly stores altitudes and lengths in meters, visibility in meters and
radio frequencies in Hz; humans usually think in feet, statute miles and MHz.
"""

from typing import Optional

FEET_PER_METER = 3.28084
METERS_PER_STATUTE_MILE = 1609.344


def meters_to_feet(meters: float) -> float:
    return meters * FEET_PER_METER


def feet_to_meters(feet: float) -> float:
    return feet / FEET_PER_METER


def meters_to_statute_miles(meters: float) -> float:
    return meters / METERS_PER_STATUTE_MILE


def statute_miles_to_meters(statute_miles: float) -> float:
    return statute_miles * METERS_PER_STATUTE_MILE


def format_frequency(frequency: Optional[float]) -> str:
    """
    Human readable frequency for file comments.

    Examples:
        >>> format_frequency(108700000)
        '108.7 MHz'
        >>> format_frequency(None)
        'None'
    """
    if not frequency:
        return "None"
    if frequency > 1_000_000:
        return f"{_trim(frequency / 1_000_000)} MHz"
    if frequency > 1000:
        return f"{_trim(frequency / 1000)} kHz"
    return f"{_trim(frequency)} Hz"


def _trim(number: float) -> str:
    # 108.0 -> "108"
    if float(number).is_integer():
        return str(int(number))
    return str(number)
