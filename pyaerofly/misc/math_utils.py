"""
Mathematical utility functions for pyaerofly.

Distances between WGS 84 coordinates, used to fill in a mission's distance
from its checkpoints.
"""
import math

import numpy as np
from typing import List, Sequence, Tuple

# (longitude, latitude) in decimal degrees
LonLat = Tuple[float, float]

# Mean earth radius in meters
EARTH_RADIUS = 6_371_000.0


def calculate_great_circle_distance(pos1: LonLat, pos2: LonLat) -> float:
    """
    Calculate the great-circle distance between two points.

    Args:
        pos1: First position (longitude, latitude)
        pos2: Second position (longitude, latitude)

    Returns:
        Distance in meters

    Examples:
        >>> round(calculate_great_circle_distance((0, 0), (0, 1)))
        111195
    """
    return float(calculate_leg_distances([pos1, pos2])[0])


def calculate_leg_distances(positions: Sequence[LonLat]) -> List[float]:
    """
    Calculate the great-circle distance of every leg along a route.

    Args:
        positions: Ordered (longitude, latitude) pairs

    Returns:
        One distance in meters per consecutive pair; empty for fewer than two positions
    """
    if len(positions) < 2:
        return []

    coords = np.radians(np.asarray(positions, dtype=float))
    lon, lat = coords[:, 0], coords[:, 1]
    dlon = np.diff(lon)
    dlat = np.diff(lat)

    # Haversine
    a = np.sin(dlat / 2) ** 2 + np.cos(lat[:-1]) * np.cos(lat[1:]) * np.sin(dlon / 2) ** 2
    c = 2 * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))
    return (EARTH_RADIUS * c).tolist()


def calculate_route_distance(positions: Sequence[LonLat]) -> float:
    """Total great-circle length of a route in meters."""
    return float(sum(calculate_leg_distances(positions)))


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves rounded up.

    Unlike round(), 2.5 gives 3.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
    """
    return math.floor(value + 0.5)
