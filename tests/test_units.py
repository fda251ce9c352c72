"""Tests for unit conversions and route distances."""

import pytest

from pyaerofly.misc.math_utils import (
    calculate_great_circle_distance,
    calculate_leg_distances,
    calculate_route_distance,
    round_half_up,
)
from pyaerofly.misc.units import (
    feet_to_meters,
    format_frequency,
    meters_to_feet,
    meters_to_statute_miles,
    statute_miles_to_meters,
)


class TestConversions:
    """Tests for the unit helpers."""

    def test_feet(self) -> None:
        """Meters and feet convert both ways."""
        assert meters_to_feet(1000) == pytest.approx(3280.84)
        assert feet_to_meters(meters_to_feet(123.4)) == pytest.approx(123.4)

    def test_statute_miles(self) -> None:
        """Statute miles convert both ways."""
        assert statute_miles_to_meters(9) == pytest.approx(14484.096)
        assert meters_to_statute_miles(1609.344) == pytest.approx(1)

    @pytest.mark.parametrize("frequency, expected", [
        (None, "None"),
        (0, "None"),
        (108_700_000, "108.7 MHz"),
        (118_000_000, "118 MHz"),
        (1_000_000, "1000 kHz"),
        (340_000, "340 kHz"),
        (1000, "1000 Hz"),
    ])
    def test_format_frequency(self, frequency, expected) -> None:
        """The largest unit the value exceeds is used."""
        assert format_frequency(frequency) == expected


class TestDistances:
    """Tests for great-circle distances."""

    def test_one_degree_of_latitude(self) -> None:
        """One degree along a meridian is about 111 km."""
        assert round(calculate_great_circle_distance((0, 0), (0, 1))) == 111195

    def test_same_point(self) -> None:
        """A point is zero meters from itself."""
        assert calculate_great_circle_distance((8.5, 47.4), (8.5, 47.4)) == 0

    def test_legs(self) -> None:
        """One distance per consecutive pair."""
        legs = calculate_leg_distances([(0, 0), (0, 1), (0, 3)])
        assert legs == pytest.approx([111195, 222390], rel=1e-4)
        assert calculate_route_distance([(0, 0), (0, 1), (0, 3)]) == pytest.approx(sum(legs))

    @pytest.mark.parametrize("positions", [[], [(0, 0)]])
    def test_short_routes(self, positions) -> None:
        """Routes with fewer than two points have no legs."""
        assert calculate_leg_distances(positions) == []
        assert calculate_route_distance(positions) == 0


class TestRoundHalfUp:
    """Tests for round_half_up."""

    @pytest.mark.parametrize("value, expected", [
        (2.5, 3),
        (3.5, 4),
        (2.4999, 2),
        (-2.5, -2),
        (0, 0),
    ])
    def test_halves(self, value, expected) -> None:
        """Halves go up, unlike round()."""
        assert round_half_up(value) == expected
