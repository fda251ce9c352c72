"""Shared fixtures and assertions for the pyaerofly test suite."""

from datetime import datetime, timezone
from typing import List

import pytest

from pyaerofly import (
    Mission,
    MissionAircraft,
    MissionCheckpoint,
    MissionConditions,
    MissionConditionsCloud,
    MissionPosition,
    MissionWind,
)


def assert_valid_structure(text: str) -> None:
    """Bracketed output must have balanced <> and [] pairs."""
    assert text.count("<") == text.count(">"), "Number of <> matches"
    assert text.count("[") == text.count("]"), "Number of [] matches"


@pytest.fixture
def checkpoints() -> List[MissionCheckpoint]:
    """Four checkpoints from Concord to Martha's Vineyard."""
    return [
        MissionCheckpoint("KCCR", "origin", -122.057, 37.9897, altitude=8),
        MissionCheckpoint("19L", "departure_runway", -122.05504061196366, 37.993168229891225,
                          length=844.2959729825288),
        MissionCheckpoint("24", "destination_runway", -70.60730234370952, 41.399093035543366,
                          altitude=20, length=1677.6191463161874, frequency=108_700_000),
        MissionCheckpoint("KMVY", "destination", -70.6139, 41.3934, altitude=20, fly_over=False),
    ]


@pytest.fixture
def conditions() -> MissionConditions:
    """Gusty, clear early morning weather with two cloud layers."""
    return MissionConditions(
        time=datetime(2024, 6, 14, 13, 15, 38, tzinfo=timezone.utc),
        wind=MissionWind(direction=190, speed=11, gusts=22),
        turbulence_strength=1,
        temperature=21,
        visibility=14484.096000000001,
        clouds=[
            MissionConditionsCloud.create_in_feet(0.1, 5000),
            MissionConditionsCloud.create_in_feet(0.2, 7500),
        ],
    )


@pytest.fixture
def mission(checkpoints, conditions) -> Mission:
    """A complete mission with explicit origin and derived destination."""
    return Mission(
        "KCCR #1: Concord / Buchanan Field",
        description="It is a gusty, clear early morning. Fly the pattern and land safely.",
        flight_setting="cruise",
        aircraft=MissionAircraft(name="c172", icao="C172"),
        callsign="N51911",
        origin=MissionPosition("KCCR", -122.0736009331662, 38.122300745843944, 190, 1066.799965862401),
        conditions=conditions,
        checkpoints=checkpoints,
    )
