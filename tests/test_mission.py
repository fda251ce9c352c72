"""Tests for Mission."""

import re

import pytest

from pyaerofly import (
    LocalizedText,
    MissingCheckpointsError,
    Mission,
    MissionAircraft,
    MissionCheckpoint,
    TargetPlane,
)
from tests.conftest import assert_valid_structure


def _labels(rendered: str):
    return re.findall(r"^\s*<\[\w+\]\[(\w+)\]", rendered, re.M)


class TestConstruction:
    """Tests for defaults."""

    def test_title(self) -> None:
        """Only the title is required."""
        mission = Mission("Title")
        assert mission.title == "Title"
        assert mission.flight_setting == "taxi"
        assert mission.aircraft == MissionAircraft("c172", "", "")
        assert mission.checkpoints == []

    def test_lists_are_not_shared(self) -> None:
        """Every mission gets its own lists."""
        first, second = Mission("A"), Mission("B")
        first.tags.append("x")
        assert second.tags == []

    def test_add_checkpoint(self) -> None:
        """add_checkpoint appends and chains."""
        checkpoint = MissionCheckpoint("KCCR", "origin", 0, 0)
        mission = Mission("A")
        assert mission.add_checkpoint(checkpoint) is mission
        assert mission.checkpoints == [checkpoint]


class TestMissingCheckpoints:
    """Tests for the checkpoint count requirement."""

    @pytest.mark.parametrize("count", [0, 1])
    def test_raises(self, count) -> None:
        """Fewer than two checkpoints cannot be rendered."""
        mission = Mission("Short", checkpoints=[MissionCheckpoint("A", "origin", 0, 0)] * count)
        with pytest.raises(MissingCheckpointsError, match="at least 2 checkpoints"):
            mission.render()

    def test_is_value_error(self) -> None:
        """Callers can catch it as ValueError."""
        with pytest.raises(ValueError):
            Mission("Empty").get_element()


class TestGetElement:
    """Tests for the mission block."""

    def test_example_fields(self, mission) -> None:
        """The explicit origin is written with its altitude comment."""
        rendered = mission.render()
        assert_valid_structure(rendered)
        assert "    <[string8][title][KCCR #1: Concord / Buchanan Field]>" in rendered
        assert "    <[string8][flight_setting][cruise]>" in rendered
        assert "    <[stringt8c][aircraft_icao][C172]>" in rendered
        assert "    <[stringt8c][callsign][N51911]>" in rendered
        assert "    <[float64][origin_alt][1066.799965862401]> // 3500 ft MSL" in rendered
        assert "    <[float64][origin_dir][190]>" in rendered

    def test_field_order(self, mission) -> None:
        """Fields follow the simulator's file order."""
        labels = _labels(mission.render())
        expected = [
            "mission", "title", "description", "flight_setting", "aircraft_name",
            "aircraft_icao", "callsign", "origin_icao", "origin_lon_lat", "origin_alt",
            "origin_dir", "destination_icao", "destination_lon_lat", "destination_alt",
            "destination_dir", "conditions",
        ]
        assert labels[:len(expected)] == expected
        assert labels[-1] == "fly_over"

    def test_destination_from_last_checkpoint(self, mission) -> None:
        """An empty destination is filled from the last checkpoint for rendering only."""
        rendered = mission.render()
        assert "    <[stringt8c][destination_icao][KMVY]>" in rendered
        assert "    <[tmvector2d][destination_lon_lat][-70.6139 41.3934]>" in rendered
        assert "    <[float64][destination_alt][20]> // 66 ft MSL" in rendered
        assert mission.destination.icao == ""

    def test_origin_from_first_checkpoint(self, checkpoints) -> None:
        """An empty origin is filled from the first checkpoint, keeping its direction."""
        mission = Mission("A", checkpoints=checkpoints)
        mission.origin.dir = 45
        rendered = mission.render()
        assert "    <[stringt8c][origin_icao][KCCR]>" in rendered
        assert "    <[float64][origin_dir][45]>" in rendered
        assert mission.origin.icao == ""

    def test_four_checkpoints_in_order(self, mission) -> None:
        """Checkpoint elements are indexed 0 to 3."""
        rendered = mission.render()
        assert rendered.count("[element][") == 4
        assert re.findall(r"\[element\]\[(\d+)\]", rendered) == ["0", "1", "2", "3"]

    def test_optional_fields_are_omitted(self, checkpoints) -> None:
        """None and empty optionals are not written."""
        labels = _labels(Mission("A", checkpoints=checkpoints).render())
        for label in ("tutorial_name", "localized_text", "tags", "difficulty", "is_featured",
                      "distance", "duration", "is_scheduled", "finish", "aircraft_livery"):
            assert label not in labels

    def test_optional_fields(self, checkpoints) -> None:
        """Optional fields are written with their comments."""
        mission = Mission(
            "A",
            checkpoints=checkpoints,
            tutorial_name="c172",
            localized_texts=[LocalizedText("de", "Titel", "Text")],
            tags=["pattern", "vfr"],
            difficulty=0.0,
            is_featured=False,
            distance=12_600,
            duration=2_700,
            is_scheduled=True,
            finish=TargetPlane(-70.6, 41.4, 240),
        )
        rendered = mission.render()
        assert_valid_structure(rendered)
        assert ("    <[string8][tutorial_name][c172]> "
                "// Opens https://www.aerofly.com/aircraft-tutorials/c172") in rendered
        assert "    <[list_tmmission_definition_localized][localized_text][]" in rendered
        assert "        <[tmmission_definition_localized][element][0]" in rendered
        assert "    <[string8u][tags][pattern vfr]>" in rendered
        assert "    <[float64][difficulty][0]>" in rendered
        assert "    <[bool][is_featured][false]>" in rendered
        assert "    <[float64][distance][12600]> // 13 km" in rendered
        assert "    <[float64][duration][2700]> // 45 min" in rendered
        assert "    <[bool][is_scheduled][true]>" in rendered
        assert "    <[tmmission_target_plane][finish][]" in rendered

    @pytest.mark.parametrize("distance, duration, km, minutes", [
        (2500, 150, "3 km", "3 min"),
        (3500, 210, "4 km", "4 min"),
        (2499, 149, "2 km", "2 min"),
    ])
    def test_halves_round_up(self, checkpoints, distance, duration, km, minutes) -> None:
        """Distance and duration comments round .5 up."""
        rendered = Mission("A", checkpoints=checkpoints, distance=distance, duration=duration).render()
        assert f"    <[float64][distance][{distance}]> // {km}" in rendered
        assert f"    <[float64][duration][{duration}]> // {minutes}" in rendered

    def test_livery_is_commented(self, checkpoints) -> None:
        """The livery is kept in the file but not read by the simulator."""
        mission = Mission("A", checkpoints=checkpoints,
                          aircraft=MissionAircraft("c172", "C172", "blue"))
        assert "    // <[string8][aircraft_livery][blue]>" in mission.render()

    def test_render_does_not_mutate(self, mission) -> None:
        """Rendering twice gives identical output."""
        assert mission.render() == mission.render()
        assert str(mission) == mission.render()

    def test_xml(self, mission) -> None:
        """The XML form has the same structure."""
        xml = mission.render_xml()
        assert xml.startswith('<mission type="tmmission_definition">')
        assert '<element type="tmmission_checkpoint" index="3">' in xml
        assert xml.endswith("</mission>")


class TestCalculateDistance:
    """Tests for the route distance helper."""

    def test_route_distance(self, mission) -> None:
        """Concord to Martha's Vineyard is roughly 4,355 km."""
        assert mission.calculate_distance() == pytest.approx(4_355_000, rel=0.01)

    def test_no_checkpoints(self) -> None:
        """An empty route has no length."""
        assert Mission("A").calculate_distance() == 0
