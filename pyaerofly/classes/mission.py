"""
A single Aerofly FS4 flight plan, including aircraft and weather.

Collects the data of one `tmmission_definition` entry of the simulator's
`custom_missions_user.tmc` file and builds its configuration node subtree.
"""

import math
from typing import List, Optional

from pyaerofly.classes.checkpoint import MissionCheckpoint
from pyaerofly.classes.conditions import MissionConditions
from pyaerofly.classes.mission_objects import (
    FlightSetting,
    LocalizedText,
    MissionAircraft,
    MissionPosition,
    TargetPlane,
)
from pyaerofly.misc.logger import create_logger
from pyaerofly.misc.math_utils import calculate_route_distance, round_half_up
from pyaerofly.misc.units import meters_to_feet
from pyaerofly.misc.validation_framework import MissionValidator, ValidationResult
from pyaerofly.parsers.config_node import ConfigNode, commented_node

TUTORIAL_URL = "https://www.aerofly.com/aircraft-tutorials/"
MIN_CHECKPOINTS = 2


class MissingCheckpointsError(ValueError):
    """Raised when a mission is rendered without an origin and a destination checkpoint."""
    pass


class Mission:
    """
    Represents one flight plan of a missions list.

    Optional attributes left as None (or empty) are not written to the file.

    Attributes:
        title (str): Title of this flight plan
        description (str): Mission briefing
        tutorial_name (Optional[str]): Links the mission to a page below TUTORIAL_URL
        localized_texts (List[LocalizedText]): Translations of title and description
        tags (List[str]): Free-form tags
        is_featured (Optional[bool]): Shows the mission in "Challenges"
        difficulty (Optional[float]): Usually 0.00 to 2.00
        flight_setting (str): Aircraft state on start, e.g. "taxi", "cruise"
        aircraft (MissionAircraft): Aircraft for this mission
        callsign (str): Uppercased callsign
        origin (MissionPosition): Start position; derived from the first checkpoint if icao is empty
        destination (MissionPosition): End position; derived from the last checkpoint if icao is empty
        distance (Optional[float]): In meters
        duration (Optional[float]): In seconds
        is_scheduled (Optional[bool]): Marks this flight as "Scheduled flight"
        finish (Optional[TargetPlane]): Finish condition
        conditions (MissionConditions): Time and weather
        checkpoints (List[MissionCheckpoint]): The actual flight plan
    """

    def __init__(self,
                 title: str,
                 *,
                 description: str = "",
                 tutorial_name: Optional[str] = None,
                 localized_texts: Optional[List[LocalizedText]] = None,
                 tags: Optional[List[str]] = None,
                 is_featured: Optional[bool] = None,
                 difficulty: Optional[float] = None,
                 flight_setting: FlightSetting = "taxi",
                 aircraft: Optional[MissionAircraft] = None,
                 callsign: str = "",
                 origin: Optional[MissionPosition] = None,
                 destination: Optional[MissionPosition] = None,
                 distance: Optional[float] = None,
                 duration: Optional[float] = None,
                 is_scheduled: Optional[bool] = None,
                 finish: Optional[TargetPlane] = None,
                 conditions: Optional[MissionConditions] = None,
                 checkpoints: Optional[List[MissionCheckpoint]] = None,
                 verbose: bool = False):
        self.title = title
        self.description = description
        self.tutorial_name = tutorial_name
        self.localized_texts: List[LocalizedText] = list(localized_texts or [])
        self.tags: List[str] = list(tags or [])
        self.is_featured = is_featured
        self.difficulty = difficulty
        self.flight_setting = flight_setting
        self.aircraft = aircraft if aircraft is not None else MissionAircraft()
        self.callsign = callsign
        self.origin = origin if origin is not None else MissionPosition()
        self.destination = destination if destination is not None else MissionPosition()
        self.distance = distance
        self.duration = duration
        self.is_scheduled = is_scheduled
        self.finish = finish
        self.conditions = conditions if conditions is not None else MissionConditions()
        self.checkpoints: List[MissionCheckpoint] = list(checkpoints or [])
        self.logger = create_logger(verbose=verbose, name="Mission")

    def add_checkpoint(self, checkpoint: MissionCheckpoint) -> "Mission":
        self.checkpoints.append(checkpoint)
        return self

    def calculate_distance(self) -> float:
        """Great-circle length of the checkpoint route in meters."""
        return calculate_route_distance([(c.longitude, c.latitude) for c in self.checkpoints])

    def validate(self, strict: bool = False) -> ValidationResult:
        """
        Validate this mission without rendering it.

        Args:
            strict: If True, warnings count as errors
        """
        return MissionValidator(strict=strict).validate(self)

    def _resolved_origin(self) -> MissionPosition:
        if self.origin.icao:
            return self.origin
        first = self.checkpoints[0]
        self.logger.debug(f"Origin taken from first checkpoint '{first.name}'")
        return MissionPosition(
            icao=first.name,
            longitude=first.longitude,
            latitude=first.latitude,
            dir=self.origin.dir,
            alt=first.altitude,
        )

    def _resolved_destination(self) -> MissionPosition:
        if self.destination.icao:
            return self.destination
        last = self.checkpoints[-1]
        self.logger.debug(f"Destination taken from last checkpoint '{last.name}'")
        return MissionPosition(
            icao=last.name,
            longitude=last.longitude,
            latitude=last.latitude,
            dir=last.direction if last.direction is not None else 0,
            alt=last.altitude,
        )

    def get_element(self) -> ConfigNode:
        """
        Builds the `tmmission_definition` node for this mission.

        Raises:
            MissingCheckpointsError: If fewer than two checkpoints are set
        """
        if len(self.checkpoints) < MIN_CHECKPOINTS:
            raise MissingCheckpointsError(
                f"Mission '{self.title}' needs at least {MIN_CHECKPOINTS} checkpoints "
                f"(origin and destination), got {len(self.checkpoints)}"
            )

        origin = self._resolved_origin()
        destination = self._resolved_destination()

        element = (ConfigNode("tmmission_definition", "mission")
                   .append_child("string8", "title", self.title)
                   .append_child("string8", "description", self.description))

        if self.tutorial_name is not None:
            element.append_child("string8", "tutorial_name", self.tutorial_name,
                                 f"Opens {TUTORIAL_URL}{self.tutorial_name}")
        if self.localized_texts:
            element.append(
                ConfigNode("list_tmmission_definition_localized", "localized_text").append(
                    *(text.get_element(i) for i, text in enumerate(self.localized_texts))
                )
            )
        if self.tags:
            element.append_child("string8u", "tags", self.tags)
        if self.difficulty is not None:
            element.append_child("float64", "difficulty", self.difficulty)
        if self.is_featured is not None:
            element.append_child("bool", "is_featured", self.is_featured)

        element.append_child("string8", "flight_setting", self.flight_setting)
        element.append_child("string8u", "aircraft_name", self.aircraft.name)
        if self.aircraft.livery:
            # Not read by the simulator yet
            element.append(commented_node("string8", "aircraft_livery", self.aircraft.livery))
        (element
         .append_child("stringt8c", "aircraft_icao", self.aircraft.icao)
         .append_child("stringt8c", "callsign", self.callsign)
         .append_child("stringt8c", "origin_icao", origin.icao)
         .append_child("tmvector2d", "origin_lon_lat", [origin.longitude, origin.latitude])
         .append_child("float64", "origin_alt", origin.alt,
                       f"{math.ceil(meters_to_feet(origin.alt))} ft MSL")
         .append_child("float64", "origin_dir", origin.dir)
         .append_child("stringt8c", "destination_icao", destination.icao)
         .append_child("tmvector2d", "destination_lon_lat", [destination.longitude, destination.latitude])
         .append_child("float64", "destination_alt", destination.alt,
                       f"{math.ceil(meters_to_feet(destination.alt))} ft MSL")
         .append_child("float64", "destination_dir", destination.dir))

        if self.distance is not None:
            element.append_child("float64", "distance", self.distance, f"{round_half_up(self.distance / 1000)} km")
        if self.duration is not None:
            element.append_child("float64", "duration", self.duration, f"{round_half_up(self.duration / 60)} min")
        if self.is_scheduled is not None:
            element.append_child("bool", "is_scheduled", self.is_scheduled)
        if self.finish is not None:
            element.append(self.finish.get_element())

        element.append(self.conditions.get_element())
        element.append(
            ConfigNode("list_tmmission_checkpoint", "checkpoints").append(
                *(checkpoint.get_element(i) for i, checkpoint in enumerate(self.checkpoints))
            )
        )
        return element

    def render(self, indent: int = 0) -> str:
        return self.get_element().render(indent)

    def render_xml(self, indent: int = 0) -> str:
        return self.get_element().render_xml(indent)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"Mission(title='{self.title}', aircraft='{self.aircraft.name}', "
                f"checkpoints={len(self.checkpoints)})")
