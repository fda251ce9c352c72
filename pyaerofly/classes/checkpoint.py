"""
Checkpoints (waypoints) of an Aerofly FS4 flight plan.
"""

import math
from typing import Optional

from pyaerofly.classes.mission_objects import CheckpointType
from pyaerofly.misc.units import feet_to_meters, format_frequency, meters_to_feet
from pyaerofly.parsers.config_node import ConfigNode


class MissionCheckpoint:
    """
    A single waypoint of a flight plan.

    Attributes:
        name (str): ICAO code for airport, runway designator, navaid designator, fix name or custom name
        type (str): Kind of checkpoint, e.g. "departure_runway"
        longitude (float): WGS 84 easting in decimal degrees, -180..180
        latitude (float): WGS 84 northing in decimal degrees, -90..90
        altitude (float): Height in meters above the WGS 84 ellipsoid
        altitude_constraint (Optional[bool]): Treat `altitude` as mandatory instead of a suggestion
        direction (Optional[float]): Runway direction in degrees
        slope (Optional[float]): Runway slope
        length (Optional[float]): Runway length in meters
        frequency (Optional[float]): Runway or navaid frequency in Hz
        fly_over (Optional[bool]): Whether the waypoint is meant to be flown over
    """

    def __init__(self,
                 name: str,
                 type: CheckpointType,
                 longitude: float,
                 latitude: float,
                 *,
                 altitude: float = 0,
                 altitude_feet: Optional[float] = None,
                 altitude_constraint: Optional[bool] = None,
                 direction: Optional[float] = None,
                 slope: Optional[float] = None,
                 length: Optional[float] = None,
                 length_feet: Optional[float] = None,
                 frequency: Optional[float] = None,
                 fly_over: Optional[bool] = None):
        """
        Initialize a checkpoint.

        Args:
            altitude_feet: Altitude in feet; overrides `altitude`
            length_feet: Runway length in feet; overrides `length`
        """
        self.name = name
        self.type = type
        self.longitude = longitude
        self.latitude = latitude
        self.altitude = altitude
        self.altitude_constraint = altitude_constraint
        self.direction = direction
        self.slope = slope
        self.length = length
        self.frequency = frequency
        self.fly_over = fly_over

        if altitude_feet is not None:
            self.altitude_feet = altitude_feet
        if length_feet is not None:
            self.length_feet = length_feet

    @property
    def altitude_feet(self) -> float:
        return meters_to_feet(self.altitude)

    @altitude_feet.setter
    def altitude_feet(self, altitude_feet: float):
        self.altitude = feet_to_meters(altitude_feet)

    @property
    def length_feet(self) -> float:
        return meters_to_feet(self.length or 0)

    @length_feet.setter
    def length_feet(self, length_feet: float):
        self.length = feet_to_meters(length_feet)

    @property
    def frequency_string(self) -> str:
        return format_frequency(self.frequency)

    def get_element(self, index: int = 0) -> ConfigNode:
        """
        Builds the checkpoint entry.

        Args:
            index: Position in the mission's checkpoint list, used as element value

        Returns:
            ConfigNode for a `list_tmmission_checkpoint` container
        """
        # The first checkpoint has no inbound course
        direction = self.direction if self.direction is not None else (-1 if index == 0 else 0)

        element = (ConfigNode("tmmission_checkpoint", "element", str(index))
                   .append_child("string8u", "type", self.type)
                   .append_child("string8u", "name", self.name)
                   .append_child("vector2_float64", "lon_lat", [self.longitude, self.latitude])
                   .append_child("float64", "altitude", self.altitude, f"{math.ceil(self.altitude_feet)} ft")
                   .append_child("float64", "direction", direction)
                   .append_child("float64", "slope", self.slope if self.slope is not None else 0))

        if self.altitude_constraint is not None:
            element.append_child("bool", "alt_cst", self.altitude_constraint)
        if self.length is not None:
            element.append_child("float64", "length", self.length, f"{math.floor(self.length_feet)} ft")
        if self.frequency is not None:
            element.append_child("float64", "frequency", self.frequency, self.frequency_string)
        if self.fly_over is not None:
            element.append_child("bool", "fly_over", self.fly_over)

        return element

    def __repr__(self) -> str:
        return (f"MissionCheckpoint(name='{self.name}', type='{self.type}', "
                f"longitude={self.longitude}, latitude={self.latitude})")
