# pyaerofly/classes/mission_objects.py
from dataclasses import dataclass
from typing import List, Literal, get_args

from pyaerofly.misc.units import feet_to_meters, meters_to_feet
from pyaerofly.parsers.config_node import ConfigNode, commented_node

# State of aircraft systems on mission start (power, flaps, ...)
FlightSetting = Literal[
    "cold_and_dark", "before_start", "taxi", "takeoff", "cruise",
    "approach", "landing", "winch_launch", "aerotow", "pushback",
]
FLIGHT_SETTINGS = get_args(FlightSetting)

# Usually "origin", "departure_runway" first and "destination_runway", "destination" last
CheckpointType = Literal[
    "origin", "departure_runway", "departure", "waypoint",
    "arrival", "approach", "destination_runway", "destination",
]
CHECKPOINT_TYPES = get_args(CheckpointType)

CloudCoverCode = Literal["CLR", "FEW", "SCT", "BKN", "OVC"]

# Cloud layer name prefixes by layer index; the simulator reads the first two
CLOUD_LAYER_NAMES = ("cloud", "cirrus", "cumulus_mediocris")
CLOUD_LAYER_OVERFLOW_NAME = "more_clouds"
READABLE_CLOUD_LAYERS = 2


# --- Aircraft / Position Objects ---
@dataclass
class MissionAircraft:
    """Aircraft flown on a mission."""
    name: str = "c172"  # lowercase Aerofly aircraft ID
    icao: str = ""      # ICAO aircraft type code
    livery: str = ""    # not read by the simulator yet


@dataclass
class MissionPosition:
    """
    Origin or destination of a flight.

    Coordinates are WGS 84 decimal degrees, `dir` in degrees and `alt` in
    meters above the WGS 84 ellipsoid. The position does not have to match
    the airport given in `icao`.
    """
    icao: str = ""
    longitude: float = 0
    latitude: float = 0
    dir: float = 0
    alt: float = 0


@dataclass
class MissionWind:
    """Wind state; direction in degrees, speed and gusts in knots."""
    direction: float = 0
    speed: float = 0
    gusts: float = 0


# --- Text Objects ---
@dataclass
class LocalizedText:
    """Translation of the mission title and description (ISO 639-1 language, e.g. "de")."""
    language: str
    title: str
    description: str

    def get_element(self, index: int = 0) -> ConfigNode:
        return (ConfigNode("tmmission_definition_localized", "element", str(index))
                .append_child("string8u", "language", self.language)
                .append_child("string8", "title", self.title)
                .append_child("string8", "description", self.description))


# --- Finish Condition ---
@dataclass
class TargetPlane:
    """A target plane the aircraft needs to cross, used as finish condition."""
    longitude: float
    latitude: float
    dir: float
    name: str = "finish"

    def get_element(self) -> ConfigNode:
        return (ConfigNode("tmmission_target_plane", self.name)
                .append_child("vector2_float64", "lon_lat", [self.longitude, self.latitude])
                .append_child("float64", "direction", self.dir))


# --- Weather Objects ---
@dataclass
class MissionConditionsCloud:
    """
    A cloud layer of the mission weather.

    Attributes:
        cover (float): Coverage 0..1
        base (float): Cloud base in meters AGL
    """
    cover: float
    base: float

    @classmethod
    def create_in_feet(cls, cover: float, base_feet: float) -> "MissionConditionsCloud":
        return cls(cover, feet_to_meters(base_feet))

    @property
    def base_feet(self) -> float:
        return meters_to_feet(self.base)

    @base_feet.setter
    def base_feet(self, base_feet: float):
        self.base = feet_to_meters(base_feet)

    @property
    def cover_code(self) -> CloudCoverCode:
        """METAR style coverage code for `cover`, e.g. "OVC"."""
        if self.cover < 1 / 8:
            return "CLR"
        if self.cover <= 2 / 8:
            return "FEW"
        if self.cover <= 4 / 8:
            return "SCT"
        if self.cover <= 7 / 8:
            return "BKN"
        return "OVC"

    def get_elements(self, index: int = 0) -> List[ConfigNode]:
        """
        Builds the cover and base fields for this layer.

        Args:
            index: Position of this layer in the weather's cloud list

        Returns:
            Two nodes; commented out for layers the simulator does not read
        """
        if index < 0:
            raise ValueError(f"Cloud layer index must be >= 0, got {index}")

        prefix = CLOUD_LAYER_NAMES[index] if index < len(CLOUD_LAYER_NAMES) else CLOUD_LAYER_OVERFLOW_NAME
        make_node = ConfigNode if index < READABLE_CLOUD_LAYERS else commented_node
        return [
            make_node("float64", f"{prefix}_cover", self.cover, self.cover_code),
            make_node("float64", f"{prefix}_base", self.base, f"{self.base_feet} ft AGL"),
        ]
