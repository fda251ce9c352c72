"""
Time and weather of an Aerofly FS4 mission.
"""

import math
from datetime import datetime, timezone
from typing import List, Optional

from pyaerofly.classes.mission_objects import MissionConditionsCloud, MissionWind
from pyaerofly.misc.units import meters_to_statute_miles, statute_miles_to_meters
from pyaerofly.parsers.config_node import ConfigNode

# thermal_strength is derived from a temperature between these bounds (°C)
MIN_TEMPERATURE = -15
TEMPERATURE_RANGE = 50


class MissionConditions:
    """
    Time and weather data for a flight plan.

    Attributes:
        time (datetime): Mission time; only the UTC part is relevant
        wind (MissionWind): Wind state
        turbulence_strength (float): 0..1
        thermal_strength (float): 0..1
        visibility (float): Visibility in meters
        clouds (List[MissionConditionsCloud]): Cloud layers, lowest first
    """

    def __init__(self,
                 *,
                 time: Optional[datetime] = None,
                 wind: Optional[MissionWind] = None,
                 turbulence_strength: float = 0,
                 thermal_strength: float = 0,
                 visibility: float = 25_000,
                 visibility_sm: Optional[float] = None,
                 temperature: Optional[float] = None,
                 clouds: Optional[List[MissionConditionsCloud]] = None):
        """
        Initialize mission conditions.

        Args:
            time: Defaults to now; naive datetimes are taken as UTC
            visibility_sm: Visibility in statute miles; overrides `visibility`
            temperature: Temperature in °C; overrides `thermal_strength`
        """
        self.time = time if time is not None else datetime.now(timezone.utc)
        self.wind = wind if wind is not None else MissionWind()
        self.turbulence_strength = turbulence_strength
        self.thermal_strength = thermal_strength
        self.visibility = visibility
        self.clouds: List[MissionConditionsCloud] = list(clouds) if clouds else []

        if visibility_sm is not None:
            self.visibility_sm = visibility_sm
        if temperature is not None:
            self.temperature = temperature

    @property
    def time_utc(self) -> datetime:
        if self.time.tzinfo is None:
            return self.time.replace(tzinfo=timezone.utc)
        return self.time.astimezone(timezone.utc)

    @property
    def time_hours(self) -> float:
        """UTC hours + minutes/60 + seconds/3600, ignoring fractions of a second."""
        t = self.time_utc
        return t.hour + t.minute / 60 + t.second / 3600

    @property
    def time_presentational(self) -> str:
        """Time like "20:15:00"."""
        return self.time_utc.strftime("%H:%M:%S")

    @property
    def visibility_sm(self) -> float:
        return meters_to_statute_miles(self.visibility)

    @visibility_sm.setter
    def visibility_sm(self, visibility_sm: float):
        self.visibility = statute_miles_to_meters(visibility_sm)

    @property
    def temperature(self) -> float:
        """Temperature in °C, derived from `thermal_strength`; negative strengths read as -15 °C."""
        return math.sqrt(max(0, self.thermal_strength)) * TEMPERATURE_RANGE + MIN_TEMPERATURE

    @temperature.setter
    def temperature(self, temperature: float):
        self.thermal_strength = max(0, (temperature - MIN_TEMPERATURE) / TEMPERATURE_RANGE) ** 2

    def get_element(self) -> ConfigNode:
        """
        Builds the `tmmission_conditions` block.

        A mission without cloud layers gets one clear layer; the layer list
        on this object is left untouched.
        """
        t = self.time_utc
        time_node = (ConfigNode("tm_time_utc", "time")
                     .append_child("int32", "time_year", t.year)
                     .append_child("int32", "time_month", t.month)
                     .append_child("int32", "time_day", t.day)
                     .append_child("float64", "time_hours", self.time_hours, f"{self.time_presentational} UTC"))

        element = (ConfigNode("tmmission_conditions", "conditions")
                   .append(time_node)
                   .append_child("float64", "wind_direction", self.wind.direction)
                   .append_child("float64", "wind_speed", self.wind.speed, "kts")
                   .append_child("float64", "wind_gusts", self.wind.gusts, "kts")
                   .append_child("float64", "turbulence_strength", self.turbulence_strength)
                   .append_child("float64", "thermal_strength", self.thermal_strength, f"{self.temperature} °C")
                   .append_child("float64", "visibility", self.visibility, f"{self.visibility_sm} SM"))

        clouds = self.clouds or [MissionConditionsCloud(0, 0)]
        for index, cloud in enumerate(clouds):
            element.append(*cloud.get_elements(index))

        return element

    def __repr__(self) -> str:
        return (f"MissionConditions(time='{self.time_utc.isoformat()}', wind={self.wind}, "
                f"visibility={self.visibility}, clouds={len(self.clouds)})")
