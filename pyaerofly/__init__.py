__version__ = "0.1.0"

# --- Configuration Tree ---
from .parsers.config_node import (
    ConfigNode,
    commented_node,
    spacer_node,
    SPACER_SEPARATOR,
)

# --- Core Mission Building ---
from .parsers.tmc_builder import MissionsList, MissionValidationError
from .classes.mission import Mission, MissingCheckpointsError
from .classes.checkpoint import MissionCheckpoint
from .classes.conditions import MissionConditions

# --- Essential Dataclasses ---
from .classes.mission_objects import (
    MissionAircraft,
    MissionPosition,
    MissionWind,
    MissionConditionsCloud,
    LocalizedText,
    TargetPlane,
)

# --- Units ---
from .misc.units import FEET_PER_METER, METERS_PER_STATUTE_MILE

# --- Validation ---
from .misc.validation_framework import (
    ValidationResult,
    ValidationSeverity,
    ValidationIssue,
    MissionValidator,
)

from .misc.logger import create_logger
_logger = create_logger(verbose=False, name="pyaerofly")
_logger.info(f"pyaerofly {__version__} loaded.")
