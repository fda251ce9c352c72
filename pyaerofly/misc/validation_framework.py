"""
Validation framework for pyaerofly missions.

Validation is non-fatal: MissionValidator collects issues with a severity and
the caller decides what to do with them. `MissionsList(strict=True).save()`
refuses to write files whose missions do not validate.
"""
from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Any, List, Optional
import math

from pyaerofly.classes.mission_objects import CHECKPOINT_TYPES, FLIGHT_SETTINGS


class ValidationSeverity(Enum):
    """Severity levels for validation issues."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


_ICONS = {
    ValidationSeverity.INFO: "ℹ",
    ValidationSeverity.WARNING: "⚠",
    ValidationSeverity.ERROR: "✗",
    ValidationSeverity.CRITICAL: "🔥",
}


@dataclass
class ValidationIssue:
    """One finding about a mission field, e.g. `checkpoints[2].latitude`."""
    severity: ValidationSeverity
    message: str
    field: Optional[str] = None
    value: Optional[Any] = None
    suggestion: Optional[str] = None

    def __str__(self) -> str:
        where = f" [{self.field}]" if self.field else ""
        text = f"{_ICONS[self.severity]} {self.severity.value.upper()}{where}: {self.message}"
        if self.suggestion:
            text += f" (suggestion: {self.suggestion})"
        return text


@dataclass
class ValidationResult:
    """
    Issues found in one mission.

    In strict mode warnings count as errors, so a mission with warnings is
    invalid. INFO issues never affect validity.
    """
    issues: List[ValidationIssue] = dataclass_field(default_factory=list)
    strict: bool = False

    def _count(self, severity: ValidationSeverity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    @property
    def warnings_count(self) -> int:
        return 0 if self.strict else self._count(ValidationSeverity.WARNING)

    @property
    def errors_count(self) -> int:
        errors = self._count(ValidationSeverity.ERROR)
        if self.strict:
            errors += self._count(ValidationSeverity.WARNING)
        return errors

    @property
    def critical_count(self) -> int:
        return self._count(ValidationSeverity.CRITICAL)

    @property
    def is_valid(self) -> bool:
        return self.errors_count == 0 and self.critical_count == 0

    @property
    def has_warnings(self) -> bool:
        return self.warnings_count > 0

    @property
    def has_errors(self) -> bool:
        return self.errors_count > 0

    def get_issues_by_severity(self, severity: ValidationSeverity) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == severity]

    def get_summary(self) -> str:
        """One line summary, e.g. `✗ Validation failed: 1 critical, 2 warnings`."""
        if self.is_valid:
            return "✓ Validation passed"

        parts = []
        if self.critical_count > 0:
            parts.append(f"{self.critical_count} critical")
        if self.errors_count > 0:
            parts.append(f"{self.errors_count} errors")
        if self.warnings_count > 0:
            parts.append(f"{self.warnings_count} warnings")

        return f"✗ Validation failed: {', '.join(parts)}"

    def get_report(self) -> str:
        """The summary followed by one indented line per issue."""
        return "\n".join([self.get_summary(), *(f"  {issue}" for issue in self.issues)])


def check_number(
    value: Any,
    field: str,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
    allow_negative: bool = True
) -> List[ValidationIssue]:
    """
    Check a single numeric mission field.

    Non-numbers (including bool), non-finite and disallowed negative values
    are errors; values outside [min_value, max_value] are warnings.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return [ValidationIssue(
            ValidationSeverity.ERROR,
            f"Value must be numeric, got {type(value).__name__}",
            field, value,
            "Use a numeric value (int or float)"
        )]
    if not math.isfinite(value):
        return [ValidationIssue(ValidationSeverity.ERROR, f"Value must be finite, got {value}", field, value)]

    issues = []
    if not allow_negative and value < 0:
        issues.append(ValidationIssue(
            ValidationSeverity.ERROR, f"Negative values not allowed, got {value}", field, value
        ))
    if min_value is not None and value < min_value:
        issues.append(ValidationIssue(
            ValidationSeverity.WARNING, f"Value {value} below minimum {min_value}", field, value,
            f"Use value >= {min_value}"
        ))
    if max_value is not None and value > max_value:
        issues.append(ValidationIssue(
            ValidationSeverity.WARNING, f"Value {value} above maximum {max_value}", field, value,
            f"Use value <= {max_value}"
        ))
    return issues


class MissionValidator:
    """
    Validator for a single Mission.

    Checks the checkpoint list, coordinate ranges, known enumerations and
    weather fractions. A mission with fewer than two checkpoints is critical
    because it cannot be rendered at all.
    """

    def __init__(self, strict: bool = False):
        """
        Args:
            strict: If True, warnings are treated as errors
        """
        self.strict = strict
        self.issues: List[ValidationIssue] = []

    def validate(self, mission: Any) -> ValidationResult:
        self.issues = []
        self._check_checkpoints(mission)
        self._check_settings(mission)
        self._check_conditions(mission.conditions)
        return ValidationResult(self.issues, strict=self.strict)

    def _add(self, severity: ValidationSeverity, message: str, field: str,
             value: Any = None, suggestion: Optional[str] = None):
        self.issues.append(ValidationIssue(severity, message, field, value, suggestion))

    def _check_lon_lat(self, longitude: Any, latitude: Any, field: str):
        self.issues += check_number(longitude, f"{field}.longitude", min_value=-180, max_value=180)
        self.issues += check_number(latitude, f"{field}.latitude", min_value=-90, max_value=90)

    def _check_checkpoints(self, mission: Any):
        checkpoints = list(mission.checkpoints or [])
        if len(checkpoints) < 2:
            self._add(
                ValidationSeverity.CRITICAL,
                f"Mission needs at least 2 checkpoints, got {len(checkpoints)}",
                "checkpoints", len(checkpoints),
                "Add an origin and a destination checkpoint"
            )

        for i, checkpoint in enumerate(checkpoints):
            field = f"checkpoints[{i}]"
            if checkpoint.type not in CHECKPOINT_TYPES:
                self._add(
                    ValidationSeverity.WARNING,
                    f"Unknown checkpoint type '{checkpoint.type}'",
                    f"{field}.type", checkpoint.type,
                    f"Use one of: {', '.join(CHECKPOINT_TYPES)}"
                )
            self._check_lon_lat(checkpoint.longitude, checkpoint.latitude, field)
            if checkpoint.length is not None:
                self.issues += check_number(checkpoint.length, f"{field}.length", allow_negative=False)

    def _check_settings(self, mission: Any):
        if mission.flight_setting not in FLIGHT_SETTINGS:
            self._add(
                ValidationSeverity.WARNING,
                f"Unknown flight setting '{mission.flight_setting}'",
                "flight_setting", mission.flight_setting,
                f"Use one of: {', '.join(FLIGHT_SETTINGS)}"
            )
        if not mission.title:
            self._add(ValidationSeverity.WARNING, "Mission has no title", "title")

        for name in ("origin", "destination"):
            position = getattr(mission, name)
            if position.icao:
                self._check_lon_lat(position.longitude, position.latitude, name)

    def _check_conditions(self, conditions: Any):
        for name in ("turbulence_strength", "thermal_strength"):
            self.issues += check_number(getattr(conditions, name), f"conditions.{name}",
                                        min_value=0, max_value=1)
        self.issues += check_number(conditions.visibility, "conditions.visibility", allow_negative=False)

        for i, cloud in enumerate(conditions.clouds):
            self.issues += check_number(cloud.cover, f"conditions.clouds[{i}].cover", min_value=0, max_value=1)
            self.issues += check_number(cloud.base, f"conditions.clouds[{i}].base", allow_negative=False)
        if len(conditions.clouds) > 2:
            self._add(
                ValidationSeverity.INFO,
                f"Only the first 2 of {len(conditions.clouds)} cloud layers are read by the simulator",
                "conditions.clouds"
            )
