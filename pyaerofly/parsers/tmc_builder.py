"""
Missions list (.tmc) file builder for Aerofly FS4.

This module provides the MissionsList class which assembles missions into the
`custom_missions_user.tmc` file the simulator reads its custom missions from.
"""

from pathlib import Path
from typing import List, Optional, Union

from pyaerofly.classes.mission import Mission
from pyaerofly.misc.logger import create_logger
from pyaerofly.misc.validation_framework import ValidationResult
from pyaerofly.parsers.config_node import ConfigNode, spacer_node

DEFAULT_FILE_NAME = "custom_missions_user.tmc"


class MissionValidationError(ValueError):
    """Raised by a strict save when at least one mission does not validate."""

    def __init__(self, message: str, results: List[ValidationResult]):
        super().__init__(message)
        self.results = results


class MissionsList:
    """
    Represents an Aerofly FS4 missions list (.tmc file).

    Attributes:
        missions (List[Mission]): Missions in file order
        strict (bool): Validate missions before saving and refuse invalid ones
        verbose (bool): Whether to print progress messages
    """

    def __init__(self,
                 missions: Optional[List[Mission]] = None,
                 *,
                 verbose: bool = False,
                 strict: bool = False):
        self.missions: List[Mission] = list(missions or [])
        self.verbose = verbose
        self.strict = strict
        self.logger = create_logger(verbose=verbose, name="MissionsList")

    def add_mission(self, mission: Mission) -> "MissionsList":
        """
        Add a mission to the end of this list.

        Args:
            mission: Mission object to add
        """
        self.missions.append(mission)
        self.logger.info(f"Added mission '{mission.title}' as mission #{len(self.missions)}")
        return self

    def get_element(self) -> ConfigNode:
        """
        Builds the complete file tree.

        Consecutive missions are separated by a dashed banner line and each one
        ends with a comment naming it.

        Raises:
            MissingCheckpointsError: If any mission has fewer than two checkpoints
        """
        missions_node = spacer_node("list_tmmission_definition", "missions")
        for mission in self.missions:
            element = mission.get_element()
            element.comment = f"End of {mission.title}"
            missions_node.append(element)

        return ConfigNode("file", "").append(
            ConfigNode("tmmissions_list", "").append(missions_node)
        )

    def validate(self) -> List[ValidationResult]:
        """Validate every mission; one result per mission in list order."""
        return [mission.validate(strict=self.strict) for mission in self.missions]

    def render(self) -> str:
        """
        Generate the .tmc file content as a string.

        Returns:
            String containing the complete file content
        """
        return self.get_element().render()

    def render_xml(self) -> str:
        """XML representation of this missions list."""
        return self.get_element().render_xml()

    def save(self, output_path: Union[str, Path] = DEFAULT_FILE_NAME) -> Path:
        """
        Save the missions list to a .tmc file.

        Parent folders are created. The file is written as UTF-8 without BOM
        and with LF line endings.

        Args:
            output_path: File path; a directory gets DEFAULT_FILE_NAME appended

        Returns:
            Path of the written file

        Raises:
            MissionValidationError: In strict mode, if any mission is invalid
        """
        if self.strict:
            results = self.validate()
            invalid = [
                (mission, result) for mission, result in zip(self.missions, results)
                if not result.is_valid
            ]
            for mission, result in invalid:
                self.logger.error(f"Mission '{mission.title}': {result.get_report()}")
            if invalid:
                raise MissionValidationError(
                    f"{len(invalid)} of {len(self.missions)} missions failed validation",
                    results
                )

        output_path = Path(output_path)
        if output_path.is_dir():
            output_path = output_path / DEFAULT_FILE_NAME
        output_path.parent.mkdir(parents=True, exist_ok=True)

        content = self.render() + "\n"
        # Write as binary UTF-8 to enforce LF line endings and no BOM
        with open(output_path, "wb") as f:
            f.write(content.encode("utf-8"))

        self.logger.info(f"✓ Saved missions list '{output_path}' ({len(self.missions)} missions)")
        return output_path

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"MissionsList(missions={len(self.missions)}, strict={self.strict})"
