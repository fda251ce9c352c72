"""
Print based logging for pyaerofly builders.

Every line is prefixed with `[pyaerofly]` and the component name. Progress
messages (debug, info) are printed to stdout only for verbose components;
errors always go to stderr.
"""

import sys
from typing import Optional, TextIO


class AeroflyLogger:
    """
    Logger handed to Mission and MissionsList.

    Usage:
        logger = create_logger(verbose=True, name="MissionsList")
        logger.info("✓ Saved missions list")
    """

    def __init__(self, verbose: bool = True, name: Optional[str] = None):
        self.verbose = verbose
        self.name = name

    def _emit(self, message: str, label: str = "", stream: Optional[TextIO] = None):
        parts = ["[pyaerofly]"]
        if self.name:
            parts.append(f"[{self.name}]")
        if label:
            parts.append(f"{label}:")
        parts.append(message)
        print(" ".join(parts), file=stream or sys.stdout)

    def debug(self, message: str):
        """Derivations and other details (verbose only)."""
        if self.verbose:
            self._emit(message, "DEBUG")

    def info(self, message: str):
        """Progress messages (verbose only)."""
        if self.verbose:
            self._emit(message)

    def error(self, message: str):
        self._emit(message, "ERROR", sys.stderr)


def create_logger(verbose: bool = True, name: Optional[str] = None) -> AeroflyLogger:
    """
    Factory function to create a logger instance.

    Args:
        verbose: If False, suppresses INFO and DEBUG messages
        name: Component name (e.g., "Mission", "MissionsList")
    """
    return AeroflyLogger(verbose=verbose, name=name)
