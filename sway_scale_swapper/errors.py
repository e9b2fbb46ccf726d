"""
Error handling for Sway Scale Swapper.

All fatal conditions raised by the parsing, loading and writing layers derive
from ScaleConfigError. The CLI entry point is the only place that turns them
into a process exit status.
"""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(Enum):
    """
    Error codes for Sway Scale Swapper.

    Ranges:
    - 1100-1199: Configuration section errors
    - 1200-1299: File system errors
    """

    # Configuration section errors (1100-1199)
    SECTION_MARKER_MISSING = 1100
    NO_TARGET_DISPLAYS = 1101
    NO_SCALE_VALUES = 1102

    # File system errors (1200-1299)
    FILE_READ_ERROR = 1201
    FILE_WRITE_ERROR = 1202


class ScaleConfigError(Exception):
    """Base exception for scale configuration errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize scale configuration error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            suggestion: Suggested recovery action
            context: Additional context for debugging
        """
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary.

        Returns:
            Error dictionary with code, message, suggestion, and context
        """
        result = {
            "code": self.code.value,
            "message": self.message
        }

        if self.suggestion:
            result["suggestion"] = self.suggestion

        if self.context:
            result["context"] = self.context

        return result


class ConfigLoadError(ScaleConfigError):
    """Configuration file could not be read."""

    def __init__(self, file_path: str, reason: str):
        super().__init__(
            code=ErrorCode.FILE_READ_ERROR,
            message=f"Failed to open config file {file_path}: {reason}",
            suggestion="Check that the Sway config exists and is readable",
            context={"file_path": file_path, "reason": reason}
        )


class ConfigWriteError(ScaleConfigError):
    """Updated configuration could not be persisted."""

    def __init__(self, file_path: str, reason: str):
        super().__init__(
            code=ErrorCode.FILE_WRITE_ERROR,
            message=f"Failed to replace the original config file {file_path}: {reason}",
            suggestion="Check directory permissions; the original file was left untouched",
            context={"file_path": file_path, "reason": reason}
        )


class SectionMarkerError(ScaleConfigError):
    """A Scale Options section marker is missing."""

    def __init__(self, marker: str):
        """
        Args:
            marker: Marker text that was not found (e.g. "Scale Options End")
        """
        self.marker = marker
        super().__init__(
            code=ErrorCode.SECTION_MARKER_MISSING,
            message=f"'{marker}' marker not found in the config file.",
            suggestion=f"Add a '# {marker}' comment line to the config",
            context={"marker": marker}
        )


class NoTargetDisplaysError(ScaleConfigError):
    """Scale Options section declares no target displays."""

    def __init__(self):
        super().__init__(
            code=ErrorCode.NO_TARGET_DISPLAYS,
            message="No target displays found in Scale Options section.",
            suggestion="Add at least one '# Target Display = <name>' line"
        )


class NoScaleValuesError(ScaleConfigError):
    """Scale Options section declares no parsable scale values."""

    def __init__(self, raw_value: Optional[str] = None):
        context = {}
        if raw_value is not None:
            context["raw_value"] = raw_value

        super().__init__(
            code=ErrorCode.NO_SCALE_VALUES,
            message="No scale options found in Scale Options section.",
            suggestion="Add a '# Scale Options = 1.0, 1.25, 1.5' line",
            context=context
        )
