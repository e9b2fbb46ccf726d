"""
Pydantic data models for Sway Scale Swapper.

Defines the parsed Scale Options section, matched output directives,
the interactive selection result and runtime settings.
"""

import os
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


DEFAULT_CONFIG_PATH = "~/.config/sway/config"
DEFAULT_RELOAD_COMMAND = ["swaymsg", "reload"]
SCALE_TOLERANCE = 1e-6


# Enumerations

class SelectionKind(str, Enum):
    """Outcome of choosing a new scale."""
    SELECTED = "selected"
    ABORTED = "aborted"


# Core Entities

class ScaleOptions(BaseModel):
    """Target displays and permitted scales declared in the config section."""

    model_config = ConfigDict(frozen=True)

    target_displays: List[str] = Field(..., description="Display names, in declaration order")
    scale_values: List[float] = Field(..., description="Scale factors, in declaration order")


class OutputDirective(BaseModel):
    """A line of the form: output "<display>" scale <number>[trailing]."""

    model_config = ConfigDict(frozen=True)

    line_number: int = Field(..., ge=0, description="Zero-based index into the config lines")
    display: str = Field(..., description="Quoted output name, trimmed")
    scale_text: str = Field(..., description="Scale number as written in the file")
    trailing: str = Field("", description="Text following the scale number")

    @property
    def scale(self) -> float:
        """Parsed scale; unparsable text such as '1.2.3' reads as 1.0."""
        try:
            return float(self.scale_text)
        except ValueError:
            return 1.0


class Selection(BaseModel):
    """Tagged result of the scale selector: Selected(scale) or Aborted."""

    model_config = ConfigDict(frozen=True)

    kind: SelectionKind
    scale: Optional[float] = None

    @model_validator(mode='after')
    def validate_kind_and_scale(self):
        """Selected results carry a scale, aborted results never do."""
        if self.kind == SelectionKind.SELECTED and self.scale is None:
            raise ValueError("scale required when kind=selected")

        if self.kind == SelectionKind.ABORTED and self.scale is not None:
            raise ValueError("scale must be empty when kind=aborted")

        return self

    @classmethod
    def selected(cls, scale: float) -> "Selection":
        return cls(kind=SelectionKind.SELECTED, scale=scale)

    @classmethod
    def aborted(cls) -> "Selection":
        return cls(kind=SelectionKind.ABORTED)

    @property
    def is_aborted(self) -> bool:
        return self.kind == SelectionKind.ABORTED


class SwapperSettings(BaseModel):
    """Runtime settings for a single swapper invocation."""

    config_path: str = Field(DEFAULT_CONFIG_PATH, description="Sway config file, '~' allowed")
    reload_command: List[str] = Field(
        default_factory=lambda: list(DEFAULT_RELOAD_COMMAND),
        min_length=1,
        description="Command spawned after a successful update"
    )
    tolerance: float = Field(SCALE_TOLERANCE, gt=0, description="Float comparison tolerance")
    log_level: str = Field("WARNING", description="Logging level name")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and validate the logging level name."""
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level

    @classmethod
    def from_env(cls) -> "SwapperSettings":
        """Build settings, honouring SWAY_SCALE_SWAPPER_CONFIG and LOG_LEVEL."""
        return cls(
            config_path=os.environ.get("SWAY_SCALE_SWAPPER_CONFIG", DEFAULT_CONFIG_PATH),
            log_level=os.environ.get("LOG_LEVEL", "WARNING"),
        )

    def resolved_config_path(self) -> Path:
        from .config.loader import expand_user_path
        return expand_user_path(self.config_path)
