"""
Parser for the Scale Options section of the Sway config.

The section looks like:

    # Scale Options Start
    # Target Display = eDP-1
    # Target Display = DP-2
    # Scale Options = 1.0, 1.25, 1.5
    # Scale Options End

Every Target Display line is kept in order. Only the last Scale Options
line counts.
"""

import logging
import math
import re
from typing import List, Optional, Tuple

from ..errors import NoScaleValuesError, NoTargetDisplaysError, SectionMarkerError
from ..models import ScaleOptions

logger = logging.getLogger(__name__)

SECTION_START_MARKER = "Scale Options Start"
SECTION_END_MARKER = "Scale Options End"

TARGET_DISPLAY_PATTERN = re.compile(r"# Target Display = (.+)")
SCALE_OPTIONS_PATTERN = re.compile(r"# Scale Options = (.+)")

# Plain decimal literals only: no digit separators or non-ASCII digits
SCALE_TOKEN_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def find_section_bounds(lines: List[str]) -> Tuple[int, int]:
    """
    Locate the Scale Options section markers.

    Args:
        lines: All config lines

    Returns:
        (start, end) indices of the marker lines, both inclusive

    Raises:
        SectionMarkerError: If either marker is missing
    """
    start = _first_line_containing(lines, SECTION_START_MARKER)
    if start is None:
        raise SectionMarkerError(SECTION_START_MARKER)

    end = _first_line_containing(lines, SECTION_END_MARKER, begin=start + 1)
    if end is None:
        raise SectionMarkerError(SECTION_END_MARKER)

    logger.debug(f"Scale Options section spans lines {start + 1}-{end + 1}")
    return start, end


def _first_line_containing(lines: List[str], marker: str, begin: int = 0) -> Optional[int]:
    for index, line in enumerate(lines[begin:], start=begin):
        if marker in line:
            return index
    return None


def parse_scale_values(raw: str) -> List[float]:
    """Parse a comma-separated scale list, dropping tokens that are not floats."""
    values = []
    for token in raw.split(","):
        token = token.strip()
        if not SCALE_TOKEN_PATTERN.fullmatch(token):
            logger.debug(f"Ignoring unparsable scale option: {token!r}")
            continue
        value = float(token)
        if math.isfinite(value):
            values.append(value)
    return values


def parse_scale_options(section: List[str]) -> ScaleOptions:
    """
    Extract target displays and scale values from the section lines.

    Args:
        section: Lines from the start marker through the end marker

    Returns:
        Parsed ScaleOptions

    Raises:
        NoTargetDisplaysError: If no Target Display lines are present
        NoScaleValuesError: If the last Scale Options line yields no values
    """
    target_displays: List[str] = []
    scale_values: List[float] = []
    raw_scale_options: Optional[str] = None

    for line in section:
        target_match = TARGET_DISPLAY_PATTERN.search(line)
        if target_match:
            target_displays.append(target_match.group(1).strip())
            continue

        scale_match = SCALE_OPTIONS_PATTERN.search(line)
        if scale_match:
            raw_scale_options = scale_match.group(1)
            scale_values = parse_scale_values(raw_scale_options)

    if not target_displays:
        raise NoTargetDisplaysError()

    if not scale_values:
        raise NoScaleValuesError(raw_scale_options)

    return ScaleOptions(target_displays=target_displays, scale_values=scale_values)


def load_scale_options(lines: List[str]) -> ScaleOptions:
    """Find the Scale Options section in the full config and parse it."""
    start, end = find_section_bounds(lines)
    return parse_scale_options(lines[start:end + 1])
