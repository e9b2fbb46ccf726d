"""Current scale detection from Sway output directives.

Scans every config line (not just the Scale Options section) for
uncommented `output "<name>" scale <n>` lines and derives the one scale
that the target displays are assumed to share.
"""

import logging
import re
from typing import Iterable, List, Optional

from ..models import OutputDirective, SCALE_TOLERANCE

logger = logging.getLogger(__name__)

# Anchored: indented or commented output lines are not active directives
OUTPUT_SCALE_PATTERN = re.compile(r'^output\s+"([^"]+)"\s+scale\s+([0-9.]+)')

DEFAULT_SCALE = 1.0


def match_output_line(line: str, line_number: int = 0) -> Optional[OutputDirective]:
    """Return the output directive on this line, or None."""
    match = OUTPUT_SCALE_PATTERN.match(line)
    if match is None:
        return None

    return OutputDirective(
        line_number=line_number,
        display=match.group(1).strip(),
        scale_text=match.group(2),
        trailing=line[match.end(2):],
    )


def find_output_directives(lines: Iterable[str]) -> List[OutputDirective]:
    """Find every output scale directive, in file order."""
    directives = []
    for index, line in enumerate(lines):
        directive = match_output_line(line, index)
        if directive is not None:
            directives.append(directive)
    return directives


def get_current_scale(
    lines: List[str],
    target_displays: List[str],
    tolerance: float = SCALE_TOLERANCE,
) -> float:
    """
    Determine the active scale of the target displays.

    Args:
        lines: All config lines
        target_displays: Display names managed by the swapper
        tolerance: Absolute tolerance for treating scales as equal

    Returns:
        The common scale; the first reading in scan order when readings
        disagree; 1.0 when no target display has an output scale line.
    """
    readings = [
        directive.scale
        for directive in find_output_directives(lines)
        if directive.display in target_displays
    ]
    logger.debug(f"Scale readings for {target_displays}: {readings}")

    if not readings:
        logger.warning(
            f"No current scale found for target displays. Defaulting to {DEFAULT_SCALE}."
        )
        return DEFAULT_SCALE

    first_scale = readings[0]
    if any(abs(scale - first_scale) >= tolerance for scale in readings):
        logger.warning(
            f"Multiple scales found for target displays. Using the first scale: {first_scale}"
        )

    return first_scale
