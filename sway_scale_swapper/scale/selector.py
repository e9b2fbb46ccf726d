"""Scale selection: cycle to the next option or ask the user.

Both modes report what they chose on the console; the interactive mode
returns a tagged Selection so a quit is never confused with a choice.
"""

import logging
from typing import Callable, List, Optional

from rich.console import Console

from ..models import SCALE_TOLERANCE, Selection

logger = logging.getLogger(__name__)

QUIT_TOKEN = "q"


def next_scale(
    scale_values: List[float],
    current_scale: float,
    console: Optional[Console] = None,
    tolerance: float = SCALE_TOLERANCE,
) -> float:
    """
    Get the next scale in ascending order, wrapping to the smallest.

    Args:
        scale_values: Declared scale values (any order, non-empty)
        current_scale: Currently active scale
        console: Console for the user-facing notice
        tolerance: Absolute tolerance when locating the current scale

    Returns:
        The scale that follows current_scale, or the smallest scale when
        current_scale is not one of the options.
    """
    console = console or Console(highlight=False)
    sorted_scales = sorted(scale_values)

    index = next(
        (i for i, scale in enumerate(sorted_scales) if abs(scale - current_scale) < tolerance),
        None,
    )

    if index is None:
        first_scale = sorted_scales[0]
        console.print(
            f"Current scale {current_scale} not found in scale options. "
            f"Using first scale {first_scale}"
        )
        return first_scale

    chosen = sorted_scales[(index + 1) % len(sorted_scales)]
    console.print(f"Swapping scale from {current_scale} to {chosen}")
    return chosen


def parse_menu_choice(text: str, option_count: int) -> Optional[int]:
    """Return the zero-based option index for a menu entry, or None if invalid."""
    if not (text.isascii() and text.isdigit()):
        return None

    choice = int(text)

    if 1 <= choice <= option_count:
        return choice - 1
    return None


def prompt_for_scale(
    scale_values: List[float],
    current_scale: float,
    console: Optional[Console] = None,
    input_func: Optional[Callable[[str], str]] = None,
) -> Selection:
    """
    Ask the user to pick one of the declared scales, or quit.

    Invalid entries are reported and the prompt repeats; only a valid
    number, 'q'/'Q', or end of input ends the loop.

    Args:
        scale_values: Declared scale values, shown in declaration order
        current_scale: Currently active scale
        console: Console used for the menu and feedback
        input_func: Reads one line of input (default: console.input)

    Returns:
        Selection.selected(scale) or Selection.aborted()
    """
    console = console or Console(highlight=False)
    read_line = input_func or console.input

    console.print(f"Current active scale: {current_scale}")
    console.print("Available scale options:")
    for number, scale in enumerate(scale_values, start=1):
        console.print(f"{number}. {scale}")
    console.print("Q. Quit without making changes")
    console.print("Enter the number of the scale you want to apply or 'Q' to quit:")

    while True:
        try:
            entry = read_line("> ").strip()
        except EOFError:
            logger.debug("Input closed while waiting for a selection")
            console.print("Quitting without making changes.")
            return Selection.aborted()

        if entry.lower() == QUIT_TOKEN:
            console.print("Quitting without making changes.")
            return Selection.aborted()

        index = parse_menu_choice(entry, len(scale_values))
        if index is not None:
            selected_scale = scale_values[index]
            console.print(f"Selected scale: {selected_scale}")
            return Selection.selected(selected_scale)

        console.print(
            f"Invalid selection. Please enter a number between 1 and {len(scale_values)}, "
            f"or 'Q' to quit."
        )
