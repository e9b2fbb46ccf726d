"""Scale detection and selection."""

from .inspector import find_output_directives, get_current_scale
from .selector import next_scale, prompt_for_scale

__all__ = [
    "find_output_directives",
    "get_current_scale",
    "next_scale",
    "prompt_for_scale",
]
