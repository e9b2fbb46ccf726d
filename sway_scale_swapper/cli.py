#!/usr/bin/env python3
"""
Sway Scale Swapper CLI

Manage scale settings in the Sway configuration: show a menu of the scales
declared in the config's Scale Options section, or cycle to the next one
with --swap, then rewrite the output lines and reload Sway.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from . import __version__
from .config.loader import load_config_lines
from .config.reload_manager import reload_sway
from .config.rewriter import update_scale_in_outputs, write_config_atomic
from .config.section_parser import load_scale_options
from .errors import ScaleConfigError
from .logging_config import setup_logging
from .models import Selection, SwapperSettings
from .scale.inspector import get_current_scale
from .scale.selector import next_scale, prompt_for_scale

logger = logging.getLogger(__name__)


def print_success(console: Console, message: str) -> None:
    """Print success message in green."""
    console.print(Text.assemble(("✓ ", "green"), message))


def print_error(console: Console, message: str, suggestion: Optional[str] = None) -> None:
    """Print error message in red, with an optional hint."""
    console.print(Text.assemble(("Error: ", "bold red"), message))
    if suggestion:
        console.print(Text.assemble(("  → ", "dim"), suggestion))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sway-scale-swapper",
        description="Manage scale settings in Sway configuration",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"sway-scale-swapper {__version__}"
    )
    parser.add_argument(
        "-s", "--swap",
        action="store_true",
        help="Cycle to the next scale option in ascending order"
    )
    return parser


def run(
    settings: SwapperSettings,
    swap: bool,
    console: Console,
    input_func: Optional[Callable[[str], str]] = None,
) -> bool:
    """
    Apply one scale change to the Sway config.

    Args:
        settings: Runtime settings
        swap: Cycle mode when True, interactive menu otherwise
        console: Console for user-facing output
        input_func: Line reader for the interactive menu

    Returns:
        True if the config was rewritten, False if the user quit

    Raises:
        ScaleConfigError: On unreadable config, missing markers, empty
            display or scale lists, or a failed write
    """
    config_path = settings.resolved_config_path()
    lines = load_config_lines(config_path)

    scale_options = load_scale_options(lines)
    current_scale = get_current_scale(
        lines, scale_options.target_displays, tolerance=settings.tolerance
    )

    if swap:
        selection = Selection.selected(
            next_scale(
                scale_options.scale_values,
                current_scale,
                console=console,
                tolerance=settings.tolerance,
            )
        )
    else:
        selection = prompt_for_scale(
            scale_options.scale_values,
            current_scale,
            console=console,
            input_func=input_func,
        )

    if selection.is_aborted:
        return False

    updated_lines = update_scale_in_outputs(
        lines, scale_options.target_displays, selection.scale
    )
    write_config_atomic(config_path, updated_lines)
    logger.info(f"Set scale {selection.scale} for {', '.join(scale_options.target_displays)}")
    return True


def main(
    argv: Optional[List[str]] = None,
    input_func: Optional[Callable[[str], str]] = None,
) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    console = Console(highlight=False)
    err_console = Console(stderr=True, highlight=False)

    try:
        settings = SwapperSettings.from_env()
    except ValidationError as e:
        print_error(err_console, f"Invalid settings: {e}")
        return 1

    setup_logging(settings.log_level)

    try:
        changed = run(settings, args.swap, console, input_func=input_func)
    except ScaleConfigError as e:
        print_error(err_console, e.message, e.suggestion)
        return 1

    if not changed:
        console.print("No changes made. Exiting.")
        return 0

    if reload_sway(settings.reload_command):
        print_success(console, "Successfully reloaded Sway configuration.")
    else:
        print_error(err_console, "Failed to reload Sway configuration.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
