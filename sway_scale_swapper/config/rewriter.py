"""
Rewriting and persisting the Sway config.

Only output scale lines for target displays are rebuilt; every other line
is returned exactly as read. Persistence goes through a temp file in the
config directory followed by an atomic replace.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import List

from ..errors import ConfigWriteError
from ..scale.inspector import match_output_line

logger = logging.getLogger(__name__)


def format_scale(scale: float) -> str:
    """Format a scale the way it is written into output lines."""
    return str(scale)


def update_scale_in_outputs(
    lines: List[str],
    target_displays: List[str],
    new_scale: float,
) -> List[str]:
    """
    Set the scale of every target display's output line.

    Args:
        lines: All config lines
        target_displays: Display names managed by the swapper
        new_scale: Scale to write

    Returns:
        New list of the same length; non-target lines are unchanged
    """
    scale_text = format_scale(new_scale)
    updated = []

    for line in lines:
        directive = match_output_line(line)
        if directive is not None and directive.display in target_displays:
            updated.append(f'output "{directive.display}" scale {scale_text}{directive.trailing}')
        else:
            updated.append(line)

    return updated


def write_config_atomic(config_path: Path, lines: List[str]) -> None:
    """
    Write lines to config_path without ever exposing a partial file.

    The content goes to a temp file in the same directory, is fsynced, and
    then replaces the original in a single rename.

    Args:
        config_path: File to replace
        lines: Lines to write, each followed by a newline

    Raises:
        ConfigWriteError: If the temp file cannot be written or renamed
    """
    config_path = Path(config_path)

    try:
        fd, temp_path = tempfile.mkstemp(
            dir=config_path.parent,
            prefix=f".{config_path.name}-",
            suffix=".tmp",
        )
    except OSError as e:
        raise ConfigWriteError(str(config_path), e.strerror or str(e))

    try:
        with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
            f.flush()
            os.fsync(f.fileno())

        # mkstemp creates 0600; keep the original file's mode
        if config_path.exists():
            os.chmod(temp_path, stat.S_IMODE(config_path.stat().st_mode))

        # Atomic rename
        os.replace(temp_path, config_path)

    except OSError as e:
        # Clean up temp file on error
        if Path(temp_path).exists():
            os.unlink(temp_path)
        raise ConfigWriteError(str(config_path), e.strerror or str(e))

    logger.debug(f"Wrote {len(lines)} lines to {config_path}")
