"""
Configuration loader for the Sway config file.

Reads the whole file into an ordered list of lines with line terminators
removed. Lines are the unit of both reading and writing.
"""

import logging
from pathlib import Path
from typing import List, Union

from ..errors import ConfigLoadError

logger = logging.getLogger(__name__)


def expand_user_path(path: Union[str, Path]) -> Path:
    """Expand a literal leading '~' to the invoking user's home directory.

    Any other path form (including '~user/...') is passed through unchanged.

    Args:
        path: Path string, possibly starting with '~'

    Returns:
        Resolved Path
    """
    text = str(path)
    if text.startswith("~"):
        return Path(str(Path.home()) + text[1:])
    return Path(text)


def load_config_lines(config_path: Path) -> List[str]:
    """
    Load the Sway config as a list of lines.

    Args:
        config_path: Path to the Sway config file

    Returns:
        Lines of the file, without trailing newlines

    Raises:
        ConfigLoadError: If the file does not exist or cannot be read
    """
    try:
        # newline="" keeps any '\r' and surrogateescape keeps undecodable bytes,
        # so untouched lines are written back unchanged
        with open(config_path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
            content = f.read()
    except OSError as e:
        raise ConfigLoadError(str(config_path), e.strerror or str(e))

    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    logger.debug(f"Loaded {len(lines)} lines from {config_path}")
    return lines
