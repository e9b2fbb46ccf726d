"""Fire-and-forget Sway reload after the config has been replaced."""

import logging
import subprocess
from typing import List, Optional

from ..models import DEFAULT_RELOAD_COMMAND

logger = logging.getLogger(__name__)


def reload_sway(command: Optional[List[str]] = None) -> bool:
    """
    Spawn the Sway reload command without waiting for it.

    The config change is already on disk, so a failure here is only
    reported; nothing is rolled back.

    Args:
        command: Reload command (default: swaymsg reload)

    Returns:
        True if the process started, False otherwise
    """
    command = command or DEFAULT_RELOAD_COMMAND

    try:
        subprocess.Popen(command)
    except OSError as e:
        logger.error(f"Failed to start {' '.join(command)}: {e}")
        return False

    logger.debug(f"Spawned reload command: {' '.join(command)}")
    return True
