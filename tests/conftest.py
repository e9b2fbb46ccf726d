"""
Pytest configuration and fixtures for Sway Scale Swapper tests.
"""

import io
import logging
import sys
from pathlib import Path
from typing import Callable, List

import pytest
from rich.console import Console

# Add the project root to the path so tests run without installation
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


SAMPLE_CONFIG = """\
# Sway config
set $mod Mod4

# Scale Options Start
# Target Display = eDP-1
# Scale Options = 1.0, 1.25, 1.5
# Scale Options End

output "eDP-1" scale 1.25
output "HDMI-A-1" scale 2.0 pos 1920 0
bindsym $mod+Return exec ghostty
"""


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so they never outlive a test."""
    yield
    logger = logging.getLogger("sway_scale_swapper")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_lines() -> List[str]:
    """Sample config split into lines."""
    return SAMPLE_CONFIG.splitlines()


@pytest.fixture
def write_config(tmp_path) -> Callable[[str], Path]:
    """Write config text into a temporary sway config directory."""
    def _write(text: str) -> Path:
        config_dir = tmp_path / ".config" / "sway"
        config_dir.mkdir(parents=True, exist_ok=True)
        config_path = config_dir / "config"
        config_path.write_text(text, encoding="utf-8")
        return config_path

    return _write


@pytest.fixture
def config_file(write_config) -> Path:
    """Sample config on disk."""
    return write_config(SAMPLE_CONFIG)


@pytest.fixture
def console_output():
    """Console writing into a buffer, plus the buffer."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, highlight=False, color_system=None)
    return console, buffer


@pytest.fixture
def spawned_commands(monkeypatch) -> List[List[str]]:
    """Record reload commands instead of spawning them."""
    commands: List[List[str]] = []

    def fake_popen(command, *args, **kwargs):
        commands.append(list(command))
        return object()

    monkeypatch.setattr("subprocess.Popen", fake_popen)
    return commands


@pytest.fixture
def scripted_input():
    """Build input functions that return each entry in turn, then raise EOFError."""
    def _factory(entries: List[str]) -> Callable[[str], str]:
        remaining = list(entries)
        prompts: List[str] = []

        def _read(prompt: str = "") -> str:
            prompts.append(prompt)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        _read.prompts = prompts
        return _read

    return _factory
