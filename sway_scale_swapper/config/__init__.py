"""
Configuration subsystem for the Sway config file.

Modules:
- loader: Read the config into lines
- section_parser: Parse the Scale Options section
- rewriter: Rewrite output scale lines and persist atomically
- reload_manager: Ask Sway to reload its config
"""

from .loader import expand_user_path, load_config_lines
from .section_parser import load_scale_options, parse_scale_options
from .rewriter import update_scale_in_outputs, write_config_atomic
from .reload_manager import reload_sway

__all__ = [
    "expand_user_path",
    "load_config_lines",
    "load_scale_options",
    "parse_scale_options",
    "update_scale_in_outputs",
    "write_config_atomic",
    "reload_sway",
]
