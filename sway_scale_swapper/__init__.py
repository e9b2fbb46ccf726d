"""
Sway Scale Swapper

Switches the scale of the displays declared in the Sway config's
Scale Options section and reloads Sway.
"""

__version__ = "1.0.0"
__author__ = "NixOS Configuration Team"
