"""
gmaps-overlay CLI - Command-line tools for map overlays.

Usage:
    gmaps-overlay export config/overlays.yaml
    gmaps-overlay inspect overlays.json
"""

from .cli import main

__all__ = ["main"]
