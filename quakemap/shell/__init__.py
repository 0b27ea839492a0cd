"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- GeoJSON feed client (HTTP)
- Map renderer (folium, HTML files)
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from quakemap.shell.feed_client import FeedClient, FeedError
from quakemap.shell.map_renderer import build_map, render_html, save_map
from quakemap.shell.config_loader import ConfigError, load_config, Config

__all__ = [
    "FeedClient",
    "FeedError",
    "build_map",
    "render_html",
    "save_map",
    "ConfigError",
    "load_config",
    "Config",
]
