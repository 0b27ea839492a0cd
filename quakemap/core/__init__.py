"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Earthquake feature parsing
- Magnitude and depth visual encoding
- Feature transform into map overlay collections
- Configuration models and validation

All functions here are deterministic and have no I/O.
"""

from quakemap.core.earthquake import Earthquake, extract_features, parse_earthquakes
from quakemap.core.style import get_depth_color, get_legend_entries, get_marker_size
from quakemap.core.transform import DerivedVisual, TransformResult, transform_features
from quakemap.core.config import Config, validate_config

__all__ = [
    # Earthquake
    "Earthquake",
    "extract_features",
    "parse_earthquakes",
    # Style
    "get_marker_size",
    "get_depth_color",
    "get_legend_entries",
    # Transform
    "DerivedVisual",
    "TransformResult",
    "transform_features",
    # Config
    "Config",
    "validate_config",
]
