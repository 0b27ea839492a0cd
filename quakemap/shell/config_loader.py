"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config, FeedConfig, ...) are defined in quakemap/core/config.py
to avoid information leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from quakemap.core.config import (
    Config,
    FeedConfig,
    HeatConfig,
    TileLayerConfig,
    ViewConfig,
)


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/config.yaml"


class ConfigError(Exception):
    """Configuration could not be read, parsed or validated."""


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} placeholder from the environment.

    Non-string values and plain strings are returned unchanged. Unset
    variables leave the placeholder in place.
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_feeds(data: dict[str, Any]) -> FeedConfig:
    """Parse feed settings from config data."""
    defaults = FeedConfig()
    return FeedConfig(
        earthquake_url=_resolve_value(data.get("earthquake_url", defaults.earthquake_url)),
        plates_url=_resolve_value(data.get("plates_url", defaults.plates_url)),
        timeout_seconds=int(data.get("timeout_seconds", defaults.timeout_seconds)),
    )


def _parse_view(data: dict[str, Any]) -> ViewConfig:
    """Parse the initial view from config data."""
    defaults = ViewConfig()
    center = data.get("center", defaults.center)
    return ViewConfig(
        center_latitude=float(center[0]),
        center_longitude=float(center[1]),
        zoom=int(data.get("zoom", defaults.zoom)),
        visible_overlays=list(data.get("visible_overlays", defaults.visible_overlays)),
    )


def _parse_tile_layer(data: dict[str, Any]) -> TileLayerConfig:
    """Parse a base tile layer from config data."""
    return TileLayerConfig(
        name=data["name"],
        url=_resolve_value(data["url"]),
        attribution=data.get("attribution", ""),
    )


def _parse_heat(data: dict[str, Any]) -> HeatConfig:
    """Parse heat layer settings from config data."""
    defaults = HeatConfig()
    return HeatConfig(
        radius=int(data.get("radius", defaults.radius)),
        blur=int(data.get("blur", defaults.blur)),
    )


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).
    Missing sections fall back to the defaults in quakemap.core.config.

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object

    Raises:
        ConfigError: If a section is missing required keys or has bad values
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

    defaults = Config()

    try:
        base_layers = defaults.base_layers
        if "base_layers" in data:
            base_layers = [_parse_tile_layer(layer) for layer in data["base_layers"]]

        return Config(
            feeds=_parse_feeds(data.get("feeds", {})),
            view=_parse_view(data.get("view", {})),
            base_layers=base_layers,
            heat=_parse_heat(data.get("heat", {})),
            circle_fill_opacity=float(data.get("circle_fill_opacity", defaults.circle_fill_opacity)),
            legend_position=data.get("legend_position", defaults.legend_position),
            output_path=data.get("output_path", defaults.output_path),
        )
    except KeyError as e:
        raise ConfigError(f"Missing required config key: {e}") from e
    except (AttributeError, IndexError, TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config value: {e}") from e


def apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to a config.

    Environment variables:
        EARTHQUAKE_FEED_URL: Earthquake GeoJSON feed
        PLATES_FEED_URL: Plate boundary GeoJSON
        FEED_TIMEOUT: Request timeout in seconds

    Args:
        config: Config to update in place

    Returns:
        The same config, for chaining

    Raises:
        ConfigError: If FEED_TIMEOUT isn't an integer
    """
    earthquake_url = os.environ.get("EARTHQUAKE_FEED_URL")
    if earthquake_url:
        config.feeds.earthquake_url = earthquake_url

    plates_url = os.environ.get("PLATES_FEED_URL")
    if plates_url:
        config.feeds.plates_url = plates_url

    timeout = os.environ.get("FEED_TIMEOUT")
    if timeout:
        try:
            config.feeds.timeout_seconds = int(timeout)
        except ValueError as e:
            raise ConfigError(f"FEED_TIMEOUT must be an integer, got '{timeout}'") from e

    return config


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object with environment overrides applied

    Raises:
        ConfigError: If the file can't be read, isn't valid YAML,
                    or holds invalid settings
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return apply_env_overrides(Config())

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return apply_env_overrides(Config())

    config = apply_env_overrides(load_config_from_dict(data))

    logger.info(
        "Loaded config: %d base layers, zoom %d",
        len(config.base_layers),
        config.view.zoom,
    )

    return config
