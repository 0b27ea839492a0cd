"""Entry Points.

This module provides the HTTP entry point (a Flask app that builds the
map on every request) and a command line entry point that writes the
page to a file. Both are thin wrappers that load configuration and
invoke the orchestrator.
"""

import argparse
import logging
import os
import sys
from typing import Any

from flask import Flask

from quakemap.core.config import Config, validate_config
from quakemap.orchestrator import Orchestrator
from quakemap.shell.config_loader import ConfigError, load_config
from quakemap.shell.feed_client import FeedError


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> int:
    """Configure root logging from the LOG_LEVEL environment variable.

    Unknown level names fall back to INFO.

    Returns:
        The level that was applied
    """
    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), None)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)

    return level


configure_logging()
logger = logging.getLogger(__name__)


app = Flask(__name__)


def _get_config(config_path: str | None = None) -> Config:
    """Load configuration and refuse to continue on critical errors.

    Raises:
        ConfigError: If the configuration can't be loaded or has critical errors
    """
    config = load_config(config_path)
    validation = validate_config(config)

    for warning in validation.warnings:
        logger.warning("Config warning: %s: %s", warning.field, warning.message)

    if not validation.valid:
        for error in validation.critical_errors:
            logger.error("Config error: %s: %s", error.field, error.message)
        raise ConfigError(
            "Invalid configuration: "
            + "; ".join(e.message for e in validation.critical_errors)
        )

    return config


@app.route("/")
def earthquake_map() -> tuple[Any, int] | tuple[str, int, dict[str, str]]:
    """HTTP entry point.

    Fetches fresh feed data and returns the rendered map page.

    Returns:
        Tuple of (HTML page, 200, headers) or (error dict, status code)
    """
    logger.info("Rendering earthquake map")

    try:
        config = _get_config()
    except ConfigError as e:
        logger.error("Configuration rejected: %s", e)
        return {"status": "error", "message": str(e)}, 500

    try:
        page = Orchestrator(config).render_page()
    except FeedError as e:
        logger.error("Feed unavailable: %s", e)
        return {"status": "error", "feed": e.feed, "message": str(e)}, 502

    return page, 200, {"Content-Type": "text/html; charset=utf-8"}


def main(argv: list[str] | None = None) -> int:
    """Command line entry point.

    Args:
        argv: Arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = argparse.ArgumentParser(
        description="Render recent earthquakes and tectonic plates to an HTML map",
    )
    parser.add_argument(
        "--config",
        help="Path to YAML config (default: $CONFIG_PATH or config/config.yaml)",
    )
    parser.add_argument(
        "--output", "-o",
        help="Output HTML file (default: output_path from config)",
    )
    args = parser.parse_args(argv)

    try:
        config = _get_config(args.config)
        path = Orchestrator(config).write_page(args.output)
    except ConfigError as e:
        logger.error("Configuration rejected: %s", e)
        return 1
    except FeedError as e:
        logger.error("Map not rendered: %s", e)
        return 1
    except OSError as e:
        logger.error("Could not write map: %s", e)
        return 1

    print(f"Map written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
