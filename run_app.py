#!/usr/bin/env python
"""Entry point for the Dash feature explorer.

Usage
-----
    python run_app.py --data path/to/features.json

Or from a remote document:
    python run_app.py --data https://example.org/data/features.json
"""

from __future__ import annotations

import argparse
import sys

from loguru import logger
from pydantic import ValidationError

from feature_explorer.config import load_settings
from feature_explorer.io import export_points_csv, load_points
from feature_explorer.logging_utils import setup_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Launch the SAE feature explorer web app")
    parser.add_argument(
        "--data", default=None,
        help="Path or URL of the features JSON document",
    )
    parser.add_argument(
        "--image-host", default=None,
        help="Host serving highest_activating_images/<index>.png",
    )
    parser.add_argument(
        "--host", default=None,
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port", type=int, default=None,
        help="Port to serve on (default: 8050)",
    )
    parser.add_argument(
        "--debug", action="store_true", default=None,
        help="Run Dash in debug mode",
    )
    parser.add_argument(
        "--log-level", default=None,
        help="Log level (default: INFO)",
    )
    parser.add_argument(
        "--export-csv", default=None,
        help="Write the normalized point table to this CSV and exit",
    )
    args = parser.parse_args()

    try:
        settings = load_settings(
            data_source=args.data,
            image_host=args.image_host,
            host=args.host,
            port=args.port,
            debug=args.debug,
            log_level=args.log_level,
        )
    except ValidationError as exc:
        print(f"Invalid configuration:\n{exc}", file=sys.stderr)
        sys.exit(2)

    setup_logging(settings.log_level, settings.log_file)

    # Load data
    logger.info("Loading features from {}...", settings.data_source)
    points = load_points(settings.data_source, timeout=settings.fetch_timeout)
    if not points:
        logger.warning("No features loaded; the app will show an empty state")

    if args.export_csv:
        export_points_csv(points, args.export_csv)
        return

    logger.info("Starting Dash app on http://{}:{}/", settings.host, settings.port)

    from feature_explorer.app import create_app
    app = create_app(points, settings)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
