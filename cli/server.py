#!/usr/bin/env python3
"""CLI for running the rules docs API server."""

import argparse
import logging
import os
import sys
from pathlib import Path


def main():
    parser = argparse.ArgumentParser(
        description="Serve the rules docs browser and description editor API"
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)"
    )
    parser.add_argument(
        "-p", "--port",
        type=int,
        default=8000,
        help="Port to bind to (default: 8000)"
    )
    parser.add_argument(
        "--rules",
        type=Path,
        help="Rules file to load on startup (overrides rules_path in the config)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: config/htkdocs.yaml)"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log store edits and import details"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # The app reads these in its startup hook, including in reload workers
    if args.config:
        os.environ["HTKDOCS_CONFIG"] = str(args.config.resolve())
    if args.rules:
        os.environ["HTKDOCS_RULES_PATH"] = str(args.rules.resolve())

    try:
        import uvicorn
        uvicorn.run(
            "htkdocs.web.app:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
        )
    except KeyboardInterrupt:
        print("\nServer stopped", file=sys.stderr)
        sys.exit(0)


if __name__ == "__main__":
    main()
