#!/usr/bin/env python3
"""CLI for exporting a rules file as a Markdown document."""

import argparse
import sys
from pathlib import Path

from htkdocs.config import load_config
from htkdocs.core import deserialize_tree
from htkdocs.docs import ExtractionFailure, export_tree, load_rules_file


def main():
    parser = argparse.ArgumentParser(
        description="Export HTTP Toolkit rules (.htkrules, .json or .md) as Markdown docs"
    )
    parser.add_argument("rules", type=Path, help="Rules file to export")
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output Markdown file (default: print to stdout)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: config/htkdocs.yaml)"
    )
    args = parser.parse_args()

    config = load_config(args.config)

    payload = load_rules_file(args.rules)
    if isinstance(payload, ExtractionFailure):
        print(f"Error: {args.rules}: {payload.reason}", file=sys.stderr)
        sys.exit(1)

    try:
        root = deserialize_tree(payload)
    except ValueError as e:
        print(f"Error: {args.rules}: {e}", file=sys.stderr)
        sys.exit(1)

    markdown = export_tree(root, title=config.export_title)

    if args.output is None:
        print(markdown)
        return

    try:
        args.output.write_text(markdown + "\n", encoding="utf-8")
    except IOError as e:
        print(f"Error writing file: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Exported {args.rules} to {args.output}", file=sys.stderr)


if __name__ == "__main__":
    main()
