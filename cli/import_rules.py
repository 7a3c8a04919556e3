#!/usr/bin/env python3
"""CLI for pulling the rules data back out of an exported Markdown document."""

import argparse
import json
import sys
from pathlib import Path

from htkdocs.core import count_items, deserialize_tree
from htkdocs.docs import ExtractionFailure, load_rules_file


def main():
    parser = argparse.ArgumentParser(
        description="Extract HTTP Toolkit rules from a Markdown export or JSON file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s rules-docs.md                  Print the embedded rules JSON
  %(prog)s rules-docs.md -o my.htkrules   Save it as a .htkrules file
  %(prog)s rules-docs.md --check          Only check that it can be imported
""",
    )
    parser.add_argument("file", type=Path, help="Markdown or JSON file to import")
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Write the rules JSON to this file (default: print to stdout)"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate the file and print a summary instead of the JSON"
    )
    args = parser.parse_args()

    payload = load_rules_file(args.file)
    if isinstance(payload, ExtractionFailure):
        print(f"Error: could not find rules data in {args.file} ({payload.reason})", file=sys.stderr)
        sys.exit(1)

    if args.check:
        try:
            root = deserialize_tree(payload)
        except ValueError as e:
            print(f"Error: {args.file} does not contain a rule tree: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"OK: {count_items(root)} rules and groups")
        return

    content = json.dumps(payload, indent=2, ensure_ascii=False)
    if args.output is None:
        print(content)
        return

    try:
        args.output.write_text(content + "\n", encoding="utf-8")
    except IOError as e:
        print(f"Error writing file: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Wrote rules to {args.output}", file=sys.stderr)


if __name__ == "__main__":
    main()
