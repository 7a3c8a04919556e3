"""Markdown export and import of rule trees."""

from .exporter import (
    DEFAULT_TITLE,
    RULES_FENCE_TAG,
    escape_markdown_block,
    export_tree,
    format_timestamp,
)
from .importer import (
    IMPORT_FENCE_TAGS,
    ExtractionFailure,
    extract,
    find_fenced_block,
    load_rules_file,
)

__all__ = [
    # Exporter
    "DEFAULT_TITLE",
    "RULES_FENCE_TAG",
    "escape_markdown_block",
    "export_tree",
    "format_timestamp",
    # Importer
    "IMPORT_FENCE_TAGS",
    "ExtractionFailure",
    "extract",
    "find_fenced_block",
    "load_rules_file",
]
