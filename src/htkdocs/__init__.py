"""Markdown docs export/import and live description editing for rule trees."""

__version__ = "0.1.0"
