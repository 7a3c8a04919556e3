"""Live Markdown editing of rule and group descriptions."""

from .binding import DEFAULT_PLACEHOLDER, DescriptionEditor
from .converters import html_to_markdown, markdown_to_html
from .live_editor import LiveMarkdownEditor
from .surface import EditableSurface, HtmlBuffer

__all__ = [
    "DEFAULT_PLACEHOLDER",
    "DescriptionEditor",
    "EditableSurface",
    "HtmlBuffer",
    "LiveMarkdownEditor",
    "html_to_markdown",
    "markdown_to_html",
]
