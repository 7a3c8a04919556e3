"""Markdown <-> HTML conversion for the description editor."""

from functools import lru_cache

import html2text
from bs4 import BeautifulSoup
from markdown_it import MarkdownIt


@lru_cache(maxsize=2)
def _markdown_parser(linkify: bool) -> MarkdownIt:
    md = MarkdownIt("commonmark", {"html": False, "linkify": linkify})
    md.enable("table")
    md.enable("strikethrough")
    if linkify:
        md.enable("linkify")
    return md


def markdown_to_html(markdown: str, linkify: bool = True) -> str:
    """Render Markdown to the HTML shown in the editing surface."""
    return _markdown_parser(linkify).render(markdown)


def _make_converter() -> html2text.HTML2Text:
    converter = html2text.HTML2Text()
    converter.ignore_links = False
    converter.ignore_images = False
    converter.ignore_emphasis = False
    converter.body_width = 0  # No wrapping
    converter.emphasis_mark = "*"
    converter.strong_mark = "**"
    converter.ul_item_mark = "-"
    return converter


def html_to_markdown(html: str) -> str:
    """Convert edited HTML back to Markdown.

    Scripts and styles are dropped before conversion. Leading and trailing
    blank lines are stripped.
    """
    soup = BeautifulSoup(html, "html.parser")

    for element in soup(["script", "style"]):
        element.decompose()

    # HTML2Text instances are single-use
    converter = _make_converter()
    return converter.handle(str(soup)).strip()
