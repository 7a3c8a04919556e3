"""Inline Markdown editor: edit rendered Markdown, emit Markdown."""

import logging
from typing import Callable

from .converters import html_to_markdown, markdown_to_html
from .surface import EditableSurface, HtmlBuffer

logger = logging.getLogger(__name__)


class LiveMarkdownEditor:
    """Keeps an editable HTML surface and a Markdown value in sync.

    The caller always deals in Markdown: it passes the current value in
    through update() and receives edits through on_change. The surface shows
    that value rendered as HTML, and every user edit is converted back to
    Markdown.

    The last Markdown string the editor rendered or emitted is remembered.
    update() with that same value leaves the surface alone, which is what
    keeps the cursor and undo history intact while the user types (each
    on_change normally comes straight back in as the next value).
    """

    def __init__(
        self,
        value: str,
        on_change: Callable[[str], None],
        placeholder: str | None = None,
        *,
        surface: EditableSurface | None = None,
        render: Callable[..., str] = markdown_to_html,
        convert: Callable[[str], str] = html_to_markdown,
        linkify: bool = True,
    ):
        """Initialize the editor. Nothing is rendered until mount().

        Args:
            value: Initial Markdown value
            on_change: Called with the new Markdown after each user edit
            placeholder: Hint shown while the surface is empty
            surface: Surface to render into (defaults to an HtmlBuffer)
            render: Markdown -> HTML renderer
            convert: HTML -> Markdown converter; may raise
            linkify: Whether the renderer turns bare URLs into links
        """
        self.value = value
        self.on_change = on_change
        self.placeholder = placeholder
        self.surface = surface if surface is not None else HtmlBuffer()
        self._render = render
        self._convert = convert
        self._linkify = linkify
        self._last_committed: str | None = None
        self._mounted = False
        self._applying_inbound = False

    @property
    def last_committed_source(self) -> str | None:
        """The Markdown last rendered into or read out of the surface."""
        return self._last_committed

    @property
    def placeholder_visible(self) -> bool:
        """Whether the placeholder hint should be shown."""
        return self.placeholder is not None and not self.surface.get_html().strip()

    @property
    def mounted(self) -> bool:
        return self._mounted

    def mount(self) -> None:
        """Activate the editor: listen for input, render the value, take focus."""
        if self._mounted:
            return
        self._mounted = True
        self.surface.add_input_listener(self.handle_input)
        self.sync_inbound()
        self.surface.focus()

    def update(
        self,
        value: str,
        on_change: Callable[[str], None] | None = None,
        placeholder: str | None = None,
    ) -> bool:
        """Reflect a possibly new value (and callbacks) from the caller.

        Returns:
            True if the surface content was replaced
        """
        self.value = value
        if on_change is not None:
            self.on_change = on_change
        if placeholder is not None:
            self.placeholder = placeholder
        if not self._mounted:
            return False
        return self.sync_inbound()

    def sync_inbound(self) -> bool:
        """Re-render the surface if the value differs from the last committed one.

        Returns:
            True if the surface content was replaced
        """
        if self.value == self._last_committed:
            return False

        try:
            html = self._render(self.value, linkify=self._linkify) if self.value.strip() else ""
        except Exception as e:
            # Leave the surface and committed source alone so the next update retries
            logger.warning(f"Markdown to HTML rendering failed: {e}")
            return False

        self._applying_inbound = True
        try:
            self.surface.set_html(html)
        finally:
            self._applying_inbound = False
        self._last_committed = self.value
        return True

    def handle_input(self) -> None:
        """Handle a user edit on the surface by emitting the new Markdown."""
        if self._applying_inbound:
            return

        html = self.surface.get_html()
        if not html.strip():
            self._last_committed = ""
            self.value = ""
            self.on_change("")
            return

        try:
            markdown = self._convert(html)
        except Exception as e:
            # Keep the previous value; the next edit gets another chance
            logger.warning(f"HTML to Markdown conversion failed: {e}")
            return

        self._last_committed = markdown
        self.value = markdown
        self.on_change(markdown)
