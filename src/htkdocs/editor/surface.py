"""Editable surfaces holding the formatted (HTML) content of an editor."""

from dataclasses import dataclass, field
from typing import Callable, Protocol


class EditableSurface(Protocol):
    """The display-side buffer an editor renders into.

    The surface owns its content. Editors only read and replace it as a
    whole, and are told about user edits through input listeners.
    Programmatic set_html() must not notify input listeners.
    """

    def get_html(self) -> str: ...

    def set_html(self, html: str) -> None: ...

    def focus(self) -> None: ...

    def add_input_listener(self, listener: Callable[[], None]) -> None: ...


@dataclass
class HtmlBuffer:
    """In-memory editable surface.

    Tracks a cursor offset and an undo history the way a browser's
    contenteditable does: replacing the content programmatically resets
    both, user edits extend the history.
    """

    html: str = ""
    cursor: int = 0
    focused: bool = False
    undo_stack: list[str] = field(default_factory=list)
    replace_count: int = 0
    _listeners: list[Callable[[], None]] = field(default_factory=list, repr=False)

    def get_html(self) -> str:
        return self.html

    def set_html(self, html: str) -> None:
        self.html = html
        self.cursor = 0
        self.undo_stack.clear()
        self.replace_count += 1

    def focus(self) -> None:
        self.focused = True

    def add_input_listener(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def user_edit(self, html: str) -> None:
        """Apply an edit as if typed by the user and fire input events."""
        self.undo_stack.append(self.html)
        self.html = html
        self.cursor = len(html)
        for listener in list(self._listeners):
            listener()

    def undo(self) -> None:
        """Revert the last user edit, firing input events like a browser does."""
        if not self.undo_stack:
            return
        self.html = self.undo_stack.pop()
        self.cursor = len(self.html)
        for listener in list(self._listeners):
            listener()
