"""Bind a live editor to the description of a rule or group."""

from htkdocs.core import ItemNotFoundError, RulesStore

from .live_editor import LiveMarkdownEditor
from .surface import EditableSurface

DEFAULT_PLACEHOLDER = "Markdown here… **bold**, *italic*, lists, `code`"


class DescriptionEditor:
    """A LiveMarkdownEditor whose value is an item's description in a store."""

    def __init__(
        self,
        store: RulesStore,
        item_id: str,
        surface: EditableSurface | None = None,
        placeholder: str | None = DEFAULT_PLACEHOLDER,
        linkify: bool = True,
    ):
        self.store = store
        self.item_id = item_id
        self.editor = LiveMarkdownEditor(
            self._current_description(),
            self._write_description,
            placeholder,
            surface=surface,
            linkify=linkify,
        )
        self.editor.mount()

    def _item(self):
        item = self.store.find(self.item_id)
        if item is None:
            raise ItemNotFoundError(self.item_id)
        return item

    def _current_description(self) -> str:
        return self._item().description or ""

    def _write_description(self, markdown: str) -> None:
        self.store.set_description(self.item_id, markdown)
        self.editor.update(self._current_description())

    def refresh(self) -> bool:
        """Pull the description from the store.

        Returns:
            True if it changed elsewhere and the surface was re-rendered
        """
        return self.editor.update(self._current_description())

    @property
    def markdown(self) -> str:
        return self.editor.value

    @property
    def html(self) -> str:
        return self.editor.surface.get_html()

    @property
    def surface(self) -> EditableSurface:
        return self.editor.surface
