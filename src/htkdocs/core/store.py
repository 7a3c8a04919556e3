"""In-process store holding the shared rule tree."""

import logging

from .serialization import deserialize_tree
from .tree import Group, Root, Rule, count_items, find_item

logger = logging.getLogger(__name__)


class ItemNotFoundError(KeyError):
    """Raised when a mutation targets an id that is not in the tree."""

    def __init__(self, item_id: str):
        super().__init__(f"No rule or group with id '{item_id}'")
        self.item_id = item_id


class RulesStore:
    """Owns one rule tree and applies field-level edits to it.

    Callers read through snapshot()/find() and write through the setters.
    There is a single writer, so no locking is done.
    """

    def __init__(self, root: Root | None = None):
        self._root = root if root is not None else Root()

    def snapshot(self) -> Root:
        """Return the current tree."""
        return self._root

    def find(self, item_id: str) -> Group | Rule | None:
        """Look up a group or rule by id."""
        return find_item(self._root, item_id)

    def _require(self, item_id: str) -> Group | Rule:
        item = self.find(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    def set_title(self, item_id: str, title: str) -> None:
        """Set the title of a group or rule.

        Rules treat an empty title as unset so that the matcher summary is
        shown instead. Groups always keep the string they are given.
        """
        item = self._require(item_id)
        if isinstance(item, Group):
            item.title = title
        else:
            item.title = title or None
        logger.debug(f"Set title of {item_id}")

    def set_description(self, item_id: str, description: str | None) -> None:
        """Set the Markdown description of a group or rule ('' clears it)."""
        item = self._require(item_id)
        item.description = description or None
        logger.debug(f"Set description of {item_id} ({len(description or '')} chars)")

    def load_payload(self, payload: object) -> Root:
        """Replace the tree with one rebuilt from a serialized payload.

        Raises:
            ValueError: If the payload cannot be turned into a tree
        """
        root = deserialize_tree(payload)
        self._root = root
        logger.info(f"Loaded {count_items(root)} rules and groups")
        return root

    def export_markdown(self) -> str:
        """Export the current tree as a Markdown document."""
        from htkdocs.docs import export_tree

        return export_tree(self._root)

    def import_text(self, text: str):
        """Load rules from raw JSON or a Markdown export.

        Returns:
            The new root, or the ExtractionFailure if nothing could be
            extracted (the tree is left unchanged in that case)

        Raises:
            ValueError: If the extracted payload is not a rule tree
        """
        from htkdocs.docs import ExtractionFailure, extract

        payload = extract(text)
        if isinstance(payload, ExtractionFailure):
            logger.warning(f"Import failed: {payload.reason}")
            return payload
        return self.load_payload(payload)
