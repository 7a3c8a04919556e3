"""Core rule tree model, collaborators and store."""

from .descriptions import summarize_matcher, summarize_steps
from .serialization import deserialize_tree, serialize_tree
from .store import ItemNotFoundError, RulesStore
from .tree import (
    Group,
    Root,
    Rule,
    RuleDocNode,
    count_items,
    find_item,
    get_rule_part_key,
    is_mock_rule,
    visit,
)

__all__ = [
    # Tree
    "Group",
    "Root",
    "Rule",
    "RuleDocNode",
    "count_items",
    "find_item",
    "get_rule_part_key",
    "is_mock_rule",
    "visit",
    # Collaborators
    "serialize_tree",
    "deserialize_tree",
    "summarize_matcher",
    "summarize_steps",
    # Store
    "ItemNotFoundError",
    "RulesStore",
]
