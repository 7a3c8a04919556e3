"""Rule documentation tree: root, groups and rules."""

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass
class Rule:
    """A single matcher + steps pipeline.

    Matchers and steps are opaque dicts; only their ``type`` key is read here.
    """
    id: str
    type: str = "http"
    matchers: list[dict] = field(default_factory=list)
    steps: list[dict] = field(default_factory=list)
    title: str | None = None
    description: str | None = None
    activated: bool = True
    priority: int | None = None


@dataclass
class Group:
    """A named container of groups and rules."""
    id: str
    title: str
    items: list[Union["Group", Rule]] = field(default_factory=list)
    description: str | None = None
    collapsed: bool = False


@dataclass
class Root:
    """Top of the tree. Holds items but is never rendered itself."""
    items: list[Group | Rule] = field(default_factory=list)
    id: str = "root"


RuleDocNode = Root | Group | Rule


def get_rule_part_key(part: dict) -> str | None:
    """Return the kind key of a matcher or step."""
    return part.get("uiType") or part.get("type")


def is_mock_rule(rule: Rule) -> bool:
    """Check whether a rule just returns a fixed response."""
    if rule.type != "http" or len(rule.steps) != 1:
        return False
    return get_rule_part_key(rule.steps[0]) == "simple"


def visit(node: RuleDocNode) -> Iterator[Group | Rule]:
    """Walk the tree in pre-order, unwrapping the root.

    Each container's item list is copied as the container is reached, so
    edits made elsewhere during the walk only affect containers not yet
    visited.
    """
    if isinstance(node, Root):
        for child in list(node.items):
            yield from visit(child)
    elif isinstance(node, Group):
        yield node
        for child in list(node.items):
            yield from visit(child)
    elif isinstance(node, Rule):
        yield node
    else:
        raise TypeError(f"Not a rule tree node: {node!r}")


def find_item(root: RuleDocNode, item_id: str) -> Group | Rule | None:
    """Return the first group or rule with the given id, or None."""
    for node in visit(root):
        if node.id == item_id:
            return node
    return None


def count_items(root: RuleDocNode) -> int:
    """Count the groups and rules below a node."""
    return sum(1 for _ in visit(root))
