"""Convert rule trees to and from their JSON payload."""

from .tree import Group, Root, Rule, RuleDocNode


def serialize_tree(node: RuleDocNode) -> dict:
    """Serialize a tree (or any node of one) into a JSON-compatible dict."""
    if isinstance(node, Root):
        return {
            "id": node.id,
            "isRoot": True,
            "items": [serialize_tree(child) for child in node.items],
        }

    if isinstance(node, Group):
        data = {
            "id": node.id,
            "title": node.title,
            "items": [serialize_tree(child) for child in node.items],
        }
        if node.description is not None:
            data["description"] = node.description
        if node.collapsed:
            data["collapsed"] = True
        return data

    if isinstance(node, Rule):
        data = {
            "id": node.id,
            "type": node.type,
            "activated": node.activated,
        }
        if node.priority is not None:
            data["priority"] = node.priority
        data["matchers"] = [dict(m) for m in node.matchers]
        data["steps"] = [dict(s) for s in node.steps]
        if node.title is not None:
            data["title"] = node.title
        if node.description is not None:
            data["description"] = node.description
        return data

    raise TypeError(f"Not a rule tree node: {node!r}")


def _deserialize_item(data: dict) -> Group | Rule:
    if not isinstance(data, dict):
        raise ValueError(f"Expected a rule or group object, got {type(data).__name__}")
    if "id" not in data:
        raise ValueError("Rule item missing 'id' field")

    if isinstance(data.get("items"), list):
        return Group(
            id=str(data["id"]),
            title=str(data.get("title", "")),
            items=[_deserialize_item(child) for child in data["items"]],
            description=data.get("description"),
            collapsed=bool(data.get("collapsed", False)),
        )

    matchers = data.get("matchers", [])
    steps = data.get("steps", [])
    if not isinstance(matchers, list) or not isinstance(steps, list):
        raise ValueError(f"Rule {data['id']!r} has malformed matchers or steps")

    return Rule(
        id=str(data["id"]),
        type=data.get("type", "http"),
        matchers=matchers,
        steps=steps,
        title=data.get("title"),
        description=data.get("description"),
        activated=data.get("activated", True),
        priority=data.get("priority"),
    )


def deserialize_tree(payload: object) -> Root:
    """Rebuild a tree from a serialized payload.

    Raises:
        ValueError: If the payload is not shaped like a serialized tree
    """
    if not isinstance(payload, dict):
        raise ValueError(f"Rules payload must be an object, got {type(payload).__name__}")

    items = payload.get("items")
    if not isinstance(items, list):
        raise ValueError("Rules payload missing 'items' list")

    return Root(
        items=[_deserialize_item(item) for item in items],
        id=str(payload.get("id", "root")),
    )
