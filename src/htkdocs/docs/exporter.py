"""Export a rule tree as a single Markdown document."""

import json
from datetime import datetime, timezone
from typing import Callable

from htkdocs.core import (
    Group,
    Root,
    Rule,
    is_mock_rule,
    serialize_tree,
    summarize_matcher,
    summarize_steps,
    visit,
)

DEFAULT_TITLE = "# HTTP Toolkit rules & docs"
RULES_FENCE_TAG = "htkrules"
FENCE = "```"


def escape_markdown_block(text: str) -> str:
    """Collapse newlines so the text stays on one heading/summary line."""
    return text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with milliseconds, e.g. 2024-01-02T03:04:05.678Z."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _append_group(group: Group, lines: list[str]) -> None:
    lines.append("")
    lines.append(f"## {escape_markdown_block(group.title)}")
    if group.description:
        lines.append("")
        lines.append(group.description)
        lines.append("")


def _append_rule(
    rule: Rule,
    lines: list[str],
    summarize_matcher: Callable[[Rule], str],
    summarize_steps: Callable[[Rule], str],
) -> None:
    matcher_summary = summarize_matcher(rule)
    steps_summary = summarize_steps(rule)
    title = rule.title if rule.title is not None else matcher_summary
    mock_label = " *(Mock)*" if is_mock_rule(rule) else ""

    lines.append("")
    lines.append(f"### {escape_markdown_block(title)}{mock_label}")
    if rule.title is not None:
        lines.append(
            f"*Match: {escape_markdown_block(matcher_summary)}"
            f" → {escape_markdown_block(steps_summary)}*"
        )
    elif steps_summary != title:
        lines.append(f"*{escape_markdown_block(steps_summary)}*")
    if rule.description:
        lines.append("")
        lines.append(rule.description)


def export_tree(
    root: Root,
    *,
    title: str = DEFAULT_TITLE,
    serialize: Callable[[Root], object] = serialize_tree,
    summarize_matcher: Callable[[Rule], str] = summarize_matcher,
    summarize_steps: Callable[[Rule], str] = summarize_steps,
    now: Callable[[], datetime] = _utc_now,
) -> str:
    """Export a rule tree to Markdown.

    The human-readable docs come first: one level-2 heading per group (at
    any nesting depth) and one level-3 heading per rule, in tree order. A
    fenced ``htkrules`` block with the full serialized tree follows, so the
    document can be imported again.

    Args:
        root: Tree to export
        title: First line of the document
        serialize: Converts the tree to the JSON payload to embed
        summarize_matcher: Summary used when a rule has no title
        summarize_steps: Summary of what a rule does
        now: Clock for the Exported line

    Returns:
        The Markdown document
    """
    lines = [
        title,
        "",
        f"Exported: {format_timestamp(now())}",
        "",
    ]

    for node in visit(root):
        if isinstance(node, Group):
            _append_group(node, lines)
        elif isinstance(node, Rule):
            _append_rule(node, lines, summarize_matcher, summarize_steps)

    lines.append("")
    lines.append("---")
    lines.append("")
    lines.append("*Full rules data (for import):*")
    lines.append("")
    lines.append(f"{FENCE}{RULES_FENCE_TAG}")
    lines.append(json.dumps(serialize(root), indent=2, ensure_ascii=False))
    lines.append(FENCE)
    return "\n".join(lines)
