"""Extract a rules payload from raw JSON or an exported Markdown document."""

import json
from dataclasses import dataclass
from pathlib import Path

FENCE = "```"
IMPORT_FENCE_TAGS = ("htkrules", "json")
MAX_FENCE_INDENT = 3


@dataclass(frozen=True)
class ExtractionFailure:
    """Returned by extract() when no payload could be read. Always falsy."""
    reason: str

    def __bool__(self) -> bool:
        return False


def _fence_rest(line: str) -> str | None:
    """Return the text after a fence marker, or None if line is not a fence."""
    stripped = line.lstrip(" ")
    if len(line) - len(stripped) > MAX_FENCE_INDENT or not stripped.startswith(FENCE):
        return None
    return stripped[len(FENCE):]


def _is_closing_fence(line: str) -> bool:
    return _fence_rest(line) is not None and line.strip() == FENCE


def _split_lines(text: str) -> list[str]:
    # str.splitlines() would also break on U+2028/U+2029/U+0085 inside JSON strings
    return [line.removesuffix("\r") for line in text.split("\n")]


def find_fenced_block(text: str, tags: tuple[str, ...] = IMPORT_FENCE_TAGS) -> str | None:
    """Return the body of the first fenced code block tagged with one of tags.

    Scans line by line for an opening fence (three backticks, indented by at
    most three spaces) whose language tag is one of tags. The body runs until
    the next line holding only three backticks. Fences with any other tag are
    not treated as openers, so an unclosed block elsewhere in the document
    cannot hide a later payload.

    Args:
        text: Markdown text to scan
        tags: Accepted language tags (exact match)

    Returns:
        The block body (without fence lines), or None if no block matches
    """
    lines = _split_lines(text)
    for i, line in enumerate(lines):
        rest = _fence_rest(line)
        if rest is None or rest.strip() not in tags:
            continue

        for end in range(i + 1, len(lines)):
            if _is_closing_fence(lines[end]):
                return "\n".join(lines[i + 1:end])
        # No closing fence anywhere below, so no later opener can close either
        return None

    return None


def extract(text: str) -> object | ExtractionFailure:
    """Extract the rules payload from file content.

    Text that starts with '{' (after trimming) is parsed as JSON directly and
    is never searched for fences, even if parsing fails. Anything else is
    searched for the first ```htkrules or ```json block.

    Returns:
        The parsed JSON value, or an ExtractionFailure
    """
    trimmed = text.strip()
    if not trimmed:
        return ExtractionFailure("File is empty")

    if trimmed.startswith("{"):
        try:
            return json.loads(trimmed)
        except (ValueError, RecursionError) as e:
            return ExtractionFailure(f"Invalid JSON: {e}")

    body = find_fenced_block(trimmed)
    if body is None:
        return ExtractionFailure("No ```htkrules or ```json block found")

    try:
        return json.loads(body.strip())
    except (ValueError, RecursionError) as e:
        return ExtractionFailure(f"Invalid JSON in fenced block: {e}")


def load_rules_file(path: Path) -> object | ExtractionFailure:
    """Read a .htkrules/.json/.md file and extract its rules payload."""
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return ExtractionFailure(f"Could not read {path}: {e}")
    return extract(content)
