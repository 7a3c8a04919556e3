"""Unit tests for extracting rules payloads from JSON and Markdown."""

import pytest

from htkdocs.docs import ExtractionFailure, extract, find_fenced_block, load_rules_file


class TestExtractJson:
    """Tests for raw JSON input."""

    def test_raw_json(self):
        assert extract('{"items": []}') == {"items": []}

    def test_surrounding_whitespace(self):
        assert extract('\n\n  {"items": [1]}  \n') == {"items": [1]}

    def test_invalid_json_fails(self):
        result = extract('{"items": [')
        assert isinstance(result, ExtractionFailure)
        assert not result

    def test_invalid_json_never_falls_back_to_fences(self):
        """Text starting with '{' is JSON or nothing."""
        text = '{ not json\n\n```json\n{"items": []}\n```\n'
        assert isinstance(extract(text), ExtractionFailure)

    def test_deeply_nested_json_fails_cleanly(self):
        text = "{\"a\": " + "[" * 100000 + "]" * 100000 + "}"
        assert isinstance(extract(text), ExtractionFailure)

    def test_oversized_integer_fails_cleanly(self):
        """Integers past the interpreter's digit limit are a failure, not an error."""
        assert isinstance(extract('{"a": ' + "1" * 5000 + "}"), ExtractionFailure)
        assert isinstance(extract("```json\n[" + "9" * 5000 + "]\n```"), ExtractionFailure)


class TestExtractEmpty:
    """Tests for empty input."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t\n"])
    def test_blank_input_fails(self, text):
        assert isinstance(extract(text), ExtractionFailure)


class TestExtractFences:
    """Tests for fenced blocks in Markdown."""

    def test_htkrules_fence(self):
        text = '# Rules\n\nSome docs.\n\n```htkrules\n{"items": []}\n```\n'
        assert extract(text) == {"items": []}

    def test_json_fence(self):
        text = 'Intro\n```json\n  {"a": 1}  \n```'
        assert extract(text) == {"a": 1}

    def test_first_fence_wins(self):
        text = 'A\n```json\n{"n": 1}\n```\nB\n```json\n{"n": 2}\n```\n'
        assert extract(text) == {"n": 1}

    def test_first_fence_wins_even_if_invalid(self):
        """Only the first matching block is ever parsed."""
        text = 'A\n```json\nnot json\n```\n```htkrules\n{"n": 2}\n```\n'
        assert isinstance(extract(text), ExtractionFailure)

    def test_other_languages_are_skipped(self):
        text = '```python\nprint("```json")\n```\n\n```json\n{"ok": true}\n```'
        assert extract(text) == {"ok": True}

    def test_untagged_fence_is_skipped(self):
        text = '```\n{"skip": true}\n```\n```htkrules\n{"ok": true}\n```'
        assert extract(text) == {"ok": True}

    def test_tag_must_match_exactly(self):
        assert isinstance(extract('```jsonc\n{"a": 1}\n```'), ExtractionFailure)
        assert isinstance(extract('```json extra\n{"a": 1}\n```'), ExtractionFailure)

    def test_inline_code_span_is_not_a_fence(self):
        text = '```inline```\n\n```json\n{"a": 1}\n```'
        assert extract(text) == {"a": 1}

    def test_no_fence_fails(self):
        assert isinstance(extract("# Just docs\n\nNothing to import."), ExtractionFailure)

    def test_unterminated_fence_fails(self):
        assert isinstance(extract('```json\n{"a": 1}\n'), ExtractionFailure)

    def test_invalid_fence_body_fails(self):
        assert isinstance(extract("```htkrules\n{oops}\n```"), ExtractionFailure)

    def test_windows_line_endings(self):
        assert extract('Docs\r\n```htkrules\r\n{"a": 1}\r\n```\r\n') == {"a": 1}

    def test_json_null_is_not_a_failure(self):
        """A payload of null is returned as None, distinct from failure."""
        assert extract("```json\nnull\n```") is None

    def test_fence_in_description_shadows_payload(self):
        """A json block in the docs body comes first and wins."""
        text = (
            '## Group\n\nExample:\n\n```json\n{"example": 1}\n```\n\n---\n\n'
            '```htkrules\n{"items": []}\n```'
        )
        assert extract(text) == {"example": 1}


class TestFindFencedBlock:
    """Tests for find_fenced_block()."""

    def test_returns_body(self):
        assert find_fenced_block("```htkrules\na\nb\n```") == "a\nb"

    def test_custom_tags(self):
        text = '```yaml\nkey: 1\n```'
        assert find_fenced_block(text, ("yaml",)) == "key: 1"
        assert find_fenced_block(text) is None

    def test_indented_fence(self):
        assert find_fenced_block("  ```json\n[]\n  ```") == "[]"

    def test_four_space_indent_is_not_a_fence(self):
        """Four spaces of indent make an indented code block, not a fence."""
        assert find_fenced_block("    ```json\n[]\n```") is None
        assert find_fenced_block("```json\n[]\n    ```\n```") == "[]\n    ```"

    def test_unclosed_block_does_not_hide_payload(self):
        text = "Example:\n```\nx = 1\n\n---\n\n```htkrules\n[1]\n```"
        assert find_fenced_block(text) == "[1]"

    def test_unicode_line_separators_stay_in_body(self):
        text = '```json\n["a\u2028b\u2029c\x85d"]\n```'
        assert find_fenced_block(text) == '["a\u2028b\u2029c\x85d"]'
        assert extract(text) == ["a\u2028b\u2029c\x85d"]


class TestLoadRulesFile:
    """Tests for load_rules_file()."""

    def test_reads_markdown_file(self, tmp_path):
        path = tmp_path / "rules.md"
        path.write_text('# Docs\n\n```htkrules\n{"items": []}\n```\n', encoding="utf-8")
        assert load_rules_file(path) == {"items": []}

    def test_missing_file_fails(self, tmp_path):
        result = load_rules_file(tmp_path / "missing.htkrules")
        assert isinstance(result, ExtractionFailure)
        assert "missing.htkrules" in result.reason

    def test_non_utf8_file_fails(self, tmp_path):
        path = tmp_path / "rules.htkrules"
        path.write_bytes(b"\xff\xfe{")
        assert isinstance(load_rules_file(path), ExtractionFailure)
