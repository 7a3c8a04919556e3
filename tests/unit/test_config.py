"""Unit tests for configuration loading."""

from pathlib import Path

import pytest

from htkdocs.config import DocsConfig, load_config
from htkdocs.docs import DEFAULT_TITLE


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("HTKDOCS_CONFIG", raising=False)
    monkeypatch.delenv("HTKDOCS_RULES_PATH", raising=False)


class TestLoadConfig:
    """Tests for load_config()."""

    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.yaml")
        assert config == DocsConfig()
        assert config.export_title == DEFAULT_TITLE

    def test_reads_yaml(self, tmp_path):
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        path = config_dir / "htkdocs.yaml"
        path.write_text(
            "export:\n"
            "  title: '# Team rules'\n"
            "editor:\n"
            "  placeholder: Describe it\n"
            "  linkify: false\n"
            "rules_path: data/rules.htkrules\n"
        )
        config = load_config(path)
        assert config.export_title == "# Team rules"
        assert config.editor_placeholder == "Describe it"
        assert config.editor_linkify is False
        assert config.rules_path == tmp_path / "data" / "rules.htkrules"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == DocsConfig()

    def test_config_path_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("export:\n  title: '# From env'\n")
        monkeypatch.setenv("HTKDOCS_CONFIG", str(path))
        assert load_config().export_title == "# From env"

    def test_rules_path_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HTKDOCS_RULES_PATH", "/tmp/other.md")
        config = load_config(tmp_path / "missing.yaml")
        assert config.rules_path == Path("/tmp/other.md")
