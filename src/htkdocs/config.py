"""Configuration loaded from config/htkdocs.yaml and the environment."""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv

from htkdocs.docs import DEFAULT_TITLE
from htkdocs.editor import DEFAULT_PLACEHOLDER

load_dotenv()

# Default paths relative to project root
PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "htkdocs.yaml"


@dataclass
class DocsConfig:
    """Settings for export, the editor and the web API."""
    export_title: str = DEFAULT_TITLE
    editor_placeholder: str = DEFAULT_PLACEHOLDER
    editor_linkify: bool = True
    rules_path: Path | None = None


def load_config(config_path: Path | None = None) -> DocsConfig:
    """Load configuration from YAML file.

    The path comes from the argument, then HTKDOCS_CONFIG, then the default
    config/htkdocs.yaml. A missing file gives the defaults. HTKDOCS_RULES_PATH
    overrides rules_path.

    Args:
        config_path: Path to config file

    Returns:
        DocsConfig with defaults filled in
    """
    if config_path is None:
        env_path = os.environ.get("HTKDOCS_CONFIG")
        config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

    data = {}
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

    export = data.get("export") or {}
    editor = data.get("editor") or {}
    config = DocsConfig(
        export_title=export.get("title", DEFAULT_TITLE),
        editor_placeholder=editor.get("placeholder", DEFAULT_PLACEHOLDER),
        editor_linkify=bool(editor.get("linkify", True)),
    )

    env_rules_path = os.environ.get("HTKDOCS_RULES_PATH")
    if env_rules_path:
        config.rules_path = Path(env_rules_path)
    elif data.get("rules_path"):
        # Relative to the project root (the config directory's parent)
        config.rules_path = config_path.parent.parent / data["rules_path"]

    return config
