"""Web API for the rules docs browser and description editor."""

from htkdocs.web.app import DocsState, app, get_state
from htkdocs.web.models import (
    EditorInput,
    EditorState,
    HealthResponse,
    ImportRequest,
    ImportResponse,
    ItemUpdate,
    ItemView,
    RenderRequest,
    RenderResponse,
)

__all__ = [
    "app",
    "get_state",
    "DocsState",
    "EditorInput",
    "EditorState",
    "HealthResponse",
    "ImportRequest",
    "ImportResponse",
    "ItemUpdate",
    "ItemView",
    "RenderRequest",
    "RenderResponse",
]
