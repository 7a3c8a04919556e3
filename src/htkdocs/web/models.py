"""Pydantic models for the web API."""

from typing import Literal

from pydantic import BaseModel, Field

from htkdocs import __version__


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = "ok"
    version: str = __version__


class ImportRequest(BaseModel):
    """Request body for importing a rules file."""

    content: str = Field(..., description="Raw JSON or an exported Markdown document")


class ImportResponse(BaseModel):
    """Result of a successful import."""

    item_count: int


class ItemUpdate(BaseModel):
    """Field edits for a rule or group. Omitted fields are left alone."""

    title: str | None = Field(default=None, description="New title")
    description: str | None = Field(
        default=None, description="New Markdown description ('' clears it)"
    )


class ItemView(BaseModel):
    """A rule or group as shown in the docs browser."""

    id: str
    kind: Literal["group", "rule"]
    title: str | None
    description: str | None
    display_title: str
    summary: str | None = None
    is_mock: bool = False


class EditorInput(BaseModel):
    """A user edit from the browser's editable surface."""

    html: str


class EditorState(BaseModel):
    """Current state of a description editor session."""

    item_id: str
    markdown: str
    html: str
    placeholder: str | None
    placeholder_visible: bool


class RenderRequest(BaseModel):
    """Request body for a Markdown preview."""

    markdown: str
    linkify: bool = True


class RenderResponse(BaseModel):
    """Rendered HTML preview."""

    html: str
