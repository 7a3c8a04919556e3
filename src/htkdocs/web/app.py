"""FastAPI application for browsing, exporting, importing and editing rule docs."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import Response

from htkdocs import __version__
from htkdocs.config import DocsConfig, load_config
from htkdocs.core import (
    Group,
    ItemNotFoundError,
    Rule,
    RulesStore,
    count_items,
    is_mock_rule,
    serialize_tree,
    summarize_matcher,
    summarize_steps,
)
from htkdocs.docs import ExtractionFailure, export_tree, extract, load_rules_file
from htkdocs.editor import DescriptionEditor, HtmlBuffer, markdown_to_html
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

logger = logging.getLogger(__name__)

IMPORT_FAILED_MESSAGE = "Could not find rules data in this file"
EXPORT_FILENAME = "rules-docs.md"


class DocsState:
    """The shared store plus one open description editor per item."""

    def __init__(self, store: RulesStore | None = None, config: DocsConfig | None = None):
        self.store = store if store is not None else RulesStore()
        self.config = config if config is not None else DocsConfig()
        self.editors: dict[str, DescriptionEditor] = {}

    def open_editor(self, item_id: str) -> DescriptionEditor:
        """Return the editor session for an item, opening one if needed."""
        editor = self.editors.get(item_id)
        if editor is None:
            editor = DescriptionEditor(
                self.store,
                item_id,
                surface=HtmlBuffer(),
                placeholder=self.config.editor_placeholder,
                linkify=self.config.editor_linkify,
            )
            self.editors[item_id] = editor
        return editor


# Global state, replaced on startup
_state = DocsState()


def get_state() -> DocsState:
    return _state


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load config and the configured rules file on startup."""
    global _state
    config = load_config()
    _state = DocsState(config=config)

    if config.rules_path is not None and config.rules_path.exists():
        payload = load_rules_file(config.rules_path)
        if isinstance(payload, ExtractionFailure):
            logger.warning(f"Could not load {config.rules_path}: {payload.reason}")
        else:
            try:
                _state.store.load_payload(payload)
            except ValueError as e:
                logger.warning(f"Could not load {config.rules_path}: {e}")
    yield
    _state.editors.clear()


app = FastAPI(
    title="HTTP Toolkit Rules Docs API",
    description="Export, import and edit documentation for HTTP Toolkit rules",
    version=__version__,
    lifespan=lifespan,
)


def item_view(item: Group | Rule) -> ItemView:
    """Describe a rule or group the way the docs browser shows it."""
    if isinstance(item, Group):
        return ItemView(
            id=item.id,
            kind="group",
            title=item.title,
            description=item.description,
            display_title=item.title,
        )

    matcher_summary = summarize_matcher(item)
    steps_summary = summarize_steps(item)
    display_title = item.title if item.title is not None else matcher_summary
    if item.title is not None:
        summary = f"Match: {matcher_summary} → {steps_summary}"
    elif steps_summary != display_title:
        summary = steps_summary
    else:
        summary = None

    return ItemView(
        id=item.id,
        kind="rule",
        title=item.title,
        description=item.description,
        display_title=display_title,
        summary=summary,
        is_mock=is_mock_rule(item),
    )


def editor_state(editor: DescriptionEditor) -> EditorState:
    return EditorState(
        item_id=editor.item_id,
        markdown=editor.markdown,
        html=editor.html,
        placeholder=editor.editor.placeholder,
        placeholder_visible=editor.editor.placeholder_visible,
    )


@app.get("/api/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()


@app.get("/api/rules")
async def get_rules(state: DocsState = Depends(get_state)) -> dict:
    """Get the full serialized rule tree."""
    return serialize_tree(state.store.snapshot())


@app.get("/api/rules/export")
async def export_rules(state: DocsState = Depends(get_state)) -> Response:
    """Download the rules as a Markdown document."""
    markdown = export_tree(state.store.snapshot(), title=state.config.export_title)
    return Response(
        content=markdown,
        media_type="text/markdown; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@app.post("/api/rules/import", response_model=ImportResponse)
async def import_rules(
    request: ImportRequest, state: DocsState = Depends(get_state)
) -> ImportResponse:
    """Replace the rules with those in an uploaded JSON or Markdown file."""
    payload = extract(request.content)
    if isinstance(payload, ExtractionFailure):
        logger.warning(f"Import failed: {payload.reason}")
        raise HTTPException(status_code=400, detail=IMPORT_FAILED_MESSAGE)

    try:
        root = state.store.load_payload(payload)
    except ValueError as e:
        logger.warning(f"Import failed: {e}")
        raise HTTPException(status_code=400, detail=IMPORT_FAILED_MESSAGE)

    state.editors.clear()
    return ImportResponse(item_count=count_items(root))


@app.get("/api/rules/items/{item_id}", response_model=ItemView)
async def get_item(item_id: str, state: DocsState = Depends(get_state)) -> ItemView:
    """Get one rule or group."""
    item = state.store.find(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"No rule or group with id '{item_id}'")
    return item_view(item)


@app.patch("/api/rules/items/{item_id}", response_model=ItemView)
async def update_item(
    item_id: str, update: ItemUpdate, state: DocsState = Depends(get_state)
) -> ItemView:
    """Edit the title and/or description of a rule or group."""
    try:
        if update.title is not None:
            state.store.set_title(item_id, update.title)
        if update.description is not None:
            state.store.set_description(item_id, update.description)
    except ItemNotFoundError:
        raise HTTPException(status_code=404, detail=f"No rule or group with id '{item_id}'")

    editor = state.editors.get(item_id)
    if editor is not None:
        editor.refresh()
    return item_view(state.store.find(item_id))


@app.get("/api/editor/{item_id}", response_model=EditorState)
async def open_editor(item_id: str, state: DocsState = Depends(get_state)) -> EditorState:
    """Open (or resume) the description editor for an item."""
    try:
        editor = state.open_editor(item_id)
    except ItemNotFoundError:
        raise HTTPException(status_code=404, detail=f"No rule or group with id '{item_id}'")
    return editor_state(editor)


@app.post("/api/editor/{item_id}/input", response_model=EditorState)
async def editor_input(
    item_id: str, edit: EditorInput, state: DocsState = Depends(get_state)
) -> EditorState:
    """Apply an edit made in the browser's editable surface."""
    try:
        editor = state.open_editor(item_id)
    except ItemNotFoundError:
        raise HTTPException(status_code=404, detail=f"No rule or group with id '{item_id}'")
    editor.surface.user_edit(edit.html)
    return editor_state(editor)


@app.post("/api/render", response_model=RenderResponse)
async def render_markdown(request: RenderRequest) -> RenderResponse:
    """Render Markdown to HTML for previews."""
    html = markdown_to_html(request.markdown, linkify=request.linkify) if request.markdown.strip() else ""
    return RenderResponse(html=html)
