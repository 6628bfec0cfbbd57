"""
Editor Routes
=============

API routes for banner editor sessions: creation, canvas config,
undo/redo, save and preview.
"""

from fastapi import APIRouter, HTTPException
from typing import Optional, Dict, Any, List
from pydantic import BaseModel, Field, ValidationError

from ..models.banner_models import BannerConfig, BannerCopy, TextElement
from ..models.preset_models import DEFAULT_BANNER_SIZE_ID, get_banner_size
from ..services.layout_generator import get_variation
from ..services.preview_renderer import render_banner_html

router = APIRouter(prefix="/api/editor", tags=["editor"])

# Injected by server
session_manager = None
copy_service = None


class CreateSessionRequest(BaseModel):
    """Request to start an editor session."""
    size_id: Optional[str] = None
    config: Optional[BannerConfig] = None
    banner_copy: Optional[BannerCopy] = None
    copy_id: Optional[str] = None
    variation_id: Optional[str] = None


class ConfigUpdateRequest(BaseModel):
    """Canvas config change. Unset fields are left alone."""
    size_id: Optional[str] = None
    width: Optional[int] = Field(default=None, gt=0)
    height: Optional[int] = Field(default=None, gt=0)
    background_color: Optional[str] = None
    background_image: Optional[str] = None


class LoadVariationRequest(BaseModel):
    """Replace the session's elements with a generated variation."""
    variation_id: str
    banner_copy: Optional[BannerCopy] = None
    copy_id: Optional[str] = None


class EditorStateResponse(BaseModel):
    """Full editor state for a session."""
    session_id: str
    config: BannerConfig
    elements: List[TextElement]
    selected_id: Optional[str] = None
    can_undo: bool
    can_redo: bool
    history_length: int
    history_index: int
    updated_at: Optional[str] = None


def get_session_or_404(session_id: str):
    """Shared lookup for editor and element routes."""
    if not session_manager:
        raise HTTPException(status_code=500, detail="Session manager not initialized")

    session = session_manager.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def build_state_response(session) -> EditorStateResponse:
    editor = session.editor
    return EditorStateResponse(
        session_id=session.session_id,
        config=editor.config,
        elements=editor.elements,
        selected_id=editor.selected_id,
        can_undo=editor.can_undo,
        can_redo=editor.can_redo,
        history_length=len(editor.history),
        history_index=editor.history.index,
        updated_at=session.updated_at.isoformat() if session.updated_at else None
    )


def _resolve_copy(banner_copy: Optional[BannerCopy], copy_id: Optional[str]) -> Optional[BannerCopy]:
    if banner_copy is not None:
        return banner_copy
    if copy_id is None:
        return None
    if not copy_service:
        raise HTTPException(status_code=500, detail="Copy service not initialized")
    record = copy_service.get(copy_id)
    if not record:
        raise HTTPException(status_code=404, detail="Banner copy not found")
    return record.to_copy()


@router.post("/session")
async def create_session(request: CreateSessionRequest) -> EditorStateResponse:
    """Create an editor session, optionally seeded with a layout variation."""
    if not session_manager:
        raise HTTPException(status_code=500, detail="Session manager not initialized")

    if request.config is not None:
        config = request.config
    else:
        size = get_banner_size(request.size_id or DEFAULT_BANNER_SIZE_ID)
        if size is None:
            raise HTTPException(status_code=400, detail=f"Unknown size preset: {request.size_id}")
        config = BannerConfig(width=size.width, height=size.height)

    elements: List[TextElement] = []
    banner_copy = _resolve_copy(request.banner_copy, request.copy_id)
    if banner_copy is not None:
        variation = get_variation(config, banner_copy, request.variation_id or "centered")
        if variation is None:
            raise HTTPException(status_code=400, detail=f"Unknown variation: {request.variation_id}")
        elements = variation.elements

    session = session_manager.create_session(config=config, elements=elements)
    return build_state_response(session)


@router.get("/{session_id}")
async def get_state(session_id: str) -> EditorStateResponse:
    """Get editor state for a session."""
    return build_state_response(get_session_or_404(session_id))


@router.put("/{session_id}/config")
async def update_config(session_id: str, request: ConfigUpdateRequest) -> EditorStateResponse:
    """Change canvas size or background."""
    session = get_session_or_404(session_id)
    editor = session.editor

    if request.size_id and not editor.apply_size_preset(request.size_id):
        raise HTTPException(status_code=400, detail=f"Unknown size preset: {request.size_id}")

    try:
        editor.update_config(
            width=request.width,
            height=request.height,
            background_color=request.background_color,
            background_image=request.background_image
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    session.touch()
    return build_state_response(session)


@router.post("/{session_id}/variation")
async def load_variation(session_id: str, request: LoadVariationRequest) -> EditorStateResponse:
    """Replace the elements with a layout variation for the current canvas."""
    session = get_session_or_404(session_id)
    editor = session.editor

    banner_copy = _resolve_copy(request.banner_copy, request.copy_id)
    if banner_copy is None:
        raise HTTPException(status_code=400, detail="banner_copy or copy_id is required")

    variation = get_variation(editor.config, banner_copy, request.variation_id)
    if variation is None:
        raise HTTPException(status_code=400, detail=f"Unknown variation: {request.variation_id}")

    editor.load_variation(variation)
    session.touch()
    return build_state_response(session)


@router.post("/{session_id}/undo")
async def undo(session_id: str) -> EditorStateResponse:
    """Step back in history. No-op at the oldest state."""
    session = get_session_or_404(session_id)
    if session.editor.undo():
        session.touch()
    return build_state_response(session)


@router.post("/{session_id}/redo")
async def redo(session_id: str) -> EditorStateResponse:
    """Step forward in history. No-op at the newest state."""
    session = get_session_or_404(session_id)
    if session.editor.redo():
        session.touch()
    return build_state_response(session)


@router.post("/{session_id}/save")
async def save_session(session_id: str):
    """Persist the session for later resume."""
    get_session_or_404(session_id)
    session_manager.save_session(session_id)
    return {"message": "Session saved", "session_id": session_id}


@router.delete("/{session_id}")
async def delete_session(session_id: str):
    """Delete a session."""
    if not session_manager:
        raise HTTPException(status_code=500, detail="Session manager not initialized")

    if not session_manager.delete_session(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"message": "Session deleted", "session_id": session_id}


@router.get("/{session_id}/preview")
async def preview(session_id: str, scale: float = 1.0) -> Dict[str, Any]:
    """Render the current banner as preview HTML."""
    if scale <= 0:
        raise HTTPException(status_code=400, detail="scale must be positive")

    editor = get_session_or_404(session_id).editor
    return {
        "session_id": session_id,
        "html": render_banner_html(editor.config, editor.elements, scale=scale)
    }
