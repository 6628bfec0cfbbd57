"""
Element Routes
===============

API routes for text element management.

Operations on unknown element ids are non-fatal: they report
"applied": false and leave the state unchanged.
"""

from fastapi import APIRouter, HTTPException
from typing import Optional
from pydantic import BaseModel, Field, ValidationError

from ..models.banner_models import LayerDirection, Padding, Shadow, Stroke, TextAlign, TextElement
from .editor_routes import EditorStateResponse, build_state_response, get_session_or_404

router = APIRouter(prefix="/api/element", tags=["elements"])


class ElementUpdateRequest(BaseModel):
    """Partial element update. Only fields that are sent are applied."""
    text: Optional[str] = None
    x: Optional[float] = Field(default=None, ge=0)
    y: Optional[float] = Field(default=None, ge=0)
    width: Optional[float] = Field(default=None, gt=0)
    height: Optional[float] = Field(default=None, gt=0)
    font_size: Optional[float] = Field(default=None, gt=0)
    font_family: Optional[str] = None
    font_weight: Optional[str] = None
    color: Optional[str] = None
    text_align: Optional[TextAlign] = None
    z_index: Optional[int] = None
    background_color: Optional[str] = None
    border_radius: Optional[float] = Field(default=None, ge=0)
    padding: Optional[Padding] = None
    shadow: Optional[Shadow] = None
    stroke: Optional[Stroke] = None


class LayerRequest(BaseModel):
    """Request to move an element in z-order."""
    direction: LayerDirection


class DragRequest(BaseModel):
    """A complete drag gesture in canvas coordinates."""
    start_x: float
    start_y: float
    end_x: float
    end_y: float


class ElementResponse(BaseModel):
    """Response for element operations."""
    element_id: str
    applied: bool
    element: Optional[TextElement] = None
    state: EditorStateResponse


@router.post("/{session_id}")
async def add_element(session_id: str) -> ElementResponse:
    """Add a default text element on top and select it."""
    session = get_session_or_404(session_id)
    element = session.editor.add_element()
    session.touch()

    return ElementResponse(
        element_id=element.id,
        applied=True,
        element=element,
        state=build_state_response(session)
    )


@router.put("/{session_id}/{element_id}")
async def update_element(session_id: str, element_id: str, request: ElementUpdateRequest) -> ElementResponse:
    """Update element fields. History capture is debounced."""
    session = get_session_or_404(session_id)

    try:
        element = session.editor.update_element(element_id, request.model_dump(exclude_unset=True))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    if element:
        session.touch()
    return ElementResponse(
        element_id=element_id,
        applied=element is not None,
        element=element,
        state=build_state_response(session)
    )


@router.delete("/{session_id}/{element_id}")
async def remove_element(session_id: str, element_id: str) -> ElementResponse:
    """Remove element from the banner."""
    session = get_session_or_404(session_id)
    removed = session.editor.delete_element(element_id)
    if removed:
        session.touch()

    return ElementResponse(
        element_id=element_id,
        applied=removed,
        state=build_state_response(session)
    )


@router.post("/{session_id}/{element_id}/layer")
async def move_layer(session_id: str, element_id: str, request: LayerRequest) -> ElementResponse:
    """Move element one step up or down in z-order."""
    session = get_session_or_404(session_id)
    moved = session.editor.move_layer(element_id, request.direction)
    if moved:
        session.touch()

    return ElementResponse(
        element_id=element_id,
        applied=moved,
        element=session.editor.get_element(element_id),
        state=build_state_response(session)
    )


@router.post("/{session_id}/{element_id}/select")
async def select_element(session_id: str, element_id: str) -> ElementResponse:
    """Select an element."""
    session = get_session_or_404(session_id)
    selected = session.editor.select(element_id)

    return ElementResponse(
        element_id=element_id,
        applied=selected,
        element=session.editor.get_element(element_id),
        state=build_state_response(session)
    )


@router.post("/{session_id}/{element_id}/drag")
async def drag_element(session_id: str, element_id: str, request: DragRequest) -> ElementResponse:
    """Apply a whole drag gesture as one history step."""
    session = get_session_or_404(session_id)
    editor = session.editor

    moved = False
    if editor.pointer_down(element_id, request.start_x, request.start_y):
        editor.pointer_move(request.end_x, request.end_y)
        moved = editor.pointer_up()
    if moved:
        session.touch()

    return ElementResponse(
        element_id=element_id,
        applied=moved,
        element=editor.get_element(element_id),
        state=build_state_response(session)
    )
