"""
Banner Copy Routes
==================

API routes for generating and editing banner copy.
"""

from fastapi import APIRouter, HTTPException
from typing import Optional, List
from pydantic import BaseModel, Field

from ..services.copy_service import Brief, BannerCopyRecord, validate_copy_lengths

router = APIRouter(prefix="/api/banner-copies", tags=["banner-copies"])

# Injected by server
copy_service = None


class GenerateCopyRequest(BaseModel):
    """Request to generate copy from a brief."""
    brief_id: str = ""
    persona: str = ""
    problem: str = ""
    benefit: str = ""
    required_words: List[str] = Field(default_factory=list)


class UpdateCopyRequest(BaseModel):
    """Partial copy update."""
    main_text: Optional[str] = None
    sub_text: Optional[str] = None
    cta_text: Optional[str] = None


class CopyResponse(BaseModel):
    """Response for copy operations."""
    success: bool
    data: Optional[BannerCopyRecord] = None


class CopyListResponse(BaseModel):
    """Copies generated for one brief."""
    success: bool
    data: List[BannerCopyRecord]


def _require_service():
    if not copy_service:
        raise HTTPException(status_code=500, detail="Copy service not initialized")
    return copy_service


@router.post("/generate")
async def generate_copy(request: GenerateCopyRequest) -> CopyResponse:
    """Generate banner copy for a brief."""
    service = _require_service()

    if not (request.brief_id and request.persona and request.problem and request.benefit):
        raise HTTPException(
            status_code=400,
            detail="brief_id, persona, problem and benefit are required"
        )

    brief = Brief(
        persona=request.persona,
        problem=request.problem,
        benefit=request.benefit,
        required_words=request.required_words
    )
    return CopyResponse(success=True, data=service.generate(request.brief_id, brief))


@router.get("")
async def list_copies(brief_id: str) -> CopyListResponse:
    """List banner copies generated for a brief."""
    service = _require_service()
    return CopyListResponse(success=True, data=service.list_for_brief(brief_id))


@router.get("/{copy_id}")
async def get_copy(copy_id: str) -> CopyResponse:
    """Get banner copy by id."""
    service = _require_service()

    record = service.get(copy_id)
    if not record:
        raise HTTPException(status_code=404, detail="Banner copy not found")
    return CopyResponse(success=True, data=record)


@router.put("/{copy_id}")
async def update_copy(copy_id: str, request: UpdateCopyRequest) -> CopyResponse:
    """Update banner copy, enforcing the 30/60/15 character limits."""
    service = _require_service()

    error = validate_copy_lengths(request.main_text, request.sub_text, request.cta_text)
    if error:
        raise HTTPException(status_code=400, detail=error)

    record = service.update(
        copy_id,
        main_text=request.main_text,
        sub_text=request.sub_text,
        cta_text=request.cta_text
    )
    if not record:
        raise HTTPException(status_code=404, detail="Banner copy not found")
    return CopyResponse(success=True, data=record)


@router.delete("/{copy_id}")
async def delete_copy(copy_id: str):
    """Delete banner copy."""
    service = _require_service()

    if not service.delete(copy_id):
        raise HTTPException(status_code=404, detail="Banner copy not found")
    return {"success": True, "message": "Banner copy deleted", "copy_id": copy_id}
