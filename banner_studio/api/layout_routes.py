"""
Layout Routes
=============

API routes for layout generation, presets and previews.
"""

from fastapi import APIRouter, HTTPException
from typing import Optional, Dict, Any, List
from pydantic import BaseModel, Field

from ..models.banner_models import BannerConfig, BannerCopy, LayoutVariation
from ..models.preset_models import (
    BACKGROUND_STYLES,
    BANNER_SIZES,
    EDITOR_QUICK_SIZES,
    FONT_FAMILIES,
    FONT_WEIGHTS,
)
from ..services.layout_generator import generate_variations, get_variation
from ..services.preview_renderer import THUMBNAIL_SCALE, render_banner_html

router = APIRouter(prefix="/api/layouts", tags=["layouts"])


class VariationsRequest(BaseModel):
    """Request to generate layout variations."""
    config: BannerConfig = Field(default_factory=BannerConfig)
    banner_copy: BannerCopy


class VariationsResponse(BaseModel):
    """Generated layout variations."""
    config: BannerConfig
    variations: List[LayoutVariation]


class PreviewRequest(BaseModel):
    """Request for an HTML preview of one variation."""
    config: BannerConfig = Field(default_factory=BannerConfig)
    banner_copy: BannerCopy
    variation_id: str = "centered"
    scale: float = Field(default=THUMBNAIL_SCALE, gt=0, le=4)


@router.post("/variations")
async def create_variations(request: VariationsRequest) -> VariationsResponse:
    """Generate the centered, left and right variations."""
    return VariationsResponse(
        config=request.config,
        variations=generate_variations(request.config, request.banner_copy)
    )


@router.post("/preview")
async def preview_variation(request: PreviewRequest) -> Dict[str, Any]:
    """Render one variation as preview HTML."""
    variation = get_variation(request.config, request.banner_copy, request.variation_id)
    if variation is None:
        raise HTTPException(status_code=400, detail=f"Unknown variation: {request.variation_id}")

    return {
        "variation_id": variation.id,
        "name": variation.name,
        "html": render_banner_html(request.config, variation.elements, scale=request.scale)
    }


@router.get("/sizes")
async def list_sizes():
    """List platform size presets and editor quick sizes."""
    return {
        "sizes": [
            {**size.model_dump(), "dimensions": size.dimensions}
            for size in BANNER_SIZES
        ],
        "quick_sizes": [
            {"id": key, "width": w, "height": h}
            for key, (w, h) in EDITOR_QUICK_SIZES.items()
        ]
    }


@router.get("/fonts")
async def list_fonts():
    """List font family and weight options."""
    return {"families": FONT_FAMILIES, "weights": FONT_WEIGHTS}


@router.get("/backgrounds")
async def list_backgrounds():
    """List background style options."""
    return {"styles": [style.model_dump() for style in BACKGROUND_STYLES]}
