"""
Banner Models for Banner Studio
================================

Models for positioned text elements, banner canvas configuration,
banner copy, layout variations and history snapshots.

All models serialise with model_dump() and restore with model_validate(),
which is the save/resume format for editor sessions.
"""

from enum import Enum
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class TextAlign(str, Enum):
    """Text alignment within an element box."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class LayerDirection(str, Enum):
    """Direction for z-order moves."""
    UP = "up"      # Toward the front
    DOWN = "down"  # Toward the back


class Padding(BaseModel):
    """Four-sided inner spacing in pixels."""
    top: float = Field(default=0, ge=0, allow_inf_nan=False)
    right: float = Field(default=0, ge=0, allow_inf_nan=False)
    bottom: float = Field(default=0, ge=0, allow_inf_nan=False)
    left: float = Field(default=0, ge=0, allow_inf_nan=False)


class Shadow(BaseModel):
    """Drop shadow. Offsets may be negative."""
    color: str = "#000000"
    offset_x: float = Field(default=0, allow_inf_nan=False)
    offset_y: float = Field(default=0, allow_inf_nan=False)
    blur: float = Field(default=0, ge=0, allow_inf_nan=False)


class Stroke(BaseModel):
    """Text outline."""
    color: str = "#000000"
    width: float = Field(default=1, ge=1, allow_inf_nan=False)


class TextElement(BaseModel):
    """A single positioned, styled piece of text on a banner."""
    id: str
    text: str = ""

    # Geometry (canvas-relative pixels, top-left origin)
    x: float = Field(default=0, ge=0, allow_inf_nan=False)
    y: float = Field(default=0, ge=0, allow_inf_nan=False)
    width: float = Field(default=200, ge=0, allow_inf_nan=False)
    height: float = Field(default=40, ge=0, allow_inf_nan=False)

    # Typography
    font_size: float = Field(default=20, gt=0, allow_inf_nan=False)
    font_family: str = "Arial, sans-serif"
    font_weight: str = "normal"
    color: str = "#000000"
    text_align: TextAlign = TextAlign.CENTER

    # Layering: higher paints on top
    z_index: int = 1

    # Decoration
    background_color: Optional[str] = None
    border_radius: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    padding: Optional[Padding] = None
    shadow: Optional[Shadow] = None
    stroke: Optional[Stroke] = None

    model_config = ConfigDict(use_enum_values=True)


class BannerConfig(BaseModel):
    """Canvas-level settings for one banner."""
    width: int = Field(default=1080, gt=0)
    height: int = Field(default=1080, gt=0)
    background_color: str = "#ffffff"
    background_image: Optional[str] = None  # Opaque reference, never fetched


class BannerCopy(BaseModel):
    """The three copy strings shown on a banner."""
    main_text: str = ""
    sub_text: Optional[str] = None
    cta_text: str = ""


class LayoutVariation(BaseModel):
    """Named output of the layout generator."""
    id: str  # centered | left | right
    name: str
    description: str
    elements: List[TextElement] = Field(default_factory=list)


class HistoryState(BaseModel):
    """
    Immutable snapshot of editor state at one point in time.

    Built from deep copies; readers must copy again before handing
    elements to anything that mutates them.
    """
    elements: Tuple[TextElement, ...] = ()
    config: BannerConfig

    model_config = ConfigDict(frozen=True)

    @classmethod
    def capture(cls, elements: List[TextElement], config: BannerConfig) -> "HistoryState":
        """Deep-copy the given state into a new snapshot."""
        return cls(
            elements=tuple(e.model_copy(deep=True) for e in elements),
            config=config.model_copy(deep=True)
        )

    def restore(self) -> Tuple[List[TextElement], BannerConfig]:
        """Return independent copies of the snapshot contents."""
        return (
            [e.model_copy(deep=True) for e in self.elements],
            self.config.model_copy(deep=True)
        )
