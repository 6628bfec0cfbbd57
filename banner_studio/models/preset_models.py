"""
Preset Models for Banner Studio
================================

Banner size presets, editor font options and background styles.
"""

from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel


class BannerSize(BaseModel):
    """A platform banner size preset."""
    id: str
    name: str
    width: int
    height: int
    platform: str
    description: str

    @property
    def dimensions(self) -> str:
        return f"{self.width}×{self.height}"


class BackgroundType(str, Enum):
    """How the banner background is produced."""
    GRADIENT = "gradient"
    PATTERN = "pattern"
    CUSTOM_IMAGE = "custom_image"


class BackgroundStyle(BaseModel):
    """Background style option shown in the copy step."""
    id: str
    name: str
    type: BackgroundType
    description: str
    speed: str  # fast | medium | slow


BANNER_SIZES: List[BannerSize] = [
    BannerSize(
        id="google-leaderboard",
        name="Leaderboard",
        width=728,
        height=90,
        platform="Google Ads",
        description="Website header and footer placements"
    ),
    BannerSize(
        id="facebook-feed",
        name="Feed Post",
        width=1080,
        height=1080,
        platform="Facebook/Instagram",
        description="Square social feed post"
    ),
    BannerSize(
        id="instagram-story",
        name="Story",
        width=1080,
        height=1920,
        platform="Instagram",
        description="Vertical stories and reels"
    ),
    BannerSize(
        id="facebook-cover",
        name="Cover Image",
        width=1200,
        height=628,
        platform="Facebook",
        description="Facebook page cover"
    ),
    BannerSize(
        id="youtube-thumbnail",
        name="Thumbnail",
        width=1280,
        height=720,
        platform="YouTube",
        description="YouTube video thumbnail"
    ),
    BannerSize(
        id="twitter-header",
        name="Header Image",
        width=1500,
        height=500,
        platform="Twitter/X",
        description="Profile header"
    ),
]

DEFAULT_BANNER_SIZE_ID = "facebook-feed"

# Quick size buttons in the editor panel
EDITOR_QUICK_SIZES: Dict[str, tuple] = {
    "rectangle": (300, 250),
    "leaderboard": (728, 90),
    "facebook": (1200, 628),
}

FONT_FAMILIES: List[Dict[str, str]] = [
    {"value": "Arial, sans-serif", "label": "Arial"},
    {"value": "Helvetica, sans-serif", "label": "Helvetica"},
    {"value": '"Times New Roman", serif', "label": "Times New Roman"},
    {"value": '"Georgia", serif', "label": "Georgia"},
    {"value": '"Courier New", monospace', "label": "Courier New"},
    {"value": '"Comic Sans MS", cursive', "label": "Comic Sans MS"},
    {"value": '"Impact", sans-serif', "label": "Impact"},
    {"value": '"Verdana", sans-serif', "label": "Verdana"},
    {"value": '"Trebuchet MS", sans-serif', "label": "Trebuchet MS"},
    {"value": '"Palatino", serif', "label": "Palatino"},
]

FONT_WEIGHTS: List[Dict[str, str]] = [
    {"value": "300", "label": "Light (300)"},
    {"value": "normal", "label": "Normal (400)"},
    {"value": "500", "label": "Medium (500)"},
    {"value": "600", "label": "Semi Bold (600)"},
    {"value": "bold", "label": "Bold (700)"},
    {"value": "800", "label": "Extra Bold (800)"},
    {"value": "900", "label": "Black (900)"},
]

BACKGROUND_STYLES: List[BackgroundStyle] = [
    BackgroundStyle(
        id="gradient",
        name="Gradient",
        type=BackgroundType.GRADIENT,
        description="Colour gradient background (fast)",
        speed="fast"
    ),
    BackgroundStyle(
        id="pattern",
        name="Design Pattern",
        type=BackgroundType.PATTERN,
        description="Professional pattern design (medium)",
        speed="medium"
    ),
    BackgroundStyle(
        id="custom_image",
        name="Custom Image",
        type=BackgroundType.CUSTOM_IMAGE,
        description="Uploaded image background",
        speed="slow"
    ),
]


def get_banner_size(size_id: str) -> Optional[BannerSize]:
    """Look up a platform size preset by id."""
    for size in BANNER_SIZES:
        if size.id == size_id:
            return size
    return None
