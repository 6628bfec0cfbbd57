"""
Banner Layout Generator
=======================

Turns a banner size and a copy triple (main/sub/cta) into three fixed
layout variations: centered, left-aligned and right-aligned.

Every position and size is a fraction of the banner width/height, and
font sizes follow min(width / divisor, cap), so one template works for
any banner dimensions.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from ..models.banner_models import (
    BannerConfig,
    BannerCopy,
    LayoutVariation,
    TextElement,
)

logger = logging.getLogger(__name__)


# Smallest dimension used in layout math; guards against NaN/Infinity
MIN_DIMENSION = 1

# Paint order within every variation
FIELD_ORDER = ["main", "sub", "cta"]
FIELD_Z_INDEX = {"main": 1, "sub": 2, "cta": 3}

# box = (x, y, width, height) as fractions of the banner
# font = (divisor, cap) for min(width / divisor, cap)
LAYOUT_TEMPLATES: Dict[str, Dict[str, Any]] = {
    "centered": {
        "name": "Centered",
        "description": "High-impact centered layout",
        "id_suffix": "",
        "fields": {
            "main": {
                "box": (0.1, 0.2, 0.8, 0.25),
                "font": (15, 36),
                "style": {
                    "font_family": '"Impact", sans-serif',
                    "font_weight": "bold",
                    "color": "#ffffff",
                    "background_color": "rgba(0, 0, 0, 0.7)",
                    "text_align": "center",
                    "padding": {"top": 8, "right": 16, "bottom": 8, "left": 16},
                    "border_radius": 8,
                    "shadow": {"color": "#000000", "offset_x": 2, "offset_y": 2, "blur": 8},
                },
            },
            "sub": {
                "box": (0.1, 0.5, 0.8, 0.2),
                "font": (25, 18),
                "style": {
                    "font_family": '"Helvetica", sans-serif',
                    "font_weight": "normal",
                    "color": "#ffffff",
                    "background_color": "rgba(0, 0, 0, 0.5)",
                    "text_align": "center",
                    "padding": {"top": 6, "right": 12, "bottom": 6, "left": 12},
                    "border_radius": 6,
                },
            },
            "cta": {
                "box": (0.3, 0.75, 0.4, 0.15),
                "font": (20, 24),
                "style": {
                    "font_family": '"Arial", sans-serif',
                    "font_weight": "bold",
                    "color": "#000000",
                    "background_color": "#ffff00",
                    "text_align": "center",
                    "padding": {"top": 8, "right": 16, "bottom": 8, "left": 16},
                    "border_radius": 25,
                    "stroke": {"color": "#000000", "width": 2},
                    "shadow": {"color": "#000000", "offset_x": 3, "offset_y": 3, "blur": 6},
                },
            },
        },
    },
    "left": {
        "name": "Left Aligned",
        "description": "Readable left-aligned layout",
        "id_suffix": "-left",
        "fields": {
            "main": {
                "box": (0.05, 0.1, 0.6, 0.3),
                "font": (18, 32),
                "style": {
                    "font_family": '"Georgia", serif',
                    "font_weight": "bold",
                    "color": "#ffffff",
                    "background_color": None,
                    "text_align": "left",
                    "stroke": {"color": "#000000", "width": 3},
                    "shadow": {"color": "#000000", "offset_x": 2, "offset_y": 2, "blur": 4},
                },
            },
            "sub": {
                "box": (0.05, 0.45, 0.55, 0.25),
                "font": (30, 16),
                "style": {
                    "font_family": '"Helvetica", sans-serif',
                    "font_weight": "normal",
                    "color": "#ffffff",
                    "background_color": "rgba(0, 0, 0, 0.6)",
                    "text_align": "left",
                    "padding": {"top": 8, "right": 12, "bottom": 8, "left": 12},
                    "border_radius": 4,
                },
            },
            "cta": {
                "box": (0.05, 0.75, 0.35, 0.18),
                "font": (22, 20),
                "style": {
                    "font_family": '"Arial", sans-serif',
                    "font_weight": "bold",
                    "color": "#ffffff",
                    "background_color": "#ff4444",
                    "text_align": "center",
                    "padding": {"top": 8, "right": 16, "bottom": 8, "left": 16},
                    "border_radius": 8,
                    "shadow": {"color": "#000000", "offset_x": 3, "offset_y": 3, "blur": 8},
                },
            },
        },
    },
    "right": {
        "name": "Right Aligned",
        "description": "Modern right-aligned layout",
        "id_suffix": "-right",
        "fields": {
            "main": {
                "box": (0.35, 0.15, 0.6, 0.25),
                "font": (16, 28),
                "style": {
                    "font_family": '"Trebuchet MS", sans-serif',
                    "font_weight": "bold",
                    "color": "#000000",
                    "background_color": "rgba(255, 255, 255, 0.9)",
                    "text_align": "right",
                    "padding": {"top": 10, "right": 16, "bottom": 10, "left": 16},
                    "border_radius": 12,
                    "stroke": {"color": "#333333", "width": 1},
                },
            },
            "sub": {
                "box": (0.4, 0.45, 0.55, 0.2),
                "font": (28, 14),
                "style": {
                    "font_family": '"Verdana", sans-serif',
                    "font_weight": "normal",
                    "color": "#333333",
                    "background_color": "rgba(255, 255, 255, 0.8)",
                    "text_align": "right",
                    "padding": {"top": 6, "right": 12, "bottom": 6, "left": 12},
                    "border_radius": 6,
                },
            },
            "cta": {
                "box": (0.6, 0.7, 0.35, 0.2),
                "font": (24, 18),
                "style": {
                    "font_family": '"Arial", sans-serif',
                    "font_weight": "bold",
                    "color": "#ffffff",
                    "background_color": "#00aa44",
                    "text_align": "center",
                    "padding": {"top": 8, "right": 16, "bottom": 8, "left": 16},
                    "border_radius": 20,
                    "shadow": {"color": "#004422", "offset_x": 2, "offset_y": 4, "blur": 6},
                },
            },
        },
    },
}

VARIATION_ORDER = ["centered", "left", "right"]


def compute_font_size(width: float, divisor: float, cap: float) -> float:
    """Font size proportional to banner width, capped for large banners."""
    return min(max(width, MIN_DIMENSION) / divisor, cap)


class BannerLayoutGenerator:
    """Generates the three layout variations for one banner and copy."""

    def __init__(self, config: BannerConfig, copy: BannerCopy):
        self.config = config
        self.copy = copy
        self.templates = LAYOUT_TEMPLATES
        self.width, self.height = self._dimensions()

    def generate_variations(self) -> List[LayoutVariation]:
        """
        Build all layout variations.

        Returns:
            Exactly three variations, in the order centered, left, right.
        """
        token = uuid.uuid4().hex[:8]
        logger.info(
            f"[LAYOUT-GEN] Generating variations for "
            f"{self.config.width}x{self.config.height}"
        )
        return [self.generate_variation(variation_id, token) for variation_id in VARIATION_ORDER]

    def generate_variation(self, variation_id: str, token: Optional[str] = None) -> LayoutVariation:
        """Build a single named variation."""
        template = self.templates[variation_id]
        token = token or uuid.uuid4().hex[:8]

        elements = []
        for field in FIELD_ORDER:
            text = self._text_for(field)
            if not text:
                continue
            elements.append(
                self._build_element(
                    field=field,
                    text=text,
                    field_template=template["fields"][field],
                    element_id=f"{field}{template['id_suffix']}-{token}"
                )
            )

        return LayoutVariation(
            id=variation_id,
            name=template["name"],
            description=template["description"],
            elements=elements
        )

    def _text_for(self, field: str) -> str:
        value = getattr(self.copy, f"{field}_text", None)
        return value or ""

    def _dimensions(self) -> tuple:
        width = self.config.width
        height = self.config.height
        if width < MIN_DIMENSION or height < MIN_DIMENSION:
            logger.warning(
                f"[LAYOUT-GEN] Degenerate banner size {width}x{height}, clamping to {MIN_DIMENSION}px"
            )
        return max(width, MIN_DIMENSION), max(height, MIN_DIMENSION)

    def _build_element(
        self,
        field: str,
        text: str,
        field_template: Dict[str, Any],
        element_id: str
    ) -> TextElement:
        """Place one copy field according to its template entry."""
        width, height = self.width, self.height
        fx, fy, fw, fh = field_template["box"]
        divisor, cap = field_template["font"]

        return TextElement(
            id=element_id,
            text=text,
            x=width * fx,
            y=height * fy,
            width=width * fw,
            height=height * fh,
            font_size=compute_font_size(width, divisor, cap),
            z_index=FIELD_Z_INDEX[field],
            **field_template["style"]
        )


def generate_variations(config: BannerConfig, copy: BannerCopy) -> List[LayoutVariation]:
    """
    Convenience function to generate layout variations.

    Args:
        config: Banner size and background
        copy: Main, sub and CTA text

    Returns:
        List of three LayoutVariation
    """
    return BannerLayoutGenerator(config, copy).generate_variations()


def get_variation(config: BannerConfig, copy: BannerCopy, variation_id: str) -> Optional[LayoutVariation]:
    """Build one variation by id, or None if the id is unknown."""
    if variation_id not in LAYOUT_TEMPLATES:
        logger.warning(f"[LAYOUT-GEN] Unknown variation id: {variation_id}")
        return None
    return BannerLayoutGenerator(config, copy).generate_variation(variation_id)
