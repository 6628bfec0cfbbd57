"""
Banner Preview Renderer
=======================

Renders a banner config and its text elements as an HTML snippet with
absolutely positioned, inline-styled boxes. Used for variation
thumbnails and editor previews; nothing is rasterised here.
"""

import html
import logging
from typing import List

from ..models.banner_models import BannerConfig, TextElement

logger = logging.getLogger(__name__)


# Scale used for layout variation thumbnails
THUMBNAIL_SCALE = 0.3

# Keeps text layers above the background overlay
Z_INDEX_OFFSET = 10

JUSTIFY_FOR_ALIGN = {
    "left": "flex-start",
    "center": "center",
    "right": "flex-end",
}


def _px(value: float, scale: float) -> str:
    return f"{round(value * scale, 2):g}px"


class PreviewRenderer:
    """Builds preview HTML for banners."""

    def __init__(self, scale: float = 1.0):
        self.scale = scale

    def render(self, config: BannerConfig, elements: List[TextElement]) -> str:
        """
        Render the banner as HTML.

        Args:
            config: Banner size and background
            elements: Text elements, painted in z-index order

        Returns:
            HTML string with a single root container
        """
        ordered = sorted(elements, key=lambda e: e.z_index)
        elements_html = "".join(self._render_element(e) for e in ordered)

        overlay = ""
        if config.background_image:
            overlay = '<div style="position: absolute; inset: 0; background: rgba(0, 0, 0, 0.2);"></div>'

        return (
            f'<div class="banner-preview" style="{self._container_style(config)}">'
            f"{overlay}{elements_html}</div>"
        )

    def _container_style(self, config: BannerConfig) -> str:
        styles = [
            "position: relative",
            "overflow: hidden",
            f"width: {_px(config.width, self.scale)}",
            f"height: {_px(config.height, self.scale)}",
            f"background-color: {config.background_color}",
        ]
        if config.background_image:
            styles.extend([
                f"background-image: url('{config.background_image}')",
                "background-size: cover",
                "background-position: center",
                "background-repeat: no-repeat",
            ])
        return html.escape("; ".join(styles), quote=True)

    def _render_element(self, element: TextElement) -> str:
        style = self._element_style(element)
        text = html.escape(element.text)
        return f'<div data-element-id="{html.escape(element.id, quote=True)}" style="{style}">{text}</div>'

    def _element_style(self, element: TextElement) -> str:
        """Compute inline CSS for one text element."""
        s = self.scale
        align = element.text_align

        styles = [
            "position: absolute",
            f"left: {_px(element.x, s)}",
            f"top: {_px(element.y, s)}",
            f"width: {_px(element.width, s)}",
            f"height: {_px(element.height, s)}",
            "box-sizing: border-box",
            "display: flex",
            "align-items: center",
            f"justify-content: {JUSTIFY_FOR_ALIGN.get(align, 'center')}",
            f"text-align: {align}",
            f"font-size: {_px(element.font_size, s)}",
            f"font-family: {element.font_family}",
            f"font-weight: {element.font_weight}",
            f"color: {element.color}",
            f"z-index: {element.z_index + Z_INDEX_OFFSET}",
        ]

        if element.background_color:
            styles.append(f"background-color: {element.background_color}")

        if element.border_radius:
            styles.append(f"border-radius: {_px(element.border_radius, s)}")

        if element.padding:
            p = element.padding
            styles.append(
                f"padding: {_px(p.top, s)} {_px(p.right, s)} {_px(p.bottom, s)} {_px(p.left, s)}"
            )

        if element.shadow:
            sh = element.shadow
            styles.append(
                f"text-shadow: {_px(sh.offset_x, s)} {_px(sh.offset_y, s)} {_px(sh.blur, s)} {sh.color}"
            )

        if element.stroke:
            styles.append(f"-webkit-text-stroke: {_px(element.stroke.width, s)} {element.stroke.color}")

        return html.escape("; ".join(styles), quote=True)


def render_banner_html(config: BannerConfig, elements: List[TextElement], scale: float = 1.0) -> str:
    """Convenience function to render preview HTML at a given scale."""
    return PreviewRenderer(scale=scale).render(config, elements)
