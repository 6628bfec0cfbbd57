"""
Preview renderer tests.
"""

from banner_studio.models.banner_models import BannerConfig, Shadow, Stroke, TextElement
from banner_studio.services.layout_generator import get_variation
from banner_studio.services.preview_renderer import PreviewRenderer, render_banner_html


def _element(**overrides):
    values = {"id": "headline", "text": "Big Sale", "x": 100, "y": 50, "width": 400, "height": 80,
              "font_size": 30, "z_index": 1}
    values.update(overrides)
    return TextElement(**values)


def test_container_uses_banner_size_and_background():
    config = BannerConfig(width=300, height=250, background_color="#123456")
    html = render_banner_html(config, [])

    assert html.startswith('<div class="banner-preview"')
    assert "width: 300px" in html
    assert "height: 250px" in html
    assert "background-color: #123456" in html


def test_scale_applies_to_geometry_and_font():
    config = BannerConfig(width=1000, height=500)
    html = PreviewRenderer(scale=0.5).render(config, [_element()])

    assert "width: 500px" in html
    assert "left: 50px" in html
    assert "top: 25px" in html
    assert "font-size: 15px" in html


def test_elements_are_painted_in_z_order():
    config = BannerConfig(width=600, height=400)
    top = _element(id="top", text="Top", z_index=5)
    bottom = _element(id="bottom", text="Bottom", z_index=2)

    html = render_banner_html(config, [top, bottom])
    assert html.index('data-element-id="bottom"') < html.index('data-element-id="top"')
    assert "z-index: 15" in html
    assert "z-index: 12" in html


def test_text_is_escaped():
    config = BannerConfig(width=600, height=400)
    html = render_banner_html(config, [_element(text="<script>alert(1)</script>")])

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_decorations_render_as_css():
    element = _element(
        background_color="#ff0000",
        border_radius=6,
        shadow=Shadow(color="#000000", offset_x=2, offset_y=3, blur=4),
        stroke=Stroke(color="#ffffff", width=2),
    )
    html = render_banner_html(BannerConfig(width=600, height=400), [element])

    assert "background-color: #ff0000" in html
    assert "border-radius: 6px" in html
    assert "text-shadow: 2px 3px 4px #000000" in html
    assert "-webkit-text-stroke: 2px #ffffff" in html


def test_background_image_adds_overlay():
    config = BannerConfig(width=600, height=400, background_image="https://example.com/bg.png")
    html = render_banner_html(config, [])

    assert "background-image: url(&#x27;https://example.com/bg.png&#x27;)" in html
    assert "rgba(0, 0, 0, 0.2)" in html


def test_variation_preview_contains_all_copy(cover_config, full_copy):
    variation = get_variation(cover_config, full_copy, "right")
    html = render_banner_html(cover_config, variation.elements, scale=0.3)

    assert full_copy.main_text in html
    assert full_copy.sub_text in html
    assert full_copy.cta_text in html
    assert "justify-content: flex-end" in html


def test_container_style_is_escaped():
    config = BannerConfig(
        width=600,
        height=400,
        background_color='red"><script>alert(1)</script><div x="',
        background_image="bg.png\" onload=\"alert(2)",
    )
    html = render_banner_html(config, [])

    assert "<script>" not in html
    assert 'onload="' not in html
    assert "background-color: red&quot;&gt;&lt;script&gt;" in html
    assert html.count("<div") == 2
