"""
Layout generator tests: geometry, completeness, z-order and determinism.
"""

import math

import pytest

from banner_studio.models.banner_models import BannerConfig, BannerCopy
from banner_studio.services.layout_generator import (
    BannerLayoutGenerator,
    compute_font_size,
    generate_variations,
    get_variation,
)


def _geometry(variation):
    return [(e.x, e.y, e.width, e.height, e.font_size) for e in variation.elements]


def test_cover_banner_produces_three_full_variations(cover_config, full_copy):
    variations = generate_variations(cover_config, full_copy)

    assert [v.id for v in variations] == ["centered", "left", "right"]
    for variation in variations:
        assert len(variation.elements) == 3
        ids = [e.id for e in variation.elements]
        assert len(set(ids)) == len(ids)

    main = variations[0].elements[0]
    assert main.text == full_copy.main_text
    assert main.x == pytest.approx(120)
    assert main.y == pytest.approx(628 * 0.2)
    assert main.width == pytest.approx(960)
    assert main.height == pytest.approx(157)


def test_missing_sub_text_yields_two_elements(cover_config, short_copy):
    for variation in generate_variations(cover_config, short_copy):
        assert len(variation.elements) == 2
        assert [e.z_index for e in variation.elements] == [1, 3]


def test_empty_sub_text_is_treated_as_missing(cover_config):
    copy = BannerCopy(main_text="Headline", sub_text="", cta_text="Go")
    for variation in generate_variations(cover_config, copy):
        assert len(variation.elements) == 2


def test_cta_paints_above_sub_above_main(cover_config, full_copy):
    for variation in generate_variations(cover_config, full_copy):
        main, sub, cta = variation.elements
        assert cta.z_index > sub.z_index > main.z_index


def test_geometry_is_deterministic_across_calls(cover_config, full_copy):
    first = generate_variations(cover_config, full_copy)
    second = generate_variations(cover_config, full_copy)

    for a, b in zip(first, second):
        assert _geometry(a) == _geometry(b)


def test_font_sizes_are_capped_on_large_banners(cover_config, full_copy):
    centered = get_variation(cover_config, full_copy, "centered")
    assert [e.font_size for e in centered.elements] == [36, 18, 24]


def test_font_sizes_scale_down_on_small_banners(full_copy):
    config = BannerConfig(width=300, height=250)
    centered = get_variation(config, full_copy, "centered")
    main, sub, cta = centered.elements
    assert main.font_size == pytest.approx(20)
    assert sub.font_size == pytest.approx(12)
    assert cta.font_size == pytest.approx(15)


def test_variation_styles(cover_config, full_copy):
    centered, left, right = generate_variations(cover_config, full_copy)

    assert centered.elements[2].background_color == "#ffff00"
    assert centered.elements[2].stroke.width == 2
    assert left.elements[0].background_color is None
    assert left.elements[0].stroke.width == 3
    assert left.elements[2].background_color == "#ff4444"
    assert all(e.text_align == "right" for e in right.elements[:2])
    assert right.elements[2].background_color == "#00aa44"
    assert right.elements[2].shadow.offset_y == 4


def test_ids_carry_field_and_variation(cover_config, full_copy):
    centered, left, right = generate_variations(cover_config, full_copy)
    assert centered.elements[0].id.startswith("main-")
    assert left.elements[1].id.startswith("sub-left-")
    assert right.elements[2].id.startswith("cta-right-")


def test_degenerate_size_is_clamped(full_copy):
    config = BannerConfig.model_construct(width=0, height=-10, background_color="#ffffff", background_image=None)
    variations = BannerLayoutGenerator(config, full_copy).generate_variations()

    for variation in variations:
        for element in variation.elements:
            for value in (element.x, element.y, element.width, element.height, element.font_size):
                assert math.isfinite(value)
            assert element.font_size > 0


def test_compute_font_size():
    assert compute_font_size(1200, 15, 36) == 36
    assert compute_font_size(150, 15, 36) == pytest.approx(10)


def test_unknown_variation_returns_none(cover_config, full_copy):
    assert get_variation(cover_config, full_copy, "diagonal") is None
