#!/usr/bin/env python3
"""
Tests for the paper pattern generators.

Tests cover:
- Shared layout preamble (canvas, margins, drawable area)
- Lined, graph, dot, and blank generation
- Degenerate spacing and unknown pattern fallback
- Determinism of repeated generation
"""

from types import SimpleNamespace

import numpy as np
import pytest

from pypaper.paper_generator.constants import ACCENT_COLOR
from pypaper.paper_generator.dimensions import Orientation, PageSize
from pypaper.paper_generator.layout_engine import Appearance, Margins, PatternLayout, steps
from pypaper.paper_generator.patterns import (
    BlankParams,
    DotParams,
    GridParams,
    LinedParams,
    generate_blank,
    generate_dot,
    generate_grid,
    generate_lined,
    generate_pattern,
)
from pypaper.paper_generator.primitives import Circle, Line, Rect

NOTEBOOK_MARGINS = Margins(top=0.5, bottom=0.5, left=0.75, right=0.5)
NO_MARGINS = Margins()
APPEARANCE = Appearance(color="#0000ff", thickness=1.0)


def letter_layout(margins: Margins = NOTEBOOK_MARGINS) -> PatternLayout:
    return PatternLayout.prepare(PageSize.LETTER, Orientation.PORTRAIT, margins)


def a4_layout(margins: Margins = NOTEBOOK_MARGINS) -> PatternLayout:
    return PatternLayout.prepare(PageSize.A4, Orientation.PORTRAIT, margins)


# =============================================================================
# PREAMBLE TESTS
# =============================================================================


class TestPatternLayout:
    """Test the shared setup every generator starts from."""

    def test_canvas_size(self):
        layout = letter_layout()
        assert (layout.canvas_width, layout.canvas_height) == (816, 1056)

    def test_drawable_area(self):
        area = letter_layout().area
        assert area.bounds == (72, 48, 816 - 48, 1056 - 48)

    def test_margins_px(self):
        m = letter_layout().margins_px
        assert (m.top, m.bottom, m.left, m.right) == (48, 48, 72, 48)

    def test_spacing_uses_page_unit(self):
        assert letter_layout().spacing_px(0.25) == 24
        assert a4_layout().spacing_px(25.4) == pytest.approx(96)

    def test_area_without_margins_is_whole_page(self):
        area = letter_layout(NO_MARGINS).area
        assert area.bounds == (0, 0, 816, 1056)


class TestSteps:
    """Test the bounded stepping loop."""

    def test_includes_stop(self):
        assert list(steps(0, 10, 5)) == [0, 5, 10]

    def test_stops_before_overshoot(self):
        assert list(steps(1, 10, 4)) == [1, 5, 9]

    @pytest.mark.parametrize("step", [0, -1, float("nan")])
    def test_non_positive_step_yields_nothing(self, step: float):
        assert list(steps(0, 10, step)) == []


# =============================================================================
# LINED PAPER TESTS
# =============================================================================


class TestLinedPaper:
    """Test ruled line generation."""

    def test_first_rule_offset_from_top(self):
        rules = [p for p in generate_lined(letter_layout(), APPEARANCE, LinedParams(11 / 32))
                 if p.color != ACCENT_COLOR]
        assert rules[0].y1 == (0.5 + 11 / 32) * 96

    def test_rules_evenly_spaced(self):
        rules = [p for p in generate_lined(letter_layout(), APPEARANCE, LinedParams(11 / 32))
                 if p.color != ACCENT_COLOR]
        ys = np.array([r.y1 for r in rules])
        assert np.allclose(np.diff(ys), 11 / 32 * 96)

    def test_no_rule_below_bottom_margin(self):
        rules = [p for p in generate_lined(letter_layout(), APPEARANCE, LinedParams(11 / 32))
                 if p.color != ACCENT_COLOR]
        assert len(rules) == 29
        assert max(r.y1 for r in rules) <= (11 - 0.5) * 96
        assert rules[-1].y1 + 33 > (11 - 0.5) * 96

    def test_rules_span_drawable_width(self):
        rules = generate_lined(letter_layout(), APPEARANCE, LinedParams(11 / 32))[:-1]
        assert all(r.x1 == 72 and r.x2 == 768 for r in rules)
        assert all(r.y1 == r.y2 for r in rules)

    def test_rules_use_appearance(self):
        appearance = Appearance(color="#333333", thickness=2.0)
        rules = generate_lined(letter_layout(), appearance, LinedParams(0.25))[:-1]
        assert all(r.color == "#333333" and r.width == 2.0 for r in rules)

    def test_accent_line_for_wide_left_margin(self):
        primitives = generate_lined(letter_layout(), APPEARANCE, LinedParams(11 / 32))
        accent = primitives[-1]
        assert accent == Line(x1=62, y1=48, x2=62, y2=1008, color=ACCENT_COLOR, width=1.0)

    def test_no_accent_line_for_narrow_left_margin(self):
        layout = letter_layout(Margins(top=0.5, bottom=0.5, left=0.5, right=0.5))
        primitives = generate_lined(layout, APPEARANCE, LinedParams(11 / 32))
        assert all(p.color != ACCENT_COLOR for p in primitives)

    def test_no_accent_line_at_exactly_50px(self):
        layout = letter_layout(Margins(top=0.5, bottom=0.5, left=50 / 96, right=0.5))
        assert layout.margins_px.left == 50
        primitives = generate_lined(layout, APPEARANCE, LinedParams(11 / 32))
        assert all(p.color != ACCENT_COLOR for p in primitives)

    def test_accent_line_just_above_50px(self):
        layout = letter_layout(Margins(top=0.5, bottom=0.5, left=51 / 96, right=0.5))
        accent = generate_lined(layout, APPEARANCE, LinedParams(11 / 32))[-1]
        assert accent.color == ACCENT_COLOR
        assert accent.x1 == pytest.approx(41)
        assert accent.x2 == pytest.approx(41)

    def test_a4_spacing_in_mm(self):
        rules = [p for p in generate_lined(a4_layout(), APPEARANCE, LinedParams(8.0))
                 if p.color != ACCENT_COLOR]
        ys = np.array([r.y1 for r in rules])
        assert np.allclose(np.diff(ys), 8.0 / 25.4 * 96)

    @pytest.mark.parametrize("spacing", [0, -0.25])
    def test_non_positive_spacing_is_empty(self, spacing: float):
        assert generate_lined(letter_layout(), APPEARANCE, LinedParams(spacing)) == []


# =============================================================================
# GRAPH PAPER TESTS
# =============================================================================


class TestGraphPaper:
    """Test grid generation."""

    def test_fifty_vertical_rules_major_every_fifth(self):
        # 11/64 inch = 16.5 px; 816 px wide page holds 50 rules
        primitives = generate_grid(letter_layout(NO_MARGINS), APPEARANCE, GridParams(11 / 64))
        vertical = [p for p in primitives if p.x1 == p.x2 and p.y1 != p.y2][:50]
        assert len(vertical) == 50
        for index, rule in enumerate(vertical):
            expected = 1.5 if index % 5 == 0 else 1.0
            assert rule.width == expected

    def test_first_rules_flush_with_margins(self):
        primitives = generate_grid(letter_layout(), APPEARANCE, GridParams(0.25))
        assert primitives[0].x1 == 72
        horizontal = [p for p in primitives if p.y1 == p.y2]
        assert horizontal[0].y1 == 48

    def test_rule_counts(self):
        primitives = generate_grid(letter_layout(), APPEARANCE, GridParams(0.25))
        vertical = [p for p in primitives if p.x1 == p.x2]
        horizontal = [p for p in primitives if p.y1 == p.y2]
        # (768 - 72) / 24 + 1 and (1008 - 48) / 24 + 1
        assert len(vertical) == 30
        assert len(horizontal) == 41
        assert primitives[:30] == vertical

    def test_horizontal_pass_restarts_counter(self):
        primitives = generate_grid(letter_layout(), APPEARANCE, GridParams(0.25))
        horizontal = primitives[30:]
        assert [r.width for r in horizontal[:6]] == [1.5, 1.0, 1.0, 1.0, 1.0, 1.5]

    def test_rules_span_drawable_area(self):
        primitives = generate_grid(letter_layout(), APPEARANCE, GridParams(0.25))
        vertical = primitives[:30]
        horizontal = primitives[30:]
        assert all(r.y1 == 48 and r.y2 == 1008 for r in vertical)
        assert all(r.x1 == 72 and r.x2 == 768 for r in horizontal)
        assert vertical[-1].x1 == 768
        assert horizontal[-1].y1 == 1008

    def test_a4_grid_in_mm(self):
        primitives = generate_grid(a4_layout(), APPEARANCE, GridParams(5.0))
        vertical = [p for p in primitives if p.x1 == p.x2]
        xs = np.array([r.x1 for r in vertical])
        assert np.allclose(np.diff(xs), 5.0 / 25.4 * 96)
        assert len(vertical) == 36

    def test_non_positive_spacing_is_empty(self):
        assert generate_grid(letter_layout(), APPEARANCE, GridParams(0)) == []


# =============================================================================
# DOT PAPER TESTS
# =============================================================================


class TestDotPaper:
    """Test dot lattice generation."""

    def test_letter_lattice(self):
        dots = generate_dot(letter_layout(), APPEARANCE, DotParams(2))
        # 48 px pitch: 15 columns (72..744), 21 rows (48..1008)
        assert len(dots) == 15 * 21
        assert all(isinstance(d, Circle) for d in dots)
        assert (dots[0].cx, dots[0].cy) == (72, 48)

    def test_row_major_order(self):
        dots = generate_dot(letter_layout(), APPEARANCE, DotParams(2))
        first_row = dots[:15]
        assert all(d.cy == 48 for d in first_row)
        assert [d.cx for d in first_row] == [72 + 48 * i for i in range(15)]
        assert dots[15].cx == 72
        assert dots[15].cy == 96

    def test_boundary_points_included(self):
        dots = generate_dot(letter_layout(), APPEARANCE, DotParams(2))
        assert dots[-1].cy == 1008

    def test_all_dots_inside_drawable_area(self):
        layout = a4_layout()
        dots = generate_dot(layout, APPEARANCE, DotParams(4))
        assert all(layout.area.contains(d.cx, d.cy) for d in dots)

    def test_radius_and_fill(self):
        appearance = Appearance(color="#123456", thickness=2.0)
        dots = generate_dot(letter_layout(), appearance, DotParams(3))
        assert all(d.r == 1.5 and d.fill_color == "#123456" for d in dots)

    def test_a4_level_three_uses_lookup_table(self):
        dots = generate_dot(a4_layout(), APPEARANCE, DotParams(3))
        xs = np.array([d.cx for d in dots if d.cy == dots[0].cy])
        pitch = np.diff(xs)
        assert np.allclose(pitch, (8.5 / 25.4) * 96)
        assert not np.allclose(pitch, 96 / 3)

    def test_letter_spacing_is_derived(self):
        dots = generate_dot(letter_layout(NO_MARGINS), APPEARANCE, DotParams(3))
        xs = np.array([d.cx for d in dots if d.cy == 0])
        assert np.allclose(np.diff(xs), 32)

    def test_invalid_density_is_empty(self):
        assert generate_dot(letter_layout(), APPEARANCE, DotParams(0)) == []
        assert generate_dot(a4_layout(), APPEARANCE, DotParams(9)) == []


# =============================================================================
# BLANK PAPER TESTS
# =============================================================================


class TestBlankPaper:
    """Test blank paper margin guide."""

    def test_zero_margins_produce_nothing(self):
        assert generate_blank(letter_layout(NO_MARGINS), APPEARANCE, BlankParams()) == []

    def test_margin_guide(self):
        primitives = generate_blank(letter_layout(), APPEARANCE, BlankParams())
        assert primitives == [Rect(
            x=72, y=48, w=696, h=960,
            stroke_color="#0000ff", stroke_width=0.5,
            dash_pattern="5,5", opacity=0.3,
        )]

    def test_single_margin_is_enough(self):
        primitives = generate_blank(letter_layout(Margins(bottom=0.25)), APPEARANCE, BlankParams())
        assert len(primitives) == 1
        assert primitives[0].h == 1056 - 24

    def test_guide_can_be_disabled(self):
        assert generate_blank(letter_layout(), APPEARANCE, BlankParams(show_guide=False)) == []


# =============================================================================
# DISPATCH TESTS
# =============================================================================


class TestGeneratePattern:
    """Test dispatch by pattern parameters."""

    @pytest.mark.parametrize(
        "params,generator",
        [
            (LinedParams(0.25), generate_lined),
            (GridParams(0.25), generate_grid),
            (DotParams(4), generate_dot),
            (BlankParams(), generate_blank),
        ],
    )
    def test_dispatch(self, params, generator):
        layout = letter_layout()
        assert generate_pattern(layout, APPEARANCE, params) == generator(layout, APPEARANCE, params)

    def test_unknown_params_fall_back_to_lined(self):
        layout = letter_layout()
        result = generate_pattern(layout, APPEARANCE, object())
        assert result == generate_lined(layout, APPEARANCE, LinedParams(11 / 32))

    def test_fallback_ignores_foreign_spacing(self):
        layout = letter_layout()
        params = SimpleNamespace(paper_type="isometric", spacing=0.5)
        result = generate_pattern(layout, APPEARANCE, params)
        assert result == generate_lined(layout, APPEARANCE, LinedParams(11 / 32))

    def test_repeated_generation_is_identical(self):
        layout = a4_layout()
        first = generate_pattern(layout, APPEARANCE, DotParams(5))
        second = generate_pattern(layout, APPEARANCE, DotParams(5))
        assert first == second
