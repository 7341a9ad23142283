"""
Pattern generators for lined, graph, dot, and blank paper.

Each generator takes a PatternLayout (the shared preamble), the stroke
Appearance, and its own parameter record, and returns the ordered list
of primitives for the page. Generators are pure: identical inputs give
identical primitive sequences.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

import numpy as np

from .constants import (
    ACCENT_COLOR,
    ACCENT_INSET_PX,
    ACCENT_THRESHOLD_PX,
    DEFAULT_LINE_SPACING,
    DOT_RADIUS_FACTOR,
    GUIDE_DASH_PATTERN,
    GUIDE_OPACITY,
    GUIDE_WIDTH_FACTOR,
    MAJOR_LINE_FACTOR,
    MAJOR_LINE_INTERVAL,
)
from .layout_engine import Appearance, PatternLayout, steps
from .primitives import Circle, Line, Primitive, Rect


class PaperType(Enum):
    """Closed set of paper patterns."""
    LINED = "lined"
    GRAPH = "graph"
    DOT = "dot"
    BLANK = "blank"

    @classmethod
    def parse(cls, value: "str | PaperType") -> PaperType:
        """Parse a paper type name. Unknown names fall back to LINED."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.LINED


# =============================================================================
# PATTERN PARAMETERS
# =============================================================================


@dataclass(frozen=True)
class LinedParams:
    """Ruled lines. Spacing is in the page's unit (inches or mm)."""
    paper_type: ClassVar[PaperType] = PaperType.LINED
    spacing: float


@dataclass(frozen=True)
class GridParams:
    """Graph paper. Spacing is in the page's unit (inches or mm)."""
    paper_type: ClassVar[PaperType] = PaperType.GRAPH
    spacing: float


@dataclass(frozen=True)
class DotParams:
    """Dot lattice. Density is a level in dots per inch (2-5)."""
    paper_type: ClassVar[PaperType] = PaperType.DOT
    density: int


@dataclass(frozen=True)
class BlankParams:
    """Blank page with an optional dashed margin guide."""
    paper_type: ClassVar[PaperType] = PaperType.BLANK
    show_guide: bool = True


PatternParams = LinedParams | GridParams | DotParams | BlankParams


# =============================================================================
# GENERATORS
# =============================================================================


def generate_lined(
    layout: PatternLayout,
    appearance: Appearance,
    params: LinedParams,
) -> list[Primitive]:
    """
    Horizontal rules across the drawable width.

    The first rule sits one spacing below the top margin; rules continue
    while they stay on or above the bottom margin. A left margin wider
    than 50 px adds a red notebook rule 10 px inside the margin boundary.
    Non-positive spacing produces an empty page.
    """
    area = layout.area
    spacing = layout.spacing_px(params.spacing)
    if not spacing > 0:
        return []
    primitives: list[Primitive] = []

    for y in steps(area.top + spacing, area.bottom, spacing):
        primitives.append(Line(
            x1=area.left, y1=y, x2=area.right, y2=y,
            color=appearance.color, width=appearance.thickness,
        ))

    margin_left = layout.margins_px.left
    if margin_left > ACCENT_THRESHOLD_PX:
        x = margin_left - ACCENT_INSET_PX
        primitives.append(Line(
            x1=x, y1=area.top, x2=x, y2=area.bottom,
            color=ACCENT_COLOR, width=appearance.thickness,
        ))

    return primitives


def _grid_width(index: int, thickness: float) -> float:
    """Stroke width for the index-th rule of a grid pass."""
    if index % MAJOR_LINE_INTERVAL == 0:
        return thickness * MAJOR_LINE_FACTOR
    return thickness


def generate_grid(
    layout: PatternLayout,
    appearance: Appearance,
    params: GridParams,
) -> list[Primitive]:
    """
    Vertical then horizontal rules, both starting flush with the margins.

    Every 5th rule of each pass (index 0, 5, 10, ...) is 1.5x thicker.
    """
    area = layout.area
    spacing = layout.spacing_px(params.spacing)
    primitives: list[Primitive] = []

    for index, x in enumerate(steps(area.left, area.right, spacing)):
        primitives.append(Line(
            x1=x, y1=area.top, x2=x, y2=area.bottom,
            color=appearance.color,
            width=_grid_width(index, appearance.thickness),
        ))

    for index, y in enumerate(steps(area.top, area.bottom, spacing)):
        primitives.append(Line(
            x1=area.left, y1=y, x2=area.right, y2=y,
            color=appearance.color,
            width=_grid_width(index, appearance.thickness),
        ))

    return primitives


def generate_dot(
    layout: PatternLayout,
    appearance: Appearance,
    params: DotParams,
) -> list[Primitive]:
    """
    Dots on a square lattice anchored at the top-left drawable corner.

    Lattice points on the boundary are included. Dots are emitted row by
    row, left to right.
    """
    area = layout.area
    spacing = layout.units.dot_spacing_px(params.density)
    radius = appearance.thickness * DOT_RADIUS_FACTOR

    xs = np.fromiter(steps(area.left, area.right, spacing), dtype=float)
    ys = np.fromiter(steps(area.top, area.bottom, spacing), dtype=float)
    grid_x, grid_y = np.meshgrid(xs, ys)

    return [
        Circle(cx=float(cx), cy=float(cy), r=radius, fill_color=appearance.color)
        for cx, cy in zip(grid_x.ravel(), grid_y.ravel())
    ]


def generate_blank(
    layout: PatternLayout,
    appearance: Appearance,
    params: BlankParams,
) -> list[Primitive]:
    """Faint dashed outline of the drawable area when any margin is set."""
    if not params.show_guide or not layout.margins.any_positive:
        return []

    m = layout.margins_px
    return [Rect(
        x=m.left,
        y=m.top,
        w=layout.canvas_width - m.left - m.right,
        h=layout.canvas_height - m.top - m.bottom,
        stroke_color=appearance.color,
        stroke_width=appearance.thickness * GUIDE_WIDTH_FACTOR,
        dash_pattern=GUIDE_DASH_PATTERN,
        opacity=GUIDE_OPACITY,
    )]


_GENERATORS = {
    PaperType.LINED: generate_lined,
    PaperType.GRAPH: generate_grid,
    PaperType.DOT: generate_dot,
    PaperType.BLANK: generate_blank,
}


def generate_pattern(
    layout: PatternLayout,
    appearance: Appearance,
    params: PatternParams,
) -> list[Primitive]:
    """
    Emit the primitives for a pattern.

    Parameters that are not one of the known pattern records render as
    lined paper with the page unit's `wide` preset. Any spacing carried
    on such an object is ignored, since its meaning is unknown.

    Args:
        layout: Resolved page geometry
        appearance: Stroke color and thickness
        params: Pattern parameter record

    Returns:
        Ordered list of primitives in pixel space
    """
    generator = _GENERATORS.get(getattr(params, "paper_type", None))
    if generator is None:
        fallback = LinedParams(spacing=layout.units.preset_spacing(DEFAULT_LINE_SPACING))
        return generate_lined(layout, appearance, fallback)
    return generator(layout, appearance, params)
