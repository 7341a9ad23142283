"""
Drawing assembly and export.

Wraps generated primitives into a sized Drawing and renders it as SVG or
PDF. PaperDrawing is the entry point used by the CLI and other callers.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .constants import BACKGROUND_COLOR
from .dimensions import Orientation, PageDimensions, PageSize
from .layout_engine import Appearance, Margins, PatternLayout
from .page import PaperPad
from .patterns import DotParams, GridParams, LinedParams, PatternParams, generate_pattern
from .primitives import Primitive, svg_number

if TYPE_CHECKING:
    from ..config import PaperConfig

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


@dataclass(frozen=True)
class Drawing:
    """
    A finished page: primitives in pixel space plus canvas metadata.

    Attributes:
        width: Canvas width (px)
        height: Canvas height (px)
        primitives: Ordered primitives
        page_size: Page standard the drawing was built for
        orientation: Page orientation
        dimensions: Physical page size (inches)
    """
    width: float
    height: float
    primitives: tuple[Primitive, ...]
    page_size: PageSize
    orientation: Orientation
    dimensions: PageDimensions

    @property
    def size(self) -> tuple[float, float]:
        """Canvas size as (width, height) in pixels."""
        return (self.width, self.height)

    @property
    def viewbox(self) -> tuple[float, float, float, float]:
        return (0, 0, self.width, self.height)

    @property
    def is_landscape(self) -> bool:
        return self.orientation == Orientation.LANDSCAPE

    def primitive_counts(self) -> dict[str, int]:
        """Number of primitives per type name, e.g. {"Line": 28}."""
        return dict(Counter(type(p).__name__ for p in self.primitives))

    def to_svg(self, background: bool = False) -> str:
        """
        Render the drawing as an SVG document.

        Args:
            background: Add a white page-sized rect behind the pattern

        Returns:
            SVG document as string
        """
        width = svg_number(self.width)
        height = svg_number(self.height)
        svg_parts = [
            f'<svg xmlns="{SVG_NAMESPACE}" width="{width}" height="{height}" '
            f'viewBox="0 0 {width} {height}">'
        ]
        if background:
            svg_parts.append(
                f'<rect x="0" y="0" width="{width}" height="{height}" '
                f'fill="{BACKGROUND_COLOR}"/>'
            )
        svg_parts.extend(p.to_svg() for p in self.primitives)
        svg_parts.append("</svg>")
        return "\n".join(svg_parts)


def assemble_drawing(layout: PatternLayout, primitives: list[Primitive]) -> Drawing:
    """Wrap primitives with the canvas size of their layout."""
    return Drawing(
        width=layout.canvas_width,
        height=layout.canvas_height,
        primitives=tuple(primitives),
        page_size=layout.page_size,
        orientation=layout.orientation,
        dimensions=layout.dimensions,
    )


def generate_drawing(
    page_size: PageSize,
    orientation: Orientation,
    margins: Margins,
    appearance: Appearance,
    params: PatternParams,
) -> Drawing:
    """
    Build a Drawing from a complete configuration.

    Args:
        page_size: Page standard
        orientation: Portrait or landscape
        margins: Margins in inches
        appearance: Stroke color and base thickness
        params: Pattern parameter record

    Returns:
        A new Drawing
    """
    layout = PatternLayout.prepare(page_size, orientation, margins)
    primitives = generate_pattern(layout, appearance, params)
    return assemble_drawing(layout, primitives)


class PaperDrawing:
    """
    Generates a printable paper page from a PaperConfig.

    Usage:
        paper = PaperDrawing(PaperConfig(paper_type="graph"))
        paper.generate()
        paper.export_pdf("graph.pdf")
    """

    def __init__(self, config: "PaperConfig", debug: bool = False):
        self.config = config
        self.debug = debug
        self._drawing: Drawing | None = None
        self._svg_content = ""

    @property
    def drawing(self) -> Drawing:
        """The most recently generated Drawing, generating one if needed."""
        if self._drawing is None:
            self.generate()
        return self._drawing

    def build(self) -> Drawing:
        """Generate a fresh Drawing for the current configuration."""
        config = self.config
        drawing = generate_drawing(
            page_size=config.page_size,
            orientation=config.orientation,
            margins=config.margins,
            appearance=config.appearance,
            params=config.pattern_params(),
        )
        if self.debug:
            self._print_summary(drawing)
        return drawing

    def generate(self) -> str:
        """Generate the page and return it as an SVG document."""
        self._drawing = self.build()
        self._svg_content = self._drawing.to_svg(background=True)
        return self._svg_content

    def export_svg(self, filepath: str) -> None:
        """Export the page as SVG file."""
        if not self._svg_content:
            self.generate()

        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(self._svg_content)
        print(f"Exported SVG: {filepath}")

    def export_pdf(self, filepath: str, copies: int = 1) -> None:
        """
        Export the page as PDF sized to the physical paper.

        Args:
            filepath: Output PDF path
            copies: Number of identical pages in the PDF
        """
        pad = PaperPad()
        for _ in range(copies):
            pad.add_page(self.drawing)
        pad.export_pdf(filepath)
        print(f"Exported PDF: {filepath}")

    def _print_summary(self, drawing: Drawing) -> None:
        layout = PatternLayout.prepare(
            self.config.page_size, self.config.orientation, self.config.margins
        )
        area = layout.area
        print(f"Paper: {self.config.paper_type.value} "
              f"({drawing.page_size.value}, {drawing.orientation.value})")
        print(f"  Canvas: {drawing.width:.1f} x {drawing.height:.1f} px")
        print(f"  Drawable area: {area}")
        spacing_px = self._spacing_px(layout)
        if spacing_px is None:
            print(f"  Spacing: {self.config.spacing_label()}")
        else:
            print(f"  Spacing: {self.config.spacing_label()} ({spacing_px:.2f} px)")
        print(f"  Primitives: {drawing.primitive_counts()}")

    def _spacing_px(self, layout: PatternLayout) -> float | None:
        """Pattern pitch in pixels, or None for blank paper."""
        params = self.config.pattern_params()
        if isinstance(params, (LinedParams, GridParams)):
            return layout.spacing_px(params.spacing)
        if isinstance(params, DotParams):
            return layout.units.dot_spacing_px(params.density)
        return None
