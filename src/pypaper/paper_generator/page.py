"""
Print output support.

This module provides the physical page description a print consumer
needs (CSS @page rule, PDF page size) and PaperPad, which collects
generated pages into multi-page SVG or PDF output.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from reportlab.graphics import renderPDF
from reportlab.pdfgen import canvas
from svglib.svglib import svg2rlg

from .constants import A4_HEIGHT_MM, A4_WIDTH_MM, LETTER_HEIGHT_IN, LETTER_WIDTH_IN, POINTS_PER_INCH
from .dimensions import Orientation, PageDimensions, PageSize, resolve_dimensions

if TYPE_CHECKING:
    from .drawing import Drawing


# Portrait page sizes in their native CSS units
_CSS_PAGE_SIZES = {
    PageSize.LETTER: f"{LETTER_WIDTH_IN:g}in {LETTER_HEIGHT_IN:g}in",
    PageSize.A4: f"{A4_WIDTH_MM:g}mm {A4_HEIGHT_MM:g}mm",
}


@dataclass(frozen=True)
class PrintPage:
    """
    Physical page setup for hard-copy output.

    Uses the same resolved dimensions as the Drawing so that the printed
    scale matches the preview.
    """

    page_size: PageSize
    orientation: Orientation

    @classmethod
    def for_drawing(cls, drawing: "Drawing") -> PrintPage:
        return cls(page_size=drawing.page_size, orientation=drawing.orientation)

    @property
    def dimensions(self) -> PageDimensions:
        return resolve_dimensions(self.page_size, self.orientation)

    @property
    def size_points(self) -> tuple[float, float]:
        """Page size as (width, height) in PDF points."""
        dims = self.dimensions
        return (dims.width * POINTS_PER_INCH, dims.height * POINTS_PER_INCH)

    def css_rule(self) -> str:
        """Print stylesheet that fixes the page size and removes margins."""
        return (
            "@media print {\n"
            "    @page {\n"
            f"        size: {_CSS_PAGE_SIZES[self.page_size]} {self.orientation.value};\n"
            "        margin: 0;\n"
            "    }\n"
            "}"
        )


def svg_to_reportlab(svg_content: str):
    """
    Convert SVG markup to a ReportLab drawing.

    Raises:
        ValueError: If svglib cannot parse the markup
    """
    # svglib reads from a file path
    with tempfile.NamedTemporaryFile(mode='w', suffix='.svg',
                                     encoding='utf-8', delete=False) as tmp:
        tmp.write(svg_content)
        tmp_path = tmp.name

    try:
        rl_drawing = svg2rlg(tmp_path)
    finally:
        os.unlink(tmp_path)

    if rl_drawing is None:
        raise ValueError("Failed to parse SVG content")
    return rl_drawing


@dataclass
class PaperPad:
    """
    A stack of generated pages exported together.

    Pages may mix sizes and orientations; each PDF page takes the
    physical size of the drawing placed on it.
    """

    pages: list["Drawing"] = field(default_factory=list)

    def add_page(self, drawing: "Drawing") -> None:
        """Add a page to the pad."""
        self.pages.append(drawing)

    def generate_svgs(self) -> list[str]:
        """
        Generate SVG for each page.

        Returns:
            List of SVG strings, one per page
        """
        return [page.to_svg(background=True) for page in self.pages]

    def export_svg_files(self, base_path: str) -> list[str]:
        """
        Export each page to a separate SVG file.

        Args:
            base_path: Base file path (without extension)

        Returns:
            List of created file paths
        """
        paths = []

        for i, svg in enumerate(self.generate_svgs()):
            if len(self.pages) == 1:
                path = f"{base_path}.svg"
            else:
                path = f"{base_path}_page{i + 1}.svg"

            with open(path, "w", encoding="utf-8") as f:
                f.write(svg)

            paths.append(path)

        return paths

    def export_pdf(self, output_path: str) -> None:
        """
        Export all pages to a single multi-page PDF.

        Args:
            output_path: Output PDF file path
        """
        if not self.pages:
            raise ValueError("No pages to export")

        c = canvas.Canvas(str(output_path),
                          pagesize=PrintPage.for_drawing(self.pages[0]).size_points)

        for i, page in enumerate(self.pages):
            if i > 0:
                c.showPage()

            page_width, page_height = PrintPage.for_drawing(page).size_points
            c.setPageSize((page_width, page_height))

            rl_drawing = svg_to_reportlab(page.to_svg(background=True))

            # Scale pixel canvas to the physical page
            scale_x = page_width / rl_drawing.width
            scale_y = page_height / rl_drawing.height
            scale = min(scale_x, scale_y)

            rl_drawing.width *= scale
            rl_drawing.height *= scale
            rl_drawing.scale(scale, scale)

            renderPDF.draw(rl_drawing, c, 0, 0)

        c.save()
