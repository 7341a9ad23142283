"""
Paper Generator Module

Generates printable paper backgrounds (lined, graph, dot, blank) as
vector drawings sized to a physical page.

Features:
- US Letter and A4, portrait or landscape
- Spacing authored in inches (Letter) or millimeters (A4)
- Fixed 96 px/inch canvas shared by every primitive
- SVG and PDF export

Usage:
    from pypaper.paper_generator import PaperDrawing
    from pypaper.config import PaperConfig

    paper = PaperDrawing(PaperConfig(paper_type="dot", page_size="a4"))
    paper.generate()
    paper.export_pdf("dots.pdf")
"""

from .constants import DPI, MM_PER_INCH
from .dimensions import Orientation, PageDimensions, PageSize, resolve_dimensions
from .drawing import Drawing, PaperDrawing, assemble_drawing, generate_drawing
from .layout_engine import Appearance, Margins, PatternLayout, steps
from .page import PaperPad, PrintPage
from .patterns import (
    BlankParams,
    DotParams,
    GridParams,
    LinedParams,
    PaperType,
    generate_blank,
    generate_dot,
    generate_grid,
    generate_lined,
    generate_pattern,
)
from .primitives import Circle, Line, Rect
from .units import (
    IMPERIAL,
    METRIC,
    UnitSystem,
    format_inches,
    inches_to_mm,
    inches_to_px,
    mm_to_inches,
    mm_to_px,
    unit_system_for,
)
from .view_area import ViewArea

__all__ = [
    # Main classes
    'PaperDrawing',
    'Drawing',
    'PaperPad',
    'PrintPage',
    'PatternLayout',
    'ViewArea',
    # Configuration records
    'PageSize',
    'Orientation',
    'PageDimensions',
    'PaperType',
    'Margins',
    'Appearance',
    'LinedParams',
    'GridParams',
    'DotParams',
    'BlankParams',
    # Primitives
    'Line',
    'Circle',
    'Rect',
    # Unit strategy
    'UnitSystem',
    'IMPERIAL',
    'METRIC',
    # Functions
    'resolve_dimensions',
    'generate_drawing',
    'assemble_drawing',
    'generate_pattern',
    'generate_lined',
    'generate_grid',
    'generate_dot',
    'generate_blank',
    'steps',
    'inches_to_px',
    'mm_to_px',
    'inches_to_mm',
    'mm_to_inches',
    'format_inches',
    'unit_system_for',
    # Constants
    'DPI',
    'MM_PER_INCH',
]
