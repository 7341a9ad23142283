"""
Page dimension resolution.

Maps a named page size and orientation to a physical width/height in
inches.
"""

from dataclasses import dataclass
from enum import Enum

from .constants import (
    A4_HEIGHT_MM,
    A4_WIDTH_MM,
    DPI,
    LETTER_HEIGHT_IN,
    LETTER_WIDTH_IN,
    MM_PER_INCH,
)


class PageSize(Enum):
    """Supported physical page standards."""
    LETTER = "letter"
    A4 = "a4"


class Orientation(Enum):
    """Page orientation. Landscape swaps width and height."""
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@dataclass(frozen=True)
class PageDimensions:
    """
    Physical page size after orientation is applied.

    Attributes:
        width: Page width (inches)
        height: Page height (inches)
    """
    width: float
    height: float

    @property
    def width_px(self) -> float:
        return self.width * DPI

    @property
    def height_px(self) -> float:
        return self.height * DPI

    @property
    def size_px(self) -> tuple[float, float]:
        """Canvas size as (width, height) in device pixels."""
        return (self.width_px, self.height_px)


# Portrait sizes in inches. A4 is derived from its millimeter definition.
_PORTRAIT_SIZES = {
    PageSize.LETTER: (LETTER_WIDTH_IN, LETTER_HEIGHT_IN),
    PageSize.A4: (A4_WIDTH_MM / MM_PER_INCH, A4_HEIGHT_MM / MM_PER_INCH),
}


def resolve_dimensions(page_size: PageSize, orientation: Orientation) -> PageDimensions:
    """
    Resolve a page size and orientation to physical dimensions.

    Args:
        page_size: Page standard
        orientation: Portrait or landscape

    Returns:
        PageDimensions in inches
    """
    width, height = _PORTRAIT_SIZES[page_size]
    if orientation == Orientation.LANDSCAPE:
        width, height = height, width
    return PageDimensions(width=width, height=height)
