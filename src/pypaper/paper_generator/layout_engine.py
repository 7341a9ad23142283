"""
Shared layout preamble for every paper pattern.

This module provides:
- Margins and Appearance records
- PatternLayout, which resolves page size, orientation, and margins into
  a pixel canvas and drawable area, and converts spacing to pixels
- steps(), the bounded stepping loop used by the pattern generators
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .constants import DPI
from .dimensions import Orientation, PageDimensions, PageSize, resolve_dimensions
from .units import UnitSystem, unit_system_for
from .view_area import ViewArea


@dataclass(frozen=True)
class Margins:
    """Page margins. Values are inches unless produced by to_px()."""

    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    @property
    def any_positive(self) -> bool:
        return self.top > 0 or self.bottom > 0 or self.left > 0 or self.right > 0

    def to_px(self) -> "Margins":
        """Return the same margins in device pixels."""
        return Margins(
            top=self.top * DPI,
            bottom=self.bottom * DPI,
            left=self.left * DPI,
            right=self.right * DPI,
        )


@dataclass(frozen=True)
class Appearance:
    """
    Stroke styling shared by all patterns.

    Attributes:
        color: Stroke/fill color as a hex string
        thickness: Base stroke width in device pixels
    """

    color: str = "#0000ff"
    thickness: float = 1.0


@dataclass(frozen=True)
class PatternLayout:
    """
    Resolved geometry that every pattern generator starts from.

    Attributes:
        page_size: Page standard
        orientation: Page orientation
        dimensions: Physical page size in inches
        margins: Margins in inches
        units: Spacing strategy for the page size
    """

    page_size: PageSize
    orientation: Orientation
    dimensions: PageDimensions
    margins: Margins
    units: UnitSystem

    @classmethod
    def prepare(
        cls,
        page_size: PageSize,
        orientation: Orientation,
        margins: Margins,
    ) -> PatternLayout:
        """
        Resolve page geometry for a configuration.

        Args:
            page_size: Page standard
            orientation: Portrait or landscape
            margins: Margins in inches

        Returns:
            PatternLayout ready for a pattern generator
        """
        return cls(
            page_size=page_size,
            orientation=orientation,
            dimensions=resolve_dimensions(page_size, orientation),
            margins=margins,
            units=unit_system_for(page_size),
        )

    @property
    def canvas_width(self) -> float:
        return self.dimensions.width_px

    @property
    def canvas_height(self) -> float:
        return self.dimensions.height_px

    @property
    def margins_px(self) -> Margins:
        return self.margins.to_px()

    @property
    def area(self) -> ViewArea:
        """Drawable rectangle in pixels."""
        m = self.margins_px
        return ViewArea(
            left=m.left,
            top=m.top,
            right=self.canvas_width - m.right,
            bottom=self.canvas_height - m.bottom,
        )

    def spacing_px(self, value: float) -> float:
        """Convert a spacing value authored in the page's unit to pixels."""
        return self.units.to_px(value)


def steps(start: float, stop: float, step: float) -> Iterator[float]:
    """
    Yield start, start + step, ... while the value is <= stop.

    Values accumulate by repeated addition. A non-positive (or NaN) step
    yields nothing.
    """
    if not step > 0:
        return
    current = start
    while current <= stop:
        yield current
        current += step
