"""
Unit conversion between inches, millimeters, and device pixels.

All physical distances reach pixel space through the single DPI factor.
Spacing values are authored in inches on Letter pages and millimeters on
A4 pages; the UnitSystem strategy for each page size owns that choice,
its rounding policy, and the dot pitch table.
"""

from .constants import (
    DOT_SPACING_MM,
    DPI,
    GRID_SIZE_RANGE_IN,
    GRID_SIZE_RANGE_MM,
    INCH_DECIMALS,
    INCH_SNAP_DENOMINATOR,
    LINE_SPACING_PRESETS,
    LINE_SPACING_RANGE_IN,
    LINE_SPACING_RANGE_MM,
    MM_PER_INCH,
    NICE_FRACTION_TOLERANCE,
    NICE_FRACTIONS,
)
from .dimensions import PageSize


# =============================================================================
# PLAIN CONVERSIONS
# =============================================================================


def inches_to_px(value: float) -> float:
    """Convert inches to device pixels."""
    return value * DPI


def mm_to_px(value: float) -> float:
    """Convert millimeters to device pixels."""
    return (value / MM_PER_INCH) * DPI


def inches_to_mm(value: float) -> float:
    """
    Convert inches to millimeters, rounded to 0.1 mm for display.

    Args:
        value: Distance in inches

    Returns:
        Distance in millimeters, one decimal place
    """
    return round(value * MM_PER_INCH, 1)


def mm_to_inches(value: float) -> float:
    """
    Convert millimeters to inches, snapped to the nearest 1/32 inch.

    Snapping keeps toggled values on common ruler marks so that
    converting back and forth does not drift.

    Args:
        value: Distance in millimeters

    Returns:
        Distance in inches on a 1/32 inch mark
    """
    snapped = round(value / MM_PER_INCH * INCH_SNAP_DENOMINATOR) / INCH_SNAP_DENOMINATOR
    return round(snapped, INCH_DECIMALS)


def format_inches(value: float) -> str:
    """
    Format an inch value for display.

    Values within 0.001 inch of a common fraction render as that fraction
    (e.g. 11/32"), everything else with three decimals.
    """
    for label, fraction in NICE_FRACTIONS.items():
        if abs(value - fraction) < NICE_FRACTION_TOLERANCE:
            return f'{label}"'
    return f'{value:.3f}"'


def format_mm(value: float) -> str:
    """Format a millimeter value for display."""
    return f"{value:.1f}mm"


# =============================================================================
# UNIT SYSTEM STRATEGY
# =============================================================================


class UnitSystem:
    """
    Spacing rules for one page standard.

    Subclasses decide which unit spacing values are authored in, how they
    reach pixels, how they are displayed, and how dot density maps to a
    lattice pitch.
    """

    unit: str = ""
    line_spacing_range: tuple[float, float] = (0.0, 0.0)
    grid_size_range: tuple[float, float] = (0.0, 0.0)

    def to_px(self, value: float) -> float:
        """Convert a spacing value in this system's unit to pixels."""
        raise NotImplementedError

    def dot_spacing_px(self, density: int) -> float:
        """Pixel pitch of the dot lattice for a density level."""
        raise NotImplementedError

    def preset_spacing(self, name: str) -> float:
        """Lined paper preset spacing in this system's unit."""
        raise NotImplementedError

    def format(self, value: float) -> str:
        """Human-readable spacing string."""
        raise NotImplementedError

    def to_inches(self, value: float) -> float:
        """Convert a spacing value in this system's unit to inches."""
        raise NotImplementedError

    def from_inches(self, value: float) -> float:
        """Convert an inch value into this system's unit."""
        raise NotImplementedError

    def convert_from(self, value: float, other: "UnitSystem") -> float:
        """
        Convert a spacing value authored in another system into this one.

        Applies the display rounding of each direction so that repeated
        toggling settles on a stable value.
        """
        if other is self or other.unit == self.unit:
            return value
        return self.from_inches(other.to_inches(value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(unit={self.unit!r})"


class ImperialUnits(UnitSystem):
    """Letter pages: spacing in inches, dot pitch is 1/density inch."""

    unit = "in"
    line_spacing_range = LINE_SPACING_RANGE_IN
    grid_size_range = GRID_SIZE_RANGE_IN

    def to_px(self, value: float) -> float:
        return inches_to_px(value)

    def dot_spacing_px(self, density: int) -> float:
        if density <= 0:
            return 0.0
        return DPI / density

    def preset_spacing(self, name: str) -> float:
        return LINE_SPACING_PRESETS[name][0]

    def format(self, value: float) -> str:
        return format_inches(value)

    def to_inches(self, value: float) -> float:
        return value

    def from_inches(self, value: float) -> float:
        return value


class MetricUnits(UnitSystem):
    """A4 pages: spacing in millimeters, dot pitch from a fixed table."""

    unit = "mm"
    line_spacing_range = LINE_SPACING_RANGE_MM
    grid_size_range = GRID_SIZE_RANGE_MM

    def to_px(self, value: float) -> float:
        return mm_to_px(value)

    def dot_spacing_px(self, density: int) -> float:
        mm_spacing = DOT_SPACING_MM.get(density)
        if mm_spacing is None:
            return 0.0
        return mm_to_px(mm_spacing)

    def preset_spacing(self, name: str) -> float:
        return LINE_SPACING_PRESETS[name][1]

    def format(self, value: float) -> str:
        return format_mm(value)

    def to_inches(self, value: float) -> float:
        return mm_to_inches(value)

    def from_inches(self, value: float) -> float:
        return inches_to_mm(value)


IMPERIAL = ImperialUnits()
METRIC = MetricUnits()

UNIT_SYSTEMS = {
    PageSize.LETTER: IMPERIAL,
    PageSize.A4: METRIC,
}


def unit_system_for(page_size: PageSize) -> UnitSystem:
    """Return the spacing strategy for a page size."""
    return UNIT_SYSTEMS[page_size]
