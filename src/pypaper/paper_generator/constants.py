"""
Paper generator constants.

Resolution, page sizes, pattern styling, and spacing tables for
printable paper backgrounds.
"""

# =============================================================================
# RESOLUTION AND UNITS
# =============================================================================

# Device-independent pixels per inch (CSS reference pixel)
DPI = 96

MM_PER_INCH = 25.4

# PDF points per inch
POINTS_PER_INCH = 72


# =============================================================================
# PAGE SIZES
# =============================================================================

# US Letter is authored in inches
LETTER_WIDTH_IN = 8.5
LETTER_HEIGHT_IN = 11.0

# A4 is authored in millimeters; inches are derived from these
A4_WIDTH_MM = 210.0
A4_HEIGHT_MM = 297.0


# =============================================================================
# PATTERN STYLING
# =============================================================================

# Notebook-style vertical margin rule on lined paper
ACCENT_COLOR = "#ff0000"
ACCENT_THRESHOLD_PX = 50   # Left margin must exceed this to draw the rule
ACCENT_INSET_PX = 10       # Rule sits this far left of the margin boundary

# Graph paper: every 5th rule is heavier
MAJOR_LINE_INTERVAL = 5
MAJOR_LINE_FACTOR = 1.5

# Dot paper: radius relative to stroke thickness
DOT_RADIUS_FACTOR = 0.75

# Blank paper margin guide
GUIDE_DASH_PATTERN = "5,5"
GUIDE_OPACITY = 0.3
GUIDE_WIDTH_FACTOR = 0.5

BACKGROUND_COLOR = "white"


# =============================================================================
# SPACING TABLES
# =============================================================================

# Lined paper presets: (inches, millimeters)
LINE_SPACING_PRESETS = {
    "wide": (11 / 32, 8.7),
    "college": (9 / 32, 7.1),
    "narrow": (1 / 4, 6.4),
}

# Continuous ranges: (min, max) in the unit of the page size
LINE_SPACING_RANGE_IN = (0.25, 0.5)
LINE_SPACING_RANGE_MM = (6.0, 12.7)
GRID_SIZE_RANGE_IN = (0.125, 1.0)
GRID_SIZE_RANGE_MM = (3.0, 25.0)

# Dot densities in dots per inch, with display names
DOT_DENSITY_NAMES = {
    2: "sparse",
    3: "medium",
    4: "dense",
    5: "fine",
}

# Metric dot pitch per density level. Rounded metric values, not exact
# conversions of 1/density inch.
DOT_SPACING_MM = {
    2: 12.7,
    3: 8.5,
    4: 6.4,
    5: 5.0,
}

# Nice fractional-inch values shown as fractions instead of decimals
NICE_FRACTIONS = {
    "1/4": 1 / 4,
    "9/32": 9 / 32,
    "5/16": 5 / 16,
    "11/32": 11 / 32,
    "3/8": 3 / 8,
    "13/32": 13 / 32,
    "7/16": 7 / 16,
    "15/32": 15 / 32,
    "1/2": 1 / 2,
}
NICE_FRACTION_TOLERANCE = 0.001

# Rounding applied when toggling spacing between unit systems
MM_ROUNDING_STEP = 0.1
INCH_SNAP_DENOMINATOR = 32
INCH_DECIMALS = 4

LINE_THICKNESS_RANGE = (0.5, 3.0)


# =============================================================================
# DEFAULT CONFIGURATION
# =============================================================================

DEFAULT_PAPER_TYPE = "lined"
DEFAULT_PAGE_SIZE = "letter"
DEFAULT_ORIENTATION = "portrait"
DEFAULT_LINE_SPACING = "wide"
DEFAULT_GRID_SIZE_IN = 0.25
DEFAULT_GRID_SIZE_MM = 5.0
DEFAULT_DOT_DENSITY = 2
DEFAULT_MARGINS = {"top": 0.5, "bottom": 0.5, "left": 0.75, "right": 0.5}
DEFAULT_LINE_COLOR = "#0000ff"
DEFAULT_LINE_THICKNESS = 1.0
