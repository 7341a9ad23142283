"""
Configuration schema for paper generation.

PaperConfig is the single record the layout engine is driven by. It can
be built in code, from CLI options, or loaded from YAML, and it is the
boundary where user input is validated before reaching the engine.
"""

import dataclasses
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..paper_generator.constants import (
    DEFAULT_DOT_DENSITY,
    DEFAULT_GRID_SIZE_IN,
    DEFAULT_GRID_SIZE_MM,
    DEFAULT_LINE_COLOR,
    DEFAULT_LINE_SPACING,
    DEFAULT_LINE_THICKNESS,
    DEFAULT_MARGINS,
    DOT_DENSITY_NAMES,
    LINE_SPACING_PRESETS,
    LINE_THICKNESS_RANGE,
)
from ..paper_generator.dimensions import Orientation, PageSize, resolve_dimensions
from ..paper_generator.layout_engine import Appearance, Margins
from ..paper_generator.patterns import (
    BlankParams,
    DotParams,
    GridParams,
    LinedParams,
    PaperType,
    PatternParams,
)
from ..paper_generator.units import METRIC, UnitSystem, unit_system_for

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Slack for range checks on values that went through unit conversion
_RANGE_TOLERANCE = 1e-9

CONFIG_VERSION = "1.0"


def _parse_enum(enum_cls, value, label: str):
    """Convert a string from YAML/CLI into a closed enum."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"Unknown {label} '{value}' (expected one of: {choices})") from None


def _parse_spacing(value: str | float) -> str | float:
    """Keep preset names as strings, turn numeric strings into floats."""
    if isinstance(value, str):
        name = value.strip().lower()
        if name in LINE_SPACING_PRESETS:
            return name
        try:
            return float(name)
        except ValueError:
            return name
    return float(value)


def _in_range(value: float, bounds: tuple[float, float]) -> bool:
    low, high = bounds
    return low - _RANGE_TOLERANCE <= value <= high + _RANGE_TOLERANCE


@dataclass
class PaperConfig:
    """
    Complete configuration for one paper page.

    Attributes:
        paper_type: Pattern kind. Unknown names fall back to lined.
        page_size: "letter" or "a4"
        orientation: "portrait" or "landscape"
        line_spacing: Lined preset name (wide, college, narrow) or a value
                      in the page's unit (inches on Letter, mm on A4)
        grid_size: Graph spacing in the page's unit. Defaults to 1/4 inch
                   on Letter and 5 mm on A4.
        dot_density: Dots per inch level (2-5)
        margins: Margins in inches, independent of the page's unit
        line_color: Stroke color as #rgb or #rrggbb
        line_thickness: Base stroke width in device pixels
        show_margin_guide: Draw the dashed margin outline on blank paper
    """

    paper_type: PaperType = PaperType.LINED
    page_size: PageSize = PageSize.LETTER
    orientation: Orientation = Orientation.PORTRAIT
    line_spacing: str | float = DEFAULT_LINE_SPACING
    grid_size: float | None = None
    dot_density: int = DEFAULT_DOT_DENSITY
    margins: Margins = field(default_factory=lambda: Margins(**DEFAULT_MARGINS))
    line_color: str = DEFAULT_LINE_COLOR
    line_thickness: float = DEFAULT_LINE_THICKNESS
    show_margin_guide: bool = True

    def __post_init__(self):
        # Convert strings and dicts from YAML/CLI into typed values
        self.paper_type = PaperType.parse(self.paper_type)
        self.page_size = _parse_enum(PageSize, self.page_size, "page size")
        self.orientation = _parse_enum(Orientation, self.orientation, "orientation")
        self.line_spacing = _parse_spacing(self.line_spacing)
        if self.grid_size is None:
            self.grid_size = DEFAULT_GRID_SIZE_MM if self.units is METRIC else DEFAULT_GRID_SIZE_IN
        self.grid_size = float(self.grid_size)
        self.dot_density = int(self.dot_density)
        if isinstance(self.margins, dict):
            # Sides left out of a partial block keep their defaults
            given = {k: float(v) for k, v in self.margins.items()}
            self.margins = Margins(**{**DEFAULT_MARGINS, **given})
        elif not isinstance(self.margins, Margins):
            raise ValueError(
                f"margins must be a mapping of top/bottom/left/right, got {self.margins!r}"
            )
        self.line_color = str(self.line_color)
        self.line_thickness = float(self.line_thickness)

    @classmethod
    def default(cls) -> "PaperConfig":
        """The configuration a fresh session starts with."""
        return cls()

    @classmethod
    def reset(cls) -> "PaperConfig":
        """Discard every setting and return the default configuration."""
        return cls.default()

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    @property
    def units(self) -> UnitSystem:
        """Spacing strategy for the configured page size."""
        return unit_system_for(self.page_size)

    @property
    def appearance(self) -> Appearance:
        return Appearance(color=self.line_color, thickness=self.line_thickness)

    def line_spacing_value(self) -> float:
        """Lined spacing in the page's unit, resolving preset names."""
        if isinstance(self.line_spacing, str):
            return self.units.preset_spacing(self.line_spacing)
        return self.line_spacing

    def pattern_params(self) -> PatternParams:
        """Parameter record for the configured paper type."""
        if self.paper_type == PaperType.GRAPH:
            return GridParams(spacing=self.grid_size)
        if self.paper_type == PaperType.DOT:
            return DotParams(density=self.dot_density)
        if self.paper_type == PaperType.BLANK:
            return BlankParams(show_guide=self.show_margin_guide)
        return LinedParams(spacing=self.line_spacing_value())

    def spacing_label(self) -> str:
        """Human-readable spacing for the active pattern."""
        units = self.units
        if self.paper_type == PaperType.GRAPH:
            return units.format(self.grid_size)
        if self.paper_type == PaperType.DOT:
            name = DOT_DENSITY_NAMES.get(self.dot_density, "custom")
            return f"{self.dot_density} dots/inch ({name})"
        if self.paper_type == PaperType.BLANK:
            return "none"
        label = units.format(self.line_spacing_value())
        if isinstance(self.line_spacing, str):
            return f"{self.line_spacing} ({label})"
        return label

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self) -> list[str]:
        """
        Check the configuration against the engine's input ranges.

        Returns:
            List of error messages, empty when the configuration is valid
        """
        errors = []
        units = self.units

        if self.paper_type == PaperType.LINED:
            if isinstance(self.line_spacing, str):
                if self.line_spacing not in LINE_SPACING_PRESETS:
                    presets = ", ".join(LINE_SPACING_PRESETS)
                    errors.append(
                        f"Unknown line spacing preset '{self.line_spacing}' "
                        f"(expected one of: {presets})"
                    )
            elif not _in_range(self.line_spacing, units.line_spacing_range):
                low, high = units.line_spacing_range
                errors.append(
                    f"Line spacing {self.line_spacing}{units.unit} outside "
                    f"{low}-{high}{units.unit}"
                )

        if self.paper_type == PaperType.GRAPH and not _in_range(self.grid_size, units.grid_size_range):
            low, high = units.grid_size_range
            errors.append(
                f"Grid size {self.grid_size}{units.unit} outside {low}-{high}{units.unit}"
            )

        if self.paper_type == PaperType.DOT and self.dot_density not in DOT_DENSITY_NAMES:
            levels = ", ".join(str(level) for level in DOT_DENSITY_NAMES)
            errors.append(f"Dot density {self.dot_density} not one of: {levels}")

        m = self.margins
        for side in ("top", "bottom", "left", "right"):
            if getattr(m, side) < 0:
                errors.append(f"Margin '{side}' must not be negative")

        dims = resolve_dimensions(self.page_size, self.orientation)
        if m.left + m.right >= dims.width:
            errors.append("Left and right margins leave no drawable width")
        if m.top + m.bottom >= dims.height:
            errors.append("Top and bottom margins leave no drawable height")

        if not _HEX_COLOR.match(self.line_color):
            errors.append(f"Line color '{self.line_color}' is not a #rgb or #rrggbb hex color")

        if not _in_range(self.line_thickness, LINE_THICKNESS_RANGE):
            low, high = LINE_THICKNESS_RANGE
            errors.append(f"Line thickness {self.line_thickness}px outside {low}-{high}px")

        return errors

    def checked(self) -> "PaperConfig":
        """
        Return self after validation.

        Raises:
            ValueError: If any check fails
        """
        errors = self.validate()
        if errors:
            raise ValueError("Invalid paper configuration:\n  " + "\n  ".join(errors))
        return self

    # -------------------------------------------------------------------------
    # Page size switching
    # -------------------------------------------------------------------------

    def with_page_size(self, page_size: PageSize | str) -> "PaperConfig":
        """
        Return a copy switched to another page size.

        Numeric lined and grid spacing is converted into the new page's
        unit with display rounding (0.1 mm one way, 1/32 inch the other),
        so toggling back and forth settles on stable values. Preset names
        and dot density carry over unchanged.
        """
        page_size = _parse_enum(PageSize, page_size, "page size")
        old_units = self.units
        new_units = unit_system_for(page_size)

        line_spacing = self.line_spacing
        if not isinstance(line_spacing, str):
            line_spacing = new_units.convert_from(line_spacing, old_units)

        return dataclasses.replace(
            self,
            page_size=page_size,
            line_spacing=line_spacing,
            grid_size=new_units.convert_from(self.grid_size, old_units),
        )

    # -------------------------------------------------------------------------
    # YAML
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PaperConfig":
        """Build a configuration from a plain dictionary (YAML document)."""
        data = dict(data or {})
        data.pop("version", None)
        return cls(**data)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "PaperConfig":
        """Load a paper configuration from a YAML file."""
        with open(yaml_path) as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data)

    def to_yaml(self, yaml_path: str | Path) -> None:
        """Save the paper configuration to a YAML file."""
        data = self._to_dict()
        with open(yaml_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    def _to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary suitable for YAML serialization."""
        return {
            "version": CONFIG_VERSION,
            "paper_type": self.paper_type.value,
            "page_size": self.page_size.value,
            "orientation": self.orientation.value,
            "line_spacing": self.line_spacing,
            "grid_size": self.grid_size,
            "dot_density": self.dot_density,
            "margins": {
                "top": self.margins.top,
                "bottom": self.margins.bottom,
                "left": self.margins.left,
                "right": self.margins.right,
            },
            "line_color": self.line_color,
            "line_thickness": self.line_thickness,
            "show_margin_guide": self.show_margin_guide,
        }
