"""
Vector drawing primitives.

Every primitive is immutable and already positioned in final pixel
space. Each one renders itself as a single SVG element.
"""

from dataclasses import dataclass


def svg_number(value: float) -> str:
    """Format a coordinate for SVG output (at most 4 decimals, no trailing zeros)."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


@dataclass(frozen=True)
class Line:
    """Straight stroked segment."""
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    width: float

    def to_svg(self) -> str:
        return (f'<line x1="{svg_number(self.x1)}" y1="{svg_number(self.y1)}" '
                f'x2="{svg_number(self.x2)}" y2="{svg_number(self.y2)}" '
                f'stroke="{self.color}" stroke-width="{svg_number(self.width)}"/>')


@dataclass(frozen=True)
class Circle:
    """Filled dot."""
    cx: float
    cy: float
    r: float
    fill_color: str

    def to_svg(self) -> str:
        return (f'<circle cx="{svg_number(self.cx)}" cy="{svg_number(self.cy)}" '
                f'r="{svg_number(self.r)}" fill="{self.fill_color}"/>')


@dataclass(frozen=True)
class Rect:
    """
    Unfilled outline rectangle.

    Attributes:
        x: Left edge (px)
        y: Top edge (px)
        w: Width (px)
        h: Height (px)
        stroke_color: Outline color
        stroke_width: Outline width (px)
        dash_pattern: SVG stroke-dasharray value, empty for a solid outline
        opacity: Element opacity (0-1)
    """
    x: float
    y: float
    w: float
    h: float
    stroke_color: str
    stroke_width: float
    dash_pattern: str = ""
    opacity: float = 1.0

    def to_svg(self) -> str:
        dash = f' stroke-dasharray="{self.dash_pattern}"' if self.dash_pattern else ""
        opacity = f' opacity="{svg_number(self.opacity)}"' if self.opacity != 1.0 else ""
        return (f'<rect x="{svg_number(self.x)}" y="{svg_number(self.y)}" '
                f'width="{svg_number(self.w)}" height="{svg_number(self.h)}" '
                f'fill="none" stroke="{self.stroke_color}" '
                f'stroke-width="{svg_number(self.stroke_width)}"{dash}{opacity}/>')


Primitive = Line | Circle | Rect
