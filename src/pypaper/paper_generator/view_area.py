"""
ViewArea class for the margin-bounded drawable rectangle of a page.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ViewArea:
    """
    Represents the drawable rectangle of a page in pixel space.

    Edges are stored as given so that pattern loops compare against the
    exact boundary values rather than a recomputed sum.

    Attributes:
        left: Left edge (px from page left)
        top: Top edge (px from page top)
        right: Right edge (px from page left)
        bottom: Bottom edge (px from page top)
    """
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        """Width of the area."""
        return self.right - self.left

    @property
    def height(self) -> float:
        """Height of the area."""
        return self.bottom - self.top

    @property
    def size(self) -> Tuple[float, float]:
        """Size as (width, height) tuple."""
        return (self.width, self.height)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Bounds as (left, top, right, bottom) tuple."""
        return (self.left, self.top, self.right, self.bottom)

    def contains(self, x: float, y: float) -> bool:
        """Check if a point lies inside the area, boundary included."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def __repr__(self) -> str:
        return (f"ViewArea(x={self.left}, y={self.top}, "
                f"w={self.width}, h={self.height})")
