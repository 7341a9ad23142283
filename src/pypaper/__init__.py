"""
pypaper - printable paper backgrounds as vector drawings.
"""

from .config import PaperConfig
from .paper_generator import Drawing, PaperDrawing, generate_drawing

__version__ = "0.1.0"

__all__ = [
    "PaperConfig",
    "PaperDrawing",
    "Drawing",
    "generate_drawing",
    "__version__",
]
