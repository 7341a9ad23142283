"""
Paper configuration: the validated record the layout engine consumes,
with YAML load/save.
"""

from .config_schema import PaperConfig

__all__ = ["PaperConfig"]
