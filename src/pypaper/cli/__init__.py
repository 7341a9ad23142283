"""
Command-line tools for generating paper pages and managing
configuration files.
"""

from .helper_cli import cli

__all__ = ["cli"]
