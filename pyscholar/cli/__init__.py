"""
CLI submodule for PyScholar command-line interface.

- main.py: Main CLI app and global options
- utils.py: Common utilities for CLI operations
- commands/: Individual command implementations
"""

from .main import app

__all__ = ["app"]
