"""HTML page parsing for PyScholar."""

from .html import ScholarHTMLParser

__all__ = ["ScholarHTMLParser"]
