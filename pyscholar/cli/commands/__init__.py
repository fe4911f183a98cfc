"""Individual PyScholar CLI commands."""
