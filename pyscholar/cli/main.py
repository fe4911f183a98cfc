"""
Main CLI application for PyScholar.

This module contains the main typer app and global configuration.
"""

from typing import Annotated

import typer

from pyscholar import config

from . import utils
from .commands.profile import create_profile_commands
from .commands.publications import create_publications_command

# Create the main typer app
app = typer.Typer(
    name="pyscholar",
    help="CLI interface for scholar profile pages",
    no_args_is_help=True,
)


# Global options
@app.callback()
def main(
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Enable debug output including request URLs and cache activity",
        ),
    ] = False,
):
    """
    PyScholar CLI - Fetch publications, metrics and co-authors of a profile.
    """
    utils.set_global_state(debug)

    if debug:
        from pyscholar.logger import setup_cli_logging

        logger = setup_cli_logging(debug=True)
        logger.debug(f"Base URL: {config.base_url}")
        logger.debug("Debug mode enabled - request URLs will be displayed")


# Register all commands
create_publications_command(app)
create_profile_commands(app)
