"""
Publications command for PyScholar CLI.
"""

from typing import Annotated

import typer

from pyscholar.models import FetchQuantity
from pyscholar.models import SortBy

from .. import utils
from ..utils import _debug_print
from ..utils import _handle_cli_exception
from ..utils import _output_results
from ..utils import _output_table

PUBLICATION_COLUMNS = [
    ("title", "Title"),
    ("year", "Year"),
    ("citations", "Cited by"),
    ("id", "ID"),
]


def create_publications_command(app):
    """Create and register the publications command."""

    @app.command()
    def publications(
        author_id: Annotated[str, typer.Argument(help="Scholar author ID")],
        max_count: Annotated[
            int | None,
            typer.Option(
                "--max",
                "-m",
                min=0,
                help="Maximum number of publications to fetch (default: all)",
            ),
        ] = None,
        sort_by: Annotated[
            SortBy,
            typer.Option(
                "--sort-by",
                "-s",
                case_sensitive=False,
                help="Sort by citation count ('cited') or year ('pubdate')",
            ),
        ] = SortBy.CITED,
        table: Annotated[
            bool, typer.Option("--table", help="Display results as a table")
        ] = False,
        json_path: Annotated[
            str | None,
            typer.Option("--json-path", help="Save results to a JSON file"),
        ] = None,
    ):
        """
        Fetch the publication list of an author.

        Outputs a JSON array of publication records unless --table is given.
        """
        try:
            fetch_quantity = FetchQuantity.from_limit(max_count)
            _debug_print(
                f"Fetching publications for {author_id} "
                f"(quantity={fetch_quantity}, sort_by={sort_by.value})"
            )
            fetcher = utils.get_fetcher()
            results = utils.run(
                fetcher.fetch_all_publications(author_id, fetch_quantity, sort_by)
            )
            _debug_print(f"Retrieved {len(results)} publications", "SUCCESS")
        except Exception as e:
            _handle_cli_exception(e)

        if table:
            _output_table(results, PUBLICATION_COLUMNS, title=f"Publications of {author_id}")
        else:
            _output_results(results, json_path)
