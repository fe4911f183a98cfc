"""
Profile-level commands for PyScholar CLI: metrics, co-authors, profile
details and article details.
"""

from typing import Annotated

import typer

from .. import utils
from ..utils import _handle_cli_exception
from ..utils import _output_results
from ..utils import _output_table

JsonPathOption = Annotated[
    str | None,
    typer.Option("--json-path", help="Save results to a JSON file"),
]
TableOption = Annotated[
    bool, typer.Option("--table", help="Display results as a table")
]
AuthorArgument = Annotated[str, typer.Argument(help="Scholar author ID")]


def _emit(results, table, json_path, columns, title):
    if table:
        _output_table(results, columns, title=title)
    else:
        _output_results(results, json_path)


def create_profile_commands(app):
    """Create and register the profile-level commands."""

    @app.command()
    def metrics(
        author_id: AuthorArgument,
        cross_validate: Annotated[
            bool,
            typer.Option(
                "--cross-validate",
                help="Also report the lifetime citation count from the profile summary",
            ),
        ] = False,
        table: TableOption = False,
        json_path: JsonPathOption = None,
    ):
        """
        Total citations and publication count over all publications.
        """
        try:
            fetcher = utils.get_fetcher()
            result = utils.run(
                fetcher.get_author_metrics(author_id, cross_validate=cross_validate)
            )
        except Exception as e:
            _handle_cli_exception(e)

        _emit(
            result,
            table,
            json_path,
            [
                ("citations", "Citations"),
                ("publications", "Publications"),
                ("reported_citations", "Reported"),
            ],
            f"Metrics of {author_id}",
        )

    @app.command("citation-metrics")
    def citation_metrics(
        author_id: AuthorArgument,
        table: TableOption = False,
        json_path: JsonPathOption = None,
    ):
        """
        Cited-by count, h-index and i10-index from the profile summary.
        """
        try:
            fetcher = utils.get_fetcher()
            result = utils.run(fetcher.fetch_citation_metrics(author_id))
        except Exception as e:
            _handle_cli_exception(e)

        _emit(
            result,
            table,
            json_path,
            [
                ("cited_by", "Cited by"),
                ("h_index", "h-index"),
                ("i10_index", "i10-index"),
            ],
            f"Citation metrics of {author_id}",
        )

    @app.command()
    def coauthors(
        author_id: AuthorArgument,
        table: TableOption = False,
        json_path: JsonPathOption = None,
    ):
        """
        Co-authors listed on a profile page.
        """
        try:
            fetcher = utils.get_fetcher()
            results = utils.run(fetcher.fetch_co_authors(author_id))
        except Exception as e:
            _handle_cli_exception(e)

        _emit(
            results,
            table,
            json_path,
            [("name", "Name"), ("affiliation", "Affiliation"), ("id", "ID")],
            f"Co-authors of {author_id}",
        )

    @app.command()
    def profile(
        author_id: AuthorArgument,
        table: TableOption = False,
        json_path: JsonPathOption = None,
    ):
        """
        Name, affiliation, picture and interests of an author.
        """
        try:
            fetcher = utils.get_fetcher()
            result = utils.run(fetcher.fetch_author_details(author_id))
        except Exception as e:
            _handle_cli_exception(e)

        _emit(
            result,
            table,
            json_path,
            [("name", "Name"), ("affiliation", "Affiliation"), ("interests", "Interests")],
            f"Profile of {author_id}",
        )

    @app.command()
    def article(
        link: Annotated[str, typer.Argument(help="Absolute link to an article page")],
        table: TableOption = False,
        json_path: JsonPathOption = None,
    ):
        """
        Details of one article.
        """
        try:
            fetcher = utils.get_fetcher()
            result = utils.run(fetcher.fetch_article(link))
        except Exception as e:
            _handle_cli_exception(e)

        _emit(
            result,
            table,
            json_path,
            [
                ("title", "Title"),
                ("authors", "Authors"),
                ("publication_date", "Date"),
                ("publication", "Venue"),
                ("total_citations", "Cited by"),
            ],
            "Article",
        )
