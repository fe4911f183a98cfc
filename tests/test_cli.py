"""
Tests for PyScholar CLI
"""

import json

import pytest
from scholar_pages import ARTICLE_LINK
from scholar_pages import ARTICLE_PAGE
from scholar_pages import author_pages
from scholar_pages import profile_page
from typer.testing import CliRunner

from pyscholar.cli import app
from pyscholar.cli import utils
from pyscholar.exceptions import TransportError

runner = CliRunner()


@pytest.fixture
def cli_fetcher(make_fetcher, monkeypatch):
    """Point every CLI command at a fetcher backed by canned pages."""

    def _install(**kwargs):
        fetcher, pages = make_fetcher(**kwargs)
        monkeypatch.setattr(utils, "get_fetcher", lambda: fetcher)
        return pages

    return _install


def test_cli_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "CLI interface for scholar profile pages" in result.stdout


def test_publications_json(cli_fetcher):
    cli_fetcher(pages=author_pages("A", 150))

    result = runner.invoke(app, ["publications", "A"])

    assert result.exit_code == 0
    records = json.loads(result.stdout)
    assert len(records) == 150
    assert {"id", "author_id", "title", "year", "link", "citations"} <= set(records[0])


def test_publications_max_and_sort(cli_fetcher):
    pages = cli_fetcher(pages=author_pages("A", 150))

    result = runner.invoke(
        app, ["publications", "A", "--max", "10", "--sort-by", "pubdate"]
    )

    assert result.exit_code == 0
    records = json.loads(result.stdout)
    assert len(records) == 10
    years = [int(record["year"]) for record in records]
    assert years == sorted(years, reverse=True)
    assert pages.publication_offsets == [0]


def test_publications_json_path(cli_fetcher, tmp_path):
    cli_fetcher(pages=author_pages("A", 3))
    output = tmp_path / "pubs.json"

    result = runner.invoke(app, ["publications", "A", "--json-path", str(output)])

    assert result.exit_code == 0
    assert len(json.loads(output.read_text(encoding="utf-8"))) == 3


def test_publications_table(cli_fetcher):
    cli_fetcher(pages=author_pages("A", 3))

    result = runner.invoke(app, ["publications", "A", "--table"])

    assert result.exit_code == 0
    assert "Paper p1" in result.stdout


def test_transport_error_exits_non_zero(cli_fetcher):
    cli_fetcher(
        pages=author_pages("A", 150),
        errors={100: TransportError("Server error", status_code=503)},
    )

    result = runner.invoke(app, ["publications", "A"])

    assert result.exit_code == 1
    assert "Network Error" in result.output
    assert "offset=100" in result.output


def test_invalid_author_id_exits_non_zero(cli_fetcher):
    pages = cli_fetcher()

    result = runner.invoke(app, ["publications", "not valid"])

    assert result.exit_code == 1
    assert "Invalid Request" in result.output
    assert pages.calls == []


def test_negative_max_is_rejected(cli_fetcher):
    cli_fetcher()

    result = runner.invoke(app, ["publications", "A", "--max", "-1"])

    assert result.exit_code != 0


def test_metrics(cli_fetcher):
    # 0 + 37 + 74 citations, matching the summary
    cli_fetcher(pages=author_pages("A", 3), author_page=profile_page(cited_by="111"))

    result = runner.invoke(app, ["metrics", "A", "--cross-validate"])

    assert result.exit_code == 0
    record = json.loads(result.stdout)
    assert record["publications"] == 3
    assert record["citations"] == record["reported_citations"] == 111


def test_citation_metrics(cli_fetcher):
    cli_fetcher()

    result = runner.invoke(app, ["citation-metrics", "A"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["h_index"] == 45


def test_coauthors(cli_fetcher):
    cli_fetcher()

    result = runner.invoke(app, ["coauthors", "A"])

    assert result.exit_code == 0
    records = json.loads(result.stdout)
    assert [record["card"]["id"] for record in records] == ["AAA111", "BBB-222"]


def test_profile_table(cli_fetcher):
    cli_fetcher()

    result = runner.invoke(app, ["profile", "A", "--table"])

    assert result.exit_code == 0
    assert "Jane" in result.stdout


def test_article(cli_fetcher):
    cli_fetcher(articles={ARTICLE_LINK: ARTICLE_PAGE})

    result = runner.invoke(app, ["article", ARTICLE_LINK])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["title"] == "Deep Things"


def test_article_relative_link(cli_fetcher):
    cli_fetcher()

    result = runner.invoke(app, ["article", "/citations?view_op=view_citation"])

    assert result.exit_code == 1
