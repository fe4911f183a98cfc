"""
Tests for the HTML page parser.
"""

import pytest
from scholar_pages import ARTICLE_LINK
from scholar_pages import ARTICLE_PAGE
from scholar_pages import CO_AUTHORS
from scholar_pages import profile_page
from scholar_pages import publication_row
from scholar_pages import publications_page

from pyscholar.exceptions import NotFoundError
from pyscholar.exceptions import ParseError


class TestParsePublications:
    def test_row_fields(self, parser):
        html = publications_page(
            [publication_row("A", "xyz", title="On Things", year="2018", citations="1,234")]
        )

        [pub] = parser.parse_publications(html, "A")

        assert pub.id == "A:xyz"
        assert pub.author_id == "A"
        assert pub.title == "On Things"
        assert pub.year == "2018"
        assert pub.citations == "1,234"
        assert pub.citation_count == 1234
        assert pub.link.startswith(
            "https://scholar.google.com/citations?view_op=view_citation"
        )

    def test_missing_citations_default_to_zero(self, parser):
        html = publications_page([publication_row("A", "xyz", citations="", year="")])

        [pub] = parser.parse_publications(html, "A")

        assert pub.citations == "0"
        assert pub.year == ""
        assert pub.year_number == 0

    def test_rows_keep_page_order(self, parser):
        rows = [publication_row("A", f"p{i}") for i in range(5)]

        result = parser.parse_publications(publications_page(rows), "A")

        assert [pub.id for pub in result] == [f"A:p{i}" for i in range(5)]

    def test_row_without_title_is_skipped(self, parser):
        html = publications_page(
            ['<tr class="gsc_a_tr"><td class="gsc_a_t"></td></tr>', publication_row("A", "ok")]
        )

        result = parser.parse_publications(html, "A")

        assert [pub.id for pub in result] == ["A:ok"]

    def test_link_without_identity_token(self, parser):
        row = (
            '<tr class="gsc_a_tr"><td class="gsc_a_t">'
            '<a href="/citations?view_op=list_works" class="gsc_a_at">Odd</a></td></tr>'
        )

        [pub] = parser.parse_publications(publications_page([row]), "A")

        assert pub.id == pub.link == "https://scholar.google.com/citations?view_op=list_works"

    def test_empty_table(self, parser):
        assert parser.parse_publications(publications_page([]), "A") == []

    def test_page_without_table(self, parser):
        with pytest.raises(ParseError):
            parser.parse_publications("<html><body>unusual traffic</body></html>", "A")

    def test_page_without_table_when_not_required(self, parser):
        assert parser.parse_publications("", "A", require_table=False) == []


class TestParseCitationMetrics:
    def test_summary_cells(self, parser):
        metrics = parser.parse_citation_metrics(profile_page(cited_by="12,345"), "A")

        assert metrics.id == "A"
        assert metrics.cited_by == 12345
        assert metrics.cited_by_recent == 6789
        assert metrics.h_index == 45
        assert metrics.h_index_recent == 30
        assert metrics.i10_index == 120
        assert metrics.i10_index_recent == 80

    def test_missing_summary(self, parser):
        with pytest.raises(NotFoundError):
            parser.parse_citation_metrics(publications_page([]), "A")


class TestParseAuthorDetails:
    def test_profile_header(self, parser):
        author = parser.parse_author_details(profile_page(), "A")

        assert author.id == "A"
        assert author.name == "Jane Doe"
        assert author.affiliation == "Professor, Example University"
        assert author.picture_url == (
            "https://scholar.google.com/citations/images/avatar_scholar_128.png"
        )
        assert author.interests == ("Machine Learning", "Statistics")
        assert author.verified_email == "Verified email at example.edu"

    def test_missing_name(self, parser):
        with pytest.raises(ParseError):
            parser.parse_author_details(publications_page([]), "A")


class TestParseCoAuthors:
    def test_entries(self, parser):
        alice, bob = parser.parse_co_authors(CO_AUTHORS)

        assert alice.id == "AAA111"
        assert alice.name == "Alice Smith"
        assert alice.affiliation == "MIT"
        assert alice.picture_url == (
            "https://scholar.googleusercontent.com/citations"
            "?view_op=small_photo&user=AAA111"
        )
        assert bob.id == "BBB-222"
        assert bob.affiliation == "Stanford University"
        assert bob.picture_url == ""

    def test_no_co_authors(self, parser):
        assert parser.parse_co_authors(publications_page([])) == []


class TestParseArticle:
    def test_labelled_fields(self, parser):
        article = parser.parse_article(ARTICLE_PAGE, ARTICLE_LINK)

        assert article.id == "X:abc123"
        assert article.link == ARTICLE_LINK
        assert article.title == "Deep Things"
        assert article.authors == "A Smith, B Jones"
        assert article.publication_date == "2019/5/1"
        assert article.publication == "Nature"
        assert article.description == "We study things."
        assert article.total_citations == "321"
        assert article.citation_count == 321

    def test_other_venue_labels(self, parser):
        html = ARTICLE_PAGE.replace(">Journal<", ">Conference<")

        article = parser.parse_article(html, ARTICLE_LINK)

        assert article.publication == "Nature"

    def test_missing_optional_fields(self, parser):
        html = '<div id="gsc_oci_title">Lonely Title</div>'

        article = parser.parse_article(html)

        assert article.title == "Lonely Title"
        assert article.authors == ""
        assert article.publication == "Unknown"
        assert article.total_citations == "0"
        assert article.id == ""

    def test_unlabelled_fields_by_position(self, parser):
        html = (
            '<div id="gsc_oci_title">Positional</div>'
            '<div class="gs_scl"><div class="gsc_oci_value">C Author</div></div>'
            '<div class="gs_scl"><div class="gsc_oci_value">2001</div></div>'
            '<div class="gs_scl"><div class="gsc_oci_value">Science</div></div>'
        )

        article = parser.parse_article(html)

        assert article.authors == "C Author"
        assert article.publication_date == "2001"
        assert article.publication == "Science"

    def test_missing_title(self, parser):
        with pytest.raises(ParseError):
            parser.parse_article("<html><body></body></html>", ARTICLE_LINK)
