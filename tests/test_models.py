"""
Tests for PyScholar record and query models.
"""

import pytest
from pydantic import ValidationError

from pyscholar import Scientist
from pyscholar.exceptions import InvalidRequestError
from pyscholar.exceptions import PyScholarException
from pyscholar.models import Article
from pyscholar.models import Author
from pyscholar.models import AuthorMetrics
from pyscholar.models import CoAuthor
from pyscholar.models import FetchQuantity
from pyscholar.models import ProfileCard
from pyscholar.models import Publication
from pyscholar.models import SortBy


class TestFetchQuantity:
    def test_all(self):
        quantity = FetchQuantity.all()
        assert quantity.limit is None
        assert not quantity.is_bounded
        assert str(quantity) == "all"

    def test_specific(self):
        quantity = FetchQuantity.specific(10)
        assert quantity.limit == 10
        assert quantity.is_bounded
        assert str(quantity) == "specific(10)"

    def test_zero_is_allowed(self):
        assert FetchQuantity.specific(0).limit == 0

    @pytest.mark.parametrize("value", [-1, 2.5, "10", True])
    def test_invalid(self, value):
        with pytest.raises(InvalidRequestError):
            FetchQuantity.specific(value)

    def test_from_limit(self):
        assert FetchQuantity.from_limit(None) == FetchQuantity.all()
        assert FetchQuantity.from_limit(3) == FetchQuantity.specific(3)


class TestSortBy:
    def test_values(self):
        assert SortBy.CITED.value == "cited"
        assert SortBy.PUBDATE.value == "pubdate"
        assert str(SortBy.PUBDATE) == "pubdate"

    def test_coerce(self):
        assert SortBy.coerce("cited") is SortBy.CITED
        assert SortBy.coerce(SortBy.PUBDATE) is SortBy.PUBDATE

    def test_coerce_unknown(self):
        with pytest.raises(InvalidRequestError, match="cited, pubdate"):
            SortBy.coerce("title")


class TestRecords:
    def test_publication_is_immutable(self):
        pub = Publication(id="1", author_id="A", title="T", link="https://x")
        with pytest.raises(ValidationError):
            pub.title = "Other"
        assert pub.citations == "0"
        assert pub.citation_count == 0

    def test_dict_access_and_serialization(self):
        pub = Publication(
            id="1", author_id="A", title="T", year="2001", link="https://x", citations="4"
        )
        assert pub["title"] == "T"
        assert pub.get("missing", "default") == "default"
        assert pub.to_dict() == {
            "id": "1",
            "author_id": "A",
            "title": "T",
            "year": "2001",
            "link": "https://x",
            "citations": "4",
        }

    def test_author_and_co_author_share_profile_card(self):
        card = ProfileCard(id="A", name="Jane", affiliation="Uni")
        author = Author(card=card, interests=("ML",))
        co_author = CoAuthor(card=card)

        assert author.name == co_author.name == "Jane"
        assert author.affiliation == co_author.affiliation == "Uni"
        assert author.picture_url == ""
        assert Scientist is Author

    def test_article_defaults(self):
        article = Article(title="T")
        assert article.publication == "Unknown"
        assert article.total_citations == "0"
        assert article.citation_count == 0

    def test_author_metrics_serialization(self):
        metrics = AuthorMetrics(id="A", citations=10, publications=2)
        assert metrics.to_dict() == {
            "id": "A",
            "citations": 10,
            "publications": 2,
            "reported_citations": None,
        }


class TestExceptions:
    def test_add_context_updates_message(self):
        error = PyScholarException("Boom", details="bad page")

        returned = error.add_context(entity="publications", offset=200)

        assert returned is error
        assert error.offset == 200
        assert error.entity == "publications"
        assert "Details: bad page" in str(error)
        assert "offset=200" in str(error)

    def test_context_defaults(self):
        error = InvalidRequestError("Invalid author ID", field="author_id", value="")
        assert error.offset is None
        assert error.entity is None
        assert "Field: author_id" in str(error)
