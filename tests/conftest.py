import pytest
from scholar_pages import BASE_URL
from scholar_pages import FakePageFetcher

from pyscholar.core.cache import CacheService
from pyscholar.fetcher import ScholarFetcher
from pyscholar.parsing import ScholarHTMLParser


@pytest.fixture
def parser():
    return ScholarHTMLParser(base_url=BASE_URL)


@pytest.fixture
def make_fetcher(parser):
    """Build a ScholarFetcher around a FakePageFetcher."""

    def _make(**kwargs):
        page_fetcher = FakePageFetcher(**kwargs)
        fetcher = ScholarFetcher(
            page_fetcher=page_fetcher, parser=parser, cache=CacheService()
        )
        return fetcher, page_fetcher

    return _make
