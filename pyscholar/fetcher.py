"""High-level access to scholar profiles, publications and articles."""

from pyscholar.client.httpx_session import PageFetcher
from pyscholar.core.cache import CacheService
from pyscholar.core.cache import publications_cache_key
from pyscholar.core.pagination import Paginator
from pyscholar.core.utils import validate_article_link
from pyscholar.core.utils import validate_author_id
from pyscholar.exceptions import PyScholarException
from pyscholar.logger import get_logger
from pyscholar.models import Article
from pyscholar.models import Author
from pyscholar.models import AuthorMetrics
from pyscholar.models import CitationMetrics
from pyscholar.models import CoAuthor
from pyscholar.models import FetchQuantity
from pyscholar.models import Publication
from pyscholar.models import SortBy
from pyscholar.parsing import ScholarHTMLParser

logger = get_logger()


class ScholarFetcher:
    """Fetch publications, metrics, co-authors and articles.

    Every operation checks its cache space first; on a miss the pages are
    fetched and parsed, and the result is stored only if the whole
    operation succeeded. Errors are passed through unchanged.

    Parameters
    ----------
    page_fetcher : PageFetcher, optional
        Source of raw page text.
    parser : ScholarHTMLParser, optional
        Page parser.
    cache : CacheService, optional
        Entity caches. A private one is created if omitted.
    """

    def __init__(self, page_fetcher=None, parser=None, cache=None):
        self.page_fetcher = page_fetcher or PageFetcher()
        self.parser = parser or ScholarHTMLParser()
        self.cache = cache or CacheService()
        self.paginator = Paginator(self.page_fetcher, self.parser)

    async def _author_page(self, author_id: str, entity: str) -> str:
        try:
            return await self.page_fetcher.fetch_author_page(author_id)
        except PyScholarException as e:
            e.add_context(entity=entity, author_id=author_id)
            raise

    async def fetch_all_publications(
        self,
        author_id: str,
        fetch_quantity: FetchQuantity | None = None,
        sort_by: SortBy = SortBy.CITED,
    ) -> list[Publication]:
        """Fetch all (or the first N) publications of an author.

        Parameters
        ----------
        author_id : str
            Scholar author ID.
        fetch_quantity : FetchQuantity, optional
            ``FetchQuantity.all()`` (default) or ``FetchQuantity.specific(n)``.
        sort_by : SortBy, optional
            ``SortBy.CITED`` (default) or ``SortBy.PUBDATE``.

        Returns
        -------
        list of Publication
        """
        author_id = validate_author_id(author_id)
        fetch_quantity = fetch_quantity or FetchQuantity.all()
        sort_by = SortBy.coerce(sort_by)
        key = publications_cache_key(author_id, fetch_quantity, sort_by)

        cached = self.cache.publications.get(key)
        if cached is not None:
            return list(cached)

        publications = await self.paginator.fetch_all(
            author_id, fetch_quantity, sort_by
        )
        self.cache.publications.put(key, tuple(publications))
        return publications

    async def fetch_citation_metrics(self, author_id: str) -> CitationMetrics:
        """Fetch cited-by, h-index and i10-index from the profile summary."""
        author_id = validate_author_id(author_id)
        cached = self.cache.citation_metrics.get(author_id)
        if cached is not None:
            return cached

        html = await self._author_page(author_id, "citation_metrics")
        metrics = self.parser.parse_citation_metrics(html, author_id)
        self.cache.citation_metrics.put(author_id, metrics)
        return metrics

    async def fetch_co_authors(self, author_id: str) -> list[CoAuthor]:
        """Fetch the co-authors listed on a profile page."""
        author_id = validate_author_id(author_id)
        cached = self.cache.co_authors.get(author_id)
        if cached is not None:
            return list(cached)

        html = await self._author_page(author_id, "co_authors")
        co_authors = self.parser.parse_co_authors(html)
        self.cache.co_authors.put(author_id, tuple(co_authors))
        return co_authors

    async def get_author_metrics(
        self, author_id: str, cross_validate: bool = False
    ) -> AuthorMetrics:
        """Total citations and publication count over all publications.

        Parameters
        ----------
        author_id : str
            Scholar author ID.
        cross_validate : bool, optional
            Also load the profile summary and record its lifetime citation
            count in ``reported_citations``.
        """
        author_id = validate_author_id(author_id)
        key = f"{author_id}-{'validated' if cross_validate else 'derived'}"
        cached = self.cache.author_metrics.get(key)
        if cached is not None:
            return cached

        publications = await self.fetch_all_publications(
            author_id, FetchQuantity.all()
        )
        reported = None
        if cross_validate:
            summary = await self.fetch_citation_metrics(author_id)
            reported = summary.cited_by

        metrics = AuthorMetrics(
            id=author_id,
            citations=sum(pub.citation_count for pub in publications),
            publications=len(publications),
            reported_citations=reported,
        )
        if reported is not None and reported != metrics.citations:
            logger.warning(
                f"Citation total for {author_id} differs from profile summary: "
                f"{metrics.citations} from publications, {reported} reported"
            )

        self.cache.author_metrics.put(key, metrics)
        return metrics

    async def fetch_article(self, link: str) -> Article:
        """Fetch the detail page of one article."""
        link = validate_article_link(link)
        cached = self.cache.articles.get(link)
        if cached is not None:
            return cached

        try:
            html = await self.page_fetcher.fetch_html(link)
        except PyScholarException as e:
            e.add_context(entity="article")
            raise
        article = self.parser.parse_article(html, link)
        self.cache.articles.put(link, article)
        return article

    async def fetch_author_details(self, author_id: str) -> Author:
        """Fetch name, affiliation, picture and interests of an author."""
        author_id = validate_author_id(author_id)
        cached = self.cache.authors.get(author_id)
        if cached is not None:
            return cached

        html = await self._author_page(author_id, "author")
        author = self.parser.parse_author_details(html, author_id)
        self.cache.authors.put(author_id, author)
        return author
