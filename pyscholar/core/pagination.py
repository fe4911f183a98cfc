"""Pagination engine for an author's publication table."""

from pyscholar.core.config import PUBLICATIONS_PAGE_SIZE
from pyscholar.core.utils import validate_author_id
from pyscholar.exceptions import PyScholarException
from pyscholar.logger import get_logger
from pyscholar.models import FetchQuantity
from pyscholar.models import Publication
from pyscholar.models import SortBy

logger = get_logger()


def sort_publications(publications, sort_by=SortBy.CITED) -> list[Publication]:
    """Stable descending sort by citation count or year.

    Non-numeric or empty values sort as 0; equal keys keep their input order.
    """
    sort_by = SortBy.coerce(sort_by)
    if sort_by is SortBy.CITED:
        key = lambda pub: pub.citation_count  # noqa: E731
    else:
        key = lambda pub: pub.year_number  # noqa: E731
    return sorted(publications, key=key, reverse=True)


class Paginator:
    """Paginator for an author's publication table.

    Pages are requested one after another: the offset of the next page
    depends on the size of the previous one.

    Parameters
    ----------
    fetcher : PageFetcher
        Object providing ``fetch_publications_page(author_id, offset,
        page_size, sort_by)`` returning raw page text.
    parser : ScholarHTMLParser
        Object providing ``parse_publications(html, author_id, require_table)``.
    page_size : int, optional
        Rows requested per page.
    """

    PAGE_SIZE = PUBLICATIONS_PAGE_SIZE

    def __init__(self, fetcher, parser, page_size=None):
        self.fetcher = fetcher
        self.parser = parser
        self.page_size = page_size if page_size is not None else self.PAGE_SIZE
        if not isinstance(self.page_size, int) or self.page_size < 1:
            raise ValueError("page_size should be a positive integer")

    async def _fetch_page(self, author_id, offset, sort_by) -> list[Publication]:
        """Fetch and parse one page, tagging any failure with its offset."""
        try:
            html = await self.fetcher.fetch_publications_page(
                author_id, offset, self.page_size, sort_by
            )
            # Only the first page must show the table; past the last row the
            # site may answer with a blank page
            return self.parser.parse_publications(
                html, author_id, require_table=offset == 0
            )
        except PyScholarException as e:
            e.add_context(entity="publications", author_id=author_id, offset=offset)
            raise

    async def iter_pages(
        self,
        author_id: str,
        fetch_quantity: FetchQuantity | None = None,
        sort_by: SortBy = SortBy.CITED,
    ):
        """Yield the newly seen publications of each page, in page order.

        Publications already seen on an earlier page are dropped. Iteration
        stops once the bound is reached or a page comes back short.
        """
        author_id = validate_author_id(author_id)
        fetch_quantity = fetch_quantity or FetchQuantity.all()
        sort_by = SortBy.coerce(sort_by)
        limit = fetch_quantity.limit

        seen: set[str] = set()
        total = 0
        offset = 0

        while limit is None or total < limit:
            page = await self._fetch_page(author_id, offset, sort_by)
            logger.debug(
                f"Publications page for {author_id} at offset {offset}: "
                f"{len(page)} rows"
            )

            fresh = []
            reached_limit = False
            for publication in page:
                if publication.id in seen:
                    continue
                seen.add(publication.id)
                fresh.append(publication)
                total += 1
                if limit is not None and total >= limit:
                    reached_limit = True
                    break

            if fresh:
                yield fresh

            if reached_limit or len(page) < self.page_size:
                break
            offset += self.page_size

    async def fetch_all(
        self,
        author_id: str,
        fetch_quantity: FetchQuantity | None = None,
        sort_by: SortBy = SortBy.CITED,
    ) -> list[Publication]:
        """Fetch, deduplicate and sort an author's publications.

        Parameters
        ----------
        author_id : str
            Scholar author ID.
        fetch_quantity : FetchQuantity, optional
            Bound on the number of publications. Unbounded if None.
        sort_by : SortBy, optional
            Ordering of the result, citation count descending by default.

        Returns
        -------
        list of Publication
            At most ``fetch_quantity.limit`` publications with unique IDs.

        Raises
        ------
        PyScholarException
            Any fetch or parse failure aborts the whole operation; the
            error carries the offset of the failing page.
        """
        sort_by = SortBy.coerce(sort_by)
        publications: list[Publication] = []
        async for page in self.iter_pages(author_id, fetch_quantity, sort_by):
            publications.extend(page)
        return sort_publications(publications, sort_by)
