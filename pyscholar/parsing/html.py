"""Parse scholar profile and article pages into PyScholar records.

Every method is a pure function of the raw page text it receives.
"""

from urllib.parse import urljoin

from bs4 import BeautifulSoup

from pyscholar.core.config import config
from pyscholar.core.utils import extract_author_id
from pyscholar.core.utils import extract_publication_id
from pyscholar.core.utils import only_numbers
from pyscholar.exceptions import NotFoundError
from pyscholar.exceptions import ParseError
from pyscholar.logger import get_logger
from pyscholar.models import Article
from pyscholar.models import Author
from pyscholar.models import CitationMetrics
from pyscholar.models import CoAuthor
from pyscholar.models import ProfileCard
from pyscholar.models import Publication

logger = get_logger()

# Labels on the article detail page, in the order they usually appear
_AUTHOR_LABELS = ("authors", "inventors")
_DATE_LABELS = ("publication date",)
_VENUE_LABELS = ("journal", "conference", "book", "source", "publisher")


def _text(element) -> str:
    return element.get_text(" ", strip=True) if element is not None else ""


class ScholarHTMLParser:
    """Parser for profile, publication-table and article detail pages.

    Parameters
    ----------
    base_url : str, optional
        Used to absolutize relative links. Defaults to ``config.base_url``.
    """

    def __init__(self, base_url: str | None = None):
        self.base_url = base_url or config.base_url

    def _soup(self, html: str) -> BeautifulSoup:
        if html is None:
            raise ParseError("Empty page", page="unknown")
        return BeautifulSoup(html, "html.parser")

    def _absolute(self, href: str) -> str:
        if not href:
            return ""
        return urljoin(self.base_url + "/", href)

    def parse_publications(
        self, html: str, author_id: str, require_table: bool = True
    ) -> list[Publication]:
        """Parse the publication table rows of one profile page.

        Rows without a title link are skipped. A row whose link carries no
        identity token falls back to the link itself as identity.

        Parameters
        ----------
        require_table : bool, optional
            Treat a page without any publication table as a layout change.
            When False such a page simply has no rows.

        Raises
        ------
        ParseError
            If ``require_table`` is set and the page has no publication
            table at all.
        """
        soup = self._soup(html)
        rows = soup.select(".gsc_a_tr")
        if not rows and require_table and soup.select_one("#gsc_a_b") is None:
            raise ParseError("Publication table not found", page="publications")

        publications = []
        for row in rows:
            title_element = row.select_one(".gsc_a_at")
            if title_element is None:
                continue
            href = title_element.get("href", "")
            link = self._absolute(href)
            citations = _text(row.select_one(".gsc_a_c a"))
            publications.append(
                Publication(
                    id=extract_publication_id(href) or link,
                    author_id=author_id,
                    title=_text(title_element),
                    year=_text(row.select_one(".gsc_a_y span")),
                    link=link,
                    citations=citations or "0",
                )
            )

        logger.debug(f"Parsed {len(publications)} publication rows")
        return publications

    def parse_citation_metrics(self, html: str, author_id: str) -> CitationMetrics:
        """Parse the citation summary table of a profile page.

        Raises
        ------
        NotFoundError
            If the summary table does not have the citation, h-index and
            i10-index cells.
        """
        soup = self._soup(html)
        cells = [
            only_numbers(_text(cell))
            for cell in soup.select("#gsc_rsb_st td.gsc_rsb_std")
        ]
        if len(cells) < 5:
            raise NotFoundError(
                "Citation summary cells missing from profile page",
                resource=author_id,
            )

        def cell(index):
            if index < len(cells) and cells[index]:
                return int(cells[index])
            return 0

        return CitationMetrics(
            id=author_id,
            cited_by=cell(0),
            cited_by_recent=cell(1),
            h_index=cell(2),
            h_index_recent=cell(3),
            i10_index=cell(4),
            i10_index_recent=cell(5),
        )

    def parse_author_details(self, html: str, author_id: str) -> Author:
        """Parse name, affiliation, picture and interests of the profile owner."""
        soup = self._soup(html)
        name_element = soup.select_one("#gsc_prf_in")
        if name_element is None:
            raise ParseError("Profile name not found", page="profile")

        picture = soup.select_one("#gsc_prf_pua img")
        card = ProfileCard(
            id=author_id,
            name=_text(name_element),
            affiliation=_text(soup.select_one(".gsc_prf_il")),
            picture_url=self._absolute(picture.get("src", "")) if picture else "",
        )
        return Author(
            card=card,
            interests=tuple(_text(a) for a in soup.select("#gsc_prf_int a")),
            verified_email=_text(soup.select_one("#gsc_prf_ivh")),
        )

    def parse_co_authors(self, html: str) -> list[CoAuthor]:
        """Parse the co-author sidebar of a profile page."""
        soup = self._soup(html)
        co_authors = []
        for element in soup.select(".gsc_rsb_aa"):
            name_element = element.select_one(".gsc_rsb_a_desc a") or element.select_one(
                "a"
            )
            if name_element is None:
                continue
            co_author_id = extract_author_id(name_element.get("href", ""))
            if not co_author_id:
                continue
            img = element.select_one("img")
            picture = ""
            if img is not None:
                picture = img.get("data-src") or img.get("src") or ""
            co_authors.append(
                CoAuthor(
                    card=ProfileCard(
                        id=co_author_id,
                        name=_text(name_element),
                        affiliation=_text(element.select_one(".gsc_rsb_a_ext")),
                        picture_url=self._absolute(picture),
                    )
                )
            )
        return co_authors

    def parse_article(self, html: str, link: str = "") -> Article:
        """Parse an article detail page.

        Fields are located by their label; pages without labels fall back
        to positional lookup (authors, date, venue).
        """
        soup = self._soup(html)
        title_element = soup.select_one("#gsc_oci_title")
        if title_element is None:
            raise ParseError("Article title not found", page="article")

        labelled = {}
        positional = []
        for field in soup.select(".gs_scl"):
            value = _text(field.select_one(".gsc_oci_value"))
            label = _text(field.select_one(".gsc_oci_field")).lower()
            positional.append(value)
            if label and label not in labelled:
                labelled[label] = value

        def lookup(labels, index, default=""):
            for label in labels:
                if label in labelled:
                    return labelled[label]
            if not labelled and index < len(positional):
                return positional[index]
            return default

        cited = soup.select_one(".gsc_oci_value a[href*='cites']")
        total = only_numbers(_text(cited))

        return Article(
            id=extract_publication_id(link),
            link=link,
            title=_text(title_element),
            authors=lookup(_AUTHOR_LABELS, 0),
            publication_date=lookup(_DATE_LABELS, 1),
            publication=lookup(_VENUE_LABELS, 2, default="Unknown") or "Unknown",
            description=_text(soup.select_one("#gsc_oci_descr")),
            total_citations=total or "0",
        )
