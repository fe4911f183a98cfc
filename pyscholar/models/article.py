"""Article detail model."""

from pyscholar.core.utils import citation_value

from .base import ScholarRecord


class Article(ScholarRecord):
    """Extended metadata from an article detail page."""

    id: str = ""
    link: str = ""
    title: str
    authors: str = ""
    publication_date: str = ""
    publication: str = "Unknown"
    description: str = ""
    total_citations: str = "0"

    @property
    def citation_count(self) -> int:
        return citation_value(self.total_citations)
