"""Publication record model."""

from pydantic import Field

from pyscholar.core.utils import citation_value
from pyscholar.core.utils import year_value

from .base import ScholarRecord


class Publication(ScholarRecord):
    """One row of an author's publication table.

    ``year`` and ``citations`` keep the text shown on the page; use
    :attr:`citation_count` and :attr:`year_number` for numeric comparison.
    """

    id: str
    author_id: str
    title: str
    year: str = ""
    link: str
    citations: str = Field(default="0")

    @property
    def citation_count(self) -> int:
        return citation_value(self.citations)

    @property
    def year_number(self) -> int:
        return year_value(self.year)
