"""Author metric models."""

from .base import ScholarRecord


class CitationMetrics(ScholarRecord):
    """Citation metrics from the profile summary table.

    The ``*_recent`` fields hold the second column of the table (the
    rolling recent window shown on the profile page).
    """

    id: str
    cited_by: int
    h_index: int
    i10_index: int
    cited_by_recent: int = 0
    h_index_recent: int = 0
    i10_index_recent: int = 0


class AuthorMetrics(ScholarRecord):
    """Totals derived from a full publication fetch."""

    id: str
    citations: int
    publications: int
    # lifetime total reported by the profile summary, when cross-validated
    reported_citations: int | None = None
