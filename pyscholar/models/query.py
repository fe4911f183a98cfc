"""Query parameter types: how many publications to fetch and how to order them."""

from enum import Enum

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError

from pyscholar.exceptions import InvalidRequestError

from .base import ScholarRecord


class SortBy(str, Enum):
    """Sorting criteria for publications.

    The value doubles as the remote ``sortby`` query parameter.
    """

    CITED = "cited"
    PUBDATE = "pubdate"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value) -> "SortBy":
        """Accept a SortBy or its string value."""
        try:
            return cls(value)
        except ValueError as e:
            choices = ", ".join(member.value for member in cls)
            raise InvalidRequestError(
                f"sort_by should be one of: {choices}", field="sort_by", value=str(value)
            ) from e


class FetchQuantity(ScholarRecord):
    """Maximum number of publications to fetch.

    Either unbounded (``FetchQuantity.all()``) or bounded to ``n >= 0``
    (``FetchQuantity.specific(n)``).
    """

    limit: int | None = Field(default=None, ge=0)

    @classmethod
    def all(cls) -> "FetchQuantity":
        return cls()

    @classmethod
    def specific(cls, quantity: int) -> "FetchQuantity":
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidRequestError(
                "Fetch quantity must be an integer",
                field="fetch_quantity",
                value=str(quantity),
            )
        try:
            return cls(limit=quantity)
        except PydanticValidationError as e:
            raise InvalidRequestError(
                "Fetch quantity must be non-negative",
                field="fetch_quantity",
                value=str(quantity),
            ) from e

    @classmethod
    def from_limit(cls, limit: int | None) -> "FetchQuantity":
        """Build from an optional limit, ``None`` meaning unbounded."""
        if limit is None:
            return cls.all()
        return cls.specific(limit)

    @property
    def is_bounded(self) -> bool:
        return self.limit is not None

    def __str__(self) -> str:
        if self.limit is None:
            return "all"
        return f"specific({self.limit})"
