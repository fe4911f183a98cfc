"""Base Pydantic models for PyScholar records."""

from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict


class ScholarRecord(BaseModel):
    """Base class for all PyScholar value records.

    Records are immutable once constructed by a parse step.
    """

    model_config = ConfigDict(frozen=True)

    def __getitem__(self, key: str) -> Any:
        """Allow dict-like access for convenience."""
        return getattr(self, key, None)

    def get(self, key: str, default: Any = None) -> Any:
        """Dict-like get method."""
        return getattr(self, key, default)

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible dictionary representation."""
        return self.model_dump(mode="json")
