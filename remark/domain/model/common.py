"""Base model for all domain entities."""

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, computed_field


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of a paginated query (1-indexed)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: list[T]
    total: int
    page: int
    page_size: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        """ceil(total / page_size)."""
        return math.ceil(self.total / self.page_size) if self.page_size else 0
