"""
Query descriptors for the paged event listing.

A ``QueryDescriptor`` is the sanitized form of the client's pagination,
sort and filter parameters. Only the sanitizer in
``src.services.event_query`` should construct one from raw input; the
repository trusts every field it carries.
"""

import datetime as dt
import math
from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortOrder(BaseModel):
    """Single sort key: an allow-listed entity attribute and a direction."""

    field: str
    direction: SortDirection = SortDirection.ASC

    model_config = ConfigDict(frozen=True)


class QueryDescriptor(BaseModel):
    """
    Safe, bounded description of one page of the event listing.

    Attributes:
        page: Zero-based page index
        size: Items per page (1..100)
        sort_by: Public sort field name, always a member of the allow-list
        sort_attribute: Entity attribute ``sort_by`` maps to
        direction: Direction applied to both the sort field and the id tie-break
        after_date: Optional inclusive lower bound on ``event_date``
    """

    page: int = Field(0, ge=0)
    size: int = Field(10, ge=1, le=100)
    sort_by: str = "id"
    sort_attribute: str = "id"
    direction: SortDirection = SortDirection.ASC
    after_date: Optional[dt.date] = None

    model_config = ConfigDict(frozen=True)

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def orders(self) -> Tuple[SortOrder, SortOrder]:
        """Composite ordering: requested field first, then id in the same direction."""
        return (
            SortOrder(field=self.sort_attribute, direction=self.direction),
            SortOrder(field="id", direction=self.direction),
        )


class PageResult(BaseModel):
    """One page of store entities plus totals over the full (filtered) result set."""

    content: List[Any] = Field(default_factory=list)
    page: int = Field(..., ge=0)
    size: int = Field(..., ge=1)
    total_items: int = Field(..., ge=0)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.size) if self.total_items else 0
