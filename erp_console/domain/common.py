"""
Shared wire shapes

Every entity is a plain record mirroring what the backend returns. Models
accept unknown fields so a newer backend does not break the console.
"""
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class WireModel(BaseModel):
    """Base for every backend entity"""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Page(BaseModel, Generic[T]):
    """
    Paginated list response: {items, total, page, per_page, total_pages}
    """

    items: List[T] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    per_page: int = 20
    total_pages: int = 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


class MessageResponse(WireModel):
    message: Optional[str] = None
    status: Optional[str] = None


class CountResponse(WireModel):
    count: int = 0
