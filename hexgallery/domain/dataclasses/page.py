# hexgallery/domain/dataclasses/page.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

from hexgallery.domain.dataclasses.view import groups
from hexgallery.domain.enums.visibility import Visibility

T = TypeVar("T")

_READ = groups(Visibility.api_read)


@dataclass
class Page(Generic[T]):
    """One page of a paginated query. `page` is 1-based."""
    items: List[T] = field(default_factory=list, metadata=_READ)
    page: int = field(default=1, metadata=_READ)
    page_size: int = field(default=10, metadata=_READ)
    total: int = field(default=0, metadata=_READ)
    pages: int = field(init=False, default=0, metadata=_READ)

    def __post_init__(self):
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")
        if self.total < 0:
            raise ValueError("total must be >= 0")
        self.pages = (self.total + self.page_size - 1) // self.page_size

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def __len__(self) -> int:
        return len(self.items)
