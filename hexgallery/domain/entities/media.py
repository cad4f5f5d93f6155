# hexgallery/domain/entities/media.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from hexgallery.domain.dataclasses.view import groups
from hexgallery.domain.enums.visibility import Visibility

_READ = groups(Visibility.api_read)


@dataclass
class Media:
    """
    A content asset managed outside of galleries. The gallery core only
    reads it; associations hold a non-owning reference to it.
    """

    # Persistence (optional)
    id: Optional[UUID] = field(default=None, metadata=_READ)
    date_created: Optional[datetime] = field(default=None, metadata=_READ)
    last_updated: Optional[datetime] = field(default=None, metadata=_READ)
    data_origin: Optional[str] = None

    # Descriptive
    name: str = field(default="", metadata=_READ)
    description: Optional[str] = field(default=None, metadata=_READ)
    enabled: bool = field(default=False, metadata=_READ)
    context: Optional[str] = field(default=None, metadata=_READ)
    copyright: Optional[str] = field(default=None, metadata=_READ)
    author_name: Optional[str] = field(default=None, metadata=_READ)

    # Provider / content
    provider_name: Optional[str] = field(default=None, metadata=_READ)
    provider_reference: Optional[str] = field(default=None, metadata=_READ)
    content_type: Optional[str] = field(default=None, metadata=_READ)
    size: Optional[int] = field(default=None, metadata=_READ)
    width: Optional[int] = field(default=None, metadata=_READ)
    height: Optional[int] = field(default=None, metadata=_READ)
    length: Optional[float] = field(default=None, metadata=_READ)

    # internal: provider bookkeeping, never rendered
    provider_metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        for attr in ("size", "width", "height", "length"):
            v = getattr(self, attr)
            if v is not None and v < 0:
                raise ValueError(f"{attr} must be >= 0")
