# hexgallery/services/schemas/media.py
from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class MediaRead(BaseModel):
    """Read view of a media asset (api_read group)."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: Optional[str] = None
    enabled: bool = False
    context: Optional[str] = None
    copyright: Optional[str] = None
    author_name: Optional[str] = None

    provider_name: Optional[str] = None
    provider_reference: Optional[str] = None
    content_type: Optional[str] = None
    size: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    length: Optional[float] = None

    date_created: Optional[datetime] = None
    last_updated: Optional[datetime] = None
