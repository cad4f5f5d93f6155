# hexgallery/services/schemas/gallery_has_media.py
from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from hexgallery.services.schemas.media import MediaRead


class GalleryHasMediaWrite(BaseModel):
    """
    Submitted association metadata. The media is taken from the URL,
    never from the body.
    """
    model_config = ConfigDict(extra="forbid")

    position: Optional[int] = Field(default=None, ge=0)
    enabled: bool = False


class GalleryHasMediaRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    gallery_id: UUID
    media: Optional[MediaRead] = None
    position: Optional[int] = None
    enabled: bool = False
    date_created: Optional[datetime] = None
    last_updated: Optional[datetime] = None
