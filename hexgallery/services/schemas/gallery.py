# hexgallery/services/schemas/gallery.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hexgallery.services.schemas.gallery_has_media import GalleryHasMediaRead


# ---------- Write (create / update share one schema; updates are merged first) ----------
class GalleryWrite(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=255)
    context: str = Field("default", min_length=1, max_length=64)
    default_format: str = Field("reference", min_length=1, max_length=255)
    enabled: bool = False

    @field_validator("name", "context", "default_format", mode="before")
    @classmethod
    def _strip(cls, v):
        return v.strip() if isinstance(v, str) else v


# ---------- Read ----------
class GalleryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    context: str
    default_format: str
    enabled: bool
    associations: List[GalleryHasMediaRead] = []
    date_created: Optional[datetime] = None
    last_updated: Optional[datetime] = None


class GalleryPageRead(BaseModel):
    items: List[GalleryRead] = []
    page: int
    page_size: int
    total: int
    pages: int
