# hexgallery/domain/entities/links/gallery_has_media.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from hexgallery.domain.dataclasses.view import groups
from hexgallery.domain.entities.media import Media
from hexgallery.domain.enums.visibility import Visibility

_READ = groups(Visibility.api_read)


@dataclass
class GalleryHasMedia:
    """
    Join entity connecting a Gallery and a Media with association metadata
    (position, enabled). The gallery owns it; the media is only referenced.
    (gallery_id, media.id) is unique: AssociationSet checks it in memory and
    the DB backs it with a constraint.
    """
    id: Optional[UUID] = field(default=None, metadata=_READ)
    gallery_id: Optional[UUID] = field(default=None, metadata=_READ)
    media: Optional[Media] = field(default=None, metadata=_READ)
    position: Optional[int] = field(default=None, metadata=_READ)
    enabled: bool = field(default=False, metadata=_READ)
    date_created: Optional[datetime] = field(default=None, metadata=_READ)
    last_updated: Optional[datetime] = field(default=None, metadata=_READ)

    def __post_init__(self):
        if self.position is not None and self.position < 0:
            raise ValueError("position must be >= 0")

    @property
    def media_id(self) -> Optional[UUID]:
        return self.media.id if self.media is not None else None
