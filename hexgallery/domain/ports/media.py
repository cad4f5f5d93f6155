from __future__ import annotations
from typing import Optional, Protocol
from uuid import UUID

from hexgallery.domain.entities.media import Media


class MediaRepositoryPort(Protocol):
    def find_by_id(self, media_id: UUID) -> Optional[Media]: ...
