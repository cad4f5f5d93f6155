from __future__ import annotations
from typing import Mapping, Optional, Protocol
from uuid import UUID

from hexgallery.domain.dataclasses.page import Page
from hexgallery.domain.entities.gallery import Gallery
from hexgallery.domain.enums.sort_direction import SortDirection


class GalleryRepositoryPort(Protocol):
    def find_by_id(self, gallery_id: UUID) -> Optional[Gallery]: ...

    # Persists the whole aggregate (gallery + associations) and writes back
    # ids, timestamps and version. Raises ConflictError / PersistenceError.
    def save(self, gallery: Gallery) -> None: ...

    def delete(self, gallery: Gallery) -> None: ...

    def query(
        self,
        criteria: Mapping[str, object],
        page: int,
        page_size: int,
        sort: Mapping[str, SortDirection],
    ) -> Page[Gallery]: ...
