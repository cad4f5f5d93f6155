# hexgallery/domain/entities/association_set.py
from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional
from uuid import UUID

from hexgallery.domain.entities.links.gallery_has_media import GalleryHasMedia
from hexgallery.domain.errors import ConflictError


class AssociationSet:
    """
    Ordered collection of the GalleryHasMedia entries of one gallery.

    Invariants:
      - at most one association per media id
      - iteration order is insertion order (what serialization shows)

    Backed by an insertion-ordered dict keyed by media id, so uniqueness
    checks and lookups are O(1). Pure in-memory: persisting is the caller's job.
    """

    def __init__(self, associations: Iterable[GalleryHasMedia] = ()) -> None:
        self._by_media: Dict[UUID, GalleryHasMedia] = {}
        for a in associations:
            self.add(a)

    @staticmethod
    def _key(association: GalleryHasMedia) -> UUID:
        media_id = association.media_id
        if media_id is None:
            raise ValueError("association must reference a persisted media (media.id is None)")
        return media_id

    def as_list(self) -> List[GalleryHasMedia]:
        return list(self._by_media.values())

    def contains(self, media_id: UUID) -> bool:
        return media_id in self._by_media

    def add(self, association: GalleryHasMedia) -> None:
        key = self._key(association)
        if key in self._by_media:
            raise ConflictError(
                f'Gallery "{association.gallery_id}" already has media "{key}"',
                details={"gallery_id": str(association.gallery_id), "media_id": str(key)},
            )
        self._by_media[key] = association

    def remove_by_media_id(self, media_id: UUID) -> bool:
        return self._by_media.pop(media_id, None) is not None

    def find_by_media_id(self, media_id: UUID) -> Optional[GalleryHasMedia]:
        return self._by_media.get(media_id)

    def next_position(self) -> int:
        positions = [a.position for a in self._by_media.values() if a.position is not None]
        return max(positions) + 1 if positions else 0

    # ---- container protocol ----

    def __iter__(self) -> Iterator[GalleryHasMedia]:
        return iter(list(self._by_media.values()))

    def __len__(self) -> int:
        return len(self._by_media)

    def __contains__(self, media_id: object) -> bool:
        return media_id in self._by_media

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AssociationSet):
            return NotImplemented
        return self.as_list() == other.as_list()

    def __repr__(self) -> str:
        return f"<AssociationSet media_ids={[str(k) for k in self._by_media]}>"
