# hexgallery/services/galleries/association_writer.py
from __future__ import annotations

from typing import Any, Mapping, Optional
from uuid import UUID

from hexgallery.common.logging import get_logger
from hexgallery.domain.entities.gallery import Gallery
from hexgallery.domain.entities.links.gallery_has_media import GalleryHasMedia
from hexgallery.domain.entities.media import Media
from hexgallery.domain.errors import ConflictError, NotFoundError
from hexgallery.domain.ports.galleries import GalleryRepositoryPort
from hexgallery.domain.ports.validation import ValidatorPort
from hexgallery.services.validation.pydantic_validator import GALLERY_HAS_MEDIA_SCHEMA

logger = get_logger()


class AssociationWriter:
    """
    Creates, updates and removes one gallery <-> media association.

    Every operation checks its precondition (uniqueness / existence) and
    validates the submitted data *before* touching the gallery, then calls
    GalleryRepositoryPort.save exactly once. A failed check never persists.
    """

    def __init__(self, galleries: GalleryRepositoryPort, validator: ValidatorPort) -> None:
        self.galleries = galleries
        self.validator = validator

    def create_association(
        self,
        gallery: Gallery,
        media: Media,
        submitted: Optional[Mapping[str, Any]] = None,
    ) -> GalleryHasMedia:
        if gallery.associations.contains(media.id):
            logger.warning("gallery %s already has media %s", gallery.id, media.id)
            raise ConflictError(
                f'Gallery "{gallery.id}" already has media "{media.id}"',
                details={"gallery_id": str(gallery.id), "media_id": str(media.id)},
            )

        association = self._validate_and_populate(
            None, submitted, default_position=gallery.associations.next_position()
        )
        association.media = media
        association.gallery_id = gallery.id

        gallery.associations.add(association)
        self.galleries.save(gallery)
        logger.info("added media %s to gallery %s at position %s", media.id, gallery.id, association.position)
        return association

    def update_association(
        self,
        gallery: Gallery,
        media: Media,
        submitted: Optional[Mapping[str, Any]] = None,
    ) -> GalleryHasMedia:
        existing = gallery.associations.find_by_media_id(media.id)
        if existing is None:
            raise NotFoundError(
                "GalleryHasMedia",
                message=f'Gallery "{gallery.id}" does not have media "{media.id}"',
            )

        self._validate_and_populate(existing, submitted, default_position=existing.position)
        existing.media = media

        self.galleries.save(gallery)
        logger.info("updated media %s in gallery %s", media.id, gallery.id)
        return existing

    def remove_association(self, gallery: Gallery, media_id: UUID) -> None:
        if not gallery.associations.remove_by_media_id(media_id):
            raise NotFoundError(
                "GalleryHasMedia",
                message=f'Gallery "{gallery.id}" does not have media "{media_id}" associated',
            )
        self.galleries.save(gallery)
        logger.info("removed media %s from gallery %s", media_id, gallery.id)

    # ---- helpers ----

    def _validate_and_populate(
        self,
        target: Optional[GalleryHasMedia],
        submitted: Optional[Mapping[str, Any]],
        *,
        default_position: Optional[int],
    ) -> GalleryHasMedia:
        association: GalleryHasMedia = self.validator.validate(GALLERY_HAS_MEDIA_SCHEMA, target, submitted)
        if association.position is None:
            association.position = default_position
        return association
