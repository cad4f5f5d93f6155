# hexgallery/services/galleries/service.py
from __future__ import annotations

from typing import Any, List, Mapping, Optional
from uuid import UUID

from hexgallery.common.logging import get_logger
from hexgallery.domain.dataclasses.page import Page
from hexgallery.domain.entities.gallery import Gallery
from hexgallery.domain.entities.links.gallery_has_media import GalleryHasMedia
from hexgallery.domain.entities.media import Media
from hexgallery.domain.errors import NotFoundError, ValidationError
from hexgallery.domain.ports.galleries import GalleryRepositoryPort
from hexgallery.domain.ports.media import MediaRepositoryPort
from hexgallery.domain.ports.validation import ValidatorPort
from hexgallery.services.galleries.association_writer import AssociationWriter
from hexgallery.services.galleries.query import SortInput, normalize_criteria, normalize_sort
from hexgallery.services.validation.pydantic_validator import GALLERY_SCHEMA

logger = get_logger()


class GalleryService:
    """
    Gallery use cases. Ports in, domain entities out; rendering and HTTP
    status codes belong to the API layer.

    Each mutating method resolves everything it needs first, so NotFound /
    Validation / Conflict errors are raised before anything is saved.
    """

    def __init__(
        self,
        galleries: GalleryRepositoryPort,
        media: MediaRepositoryPort,
        validator: ValidatorPort,
        writer: Optional[AssociationWriter] = None,
    ) -> None:
        self.galleries = galleries
        self.media = media
        self.validator = validator
        self.writer = writer or AssociationWriter(galleries, validator)

    # ---- reads ----

    def list_galleries(
        self,
        filters: Optional[Mapping[str, Any]] = None,
        page: int = 1,
        page_size: int = 10,
        sort: SortInput = None,
    ) -> Page[Gallery]:
        errors = []
        if page < 1:
            errors.append({"field": "page", "message": "page must be >= 1", "type": "greater_than_equal"})
        if page_size < 1:
            errors.append({"field": "count", "message": "count must be >= 1", "type": "greater_than_equal"})
        if errors:
            raise ValidationError("Invalid pagination", errors=errors, submitted={"page": page, "count": page_size})

        return self.galleries.query(normalize_criteria(filters), page, page_size, normalize_sort(sort))

    def get_gallery(self, gallery_id: UUID) -> Gallery:
        gallery = self.galleries.find_by_id(gallery_id)
        if gallery is None:
            raise NotFoundError("Gallery", gallery_id)
        return gallery

    def list_gallery_media(self, gallery_id: UUID) -> List[Media]:
        return self.get_gallery(gallery_id).media()

    def list_gallery_associations(self, gallery_id: UUID) -> List[GalleryHasMedia]:
        return self.get_gallery(gallery_id).associations.as_list()

    # ---- gallery mutations ----

    def create_gallery(self, submitted: Optional[Mapping[str, Any]]) -> Gallery:
        gallery: Gallery = self.validator.validate(GALLERY_SCHEMA, None, submitted)
        self.galleries.save(gallery)
        logger.info("created gallery %s (%s)", gallery.id, gallery.name)
        return gallery

    def update_gallery(self, gallery_id: UUID, submitted: Optional[Mapping[str, Any]]) -> Gallery:
        gallery = self.get_gallery(gallery_id)
        self.validator.validate(GALLERY_SCHEMA, gallery, submitted)
        self.galleries.save(gallery)
        logger.info("updated gallery %s", gallery.id)
        return gallery

    def delete_gallery(self, gallery_id: UUID) -> None:
        gallery = self.get_gallery(gallery_id)
        self.galleries.delete(gallery)
        logger.info("deleted gallery %s", gallery_id)

    # ---- associations ----

    def add_association(
        self, gallery_id: UUID, media_id: UUID, submitted: Optional[Mapping[str, Any]] = None
    ) -> GalleryHasMedia:
        gallery, media = self._gallery_and_media(gallery_id, media_id)
        return self.writer.create_association(gallery, media, submitted)

    def update_association(
        self, gallery_id: UUID, media_id: UUID, submitted: Optional[Mapping[str, Any]] = None
    ) -> GalleryHasMedia:
        gallery, media = self._gallery_and_media(gallery_id, media_id)
        return self.writer.update_association(gallery, media, submitted)

    def delete_association(self, gallery_id: UUID, media_id: UUID) -> None:
        gallery, media = self._gallery_and_media(gallery_id, media_id)
        self.writer.remove_association(gallery, media.id)

    # ---- helpers ----

    def _media_or_404(self, media_id: UUID) -> Media:
        media = self.media.find_by_id(media_id)
        if media is None:
            logger.warning("media %s not found", media_id)
            raise NotFoundError("Media", media_id, message="Media not found")
        return media

    def _gallery_and_media(self, gallery_id: UUID, media_id: UUID):
        # the gallery is resolved first, so an unknown gallery wins over an unknown media id
        gallery = self.get_gallery(gallery_id)
        return gallery, self._media_or_404(media_id)
