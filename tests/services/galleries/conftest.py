# tests/services/galleries/conftest.py
from __future__ import annotations

import copy
from typing import Dict, Mapping, Optional
from uuid import UUID, uuid4

import pytest

from hexgallery.domain.dataclasses.page import Page
from hexgallery.domain.entities.gallery import Gallery
from hexgallery.domain.entities.media import Media
from hexgallery.domain.enums.sort_direction import SortDirection
from hexgallery.domain.errors import ConflictError
from hexgallery.services.galleries.association_writer import AssociationWriter
from hexgallery.services.galleries.service import GalleryService
from hexgallery.services.validation.pydantic_validator import PydanticValidator


class InMemoryGalleryRepo:
    """GalleryRepositoryPort over a dict; hands out copies like a real store would."""

    def __init__(self) -> None:
        self.rows: Dict[UUID, Gallery] = {}
        self.saves = 0
        self.deletes = 0

    def find_by_id(self, gallery_id: UUID) -> Optional[Gallery]:
        g = self.rows.get(gallery_id)
        return copy.deepcopy(g) if g else None

    def save(self, gallery: Gallery) -> None:
        self.saves += 1
        current = self.rows.get(gallery.id) if gallery.id else None
        if current is not None and current.version != gallery.version:
            raise ConflictError(f"Gallery ({gallery.id}) was modified by a concurrent request")
        if gallery.id is None:
            gallery.id = uuid4()
        gallery.version = (gallery.version or 0) + 1
        for a in gallery.associations:
            a.id = a.id or uuid4()
            a.gallery_id = gallery.id
        self.rows[gallery.id] = copy.deepcopy(gallery)

    def delete(self, gallery: Gallery) -> None:
        self.deletes += 1
        self.rows.pop(gallery.id, None)

    def query(self, criteria: Mapping[str, object], page: int, page_size: int, sort: Mapping[str, SortDirection]):
        items = [g for g in self.rows.values() if all(getattr(g, k) == v for k, v in criteria.items())]
        items.sort(key=lambda g: str(g.id))
        for field, direction in reversed(list(sort.items())):
            items.sort(key=lambda g: getattr(g, field), reverse=direction == SortDirection.desc)
        start = (page - 1) * page_size
        return Page(
            items=[copy.deepcopy(g) for g in items[start:start + page_size]],
            page=page,
            page_size=page_size,
            total=len(items),
        )


class InMemoryMediaRepo:
    def __init__(self) -> None:
        self.rows: Dict[UUID, Media] = {}

    def add(self, name: str = "m.jpg") -> Media:
        m = Media(id=uuid4(), name=name, enabled=True)
        self.rows[m.id] = m
        return m

    def find_by_id(self, media_id: UUID) -> Optional[Media]:
        return self.rows.get(media_id)


@pytest.fixture()
def gallery_repo() -> InMemoryGalleryRepo:
    return InMemoryGalleryRepo()


@pytest.fixture()
def media_repo() -> InMemoryMediaRepo:
    return InMemoryMediaRepo()


@pytest.fixture()
def validator() -> PydanticValidator:
    return PydanticValidator()


@pytest.fixture()
def writer(gallery_repo, validator) -> AssociationWriter:
    return AssociationWriter(gallery_repo, validator)


@pytest.fixture()
def service(gallery_repo, media_repo, validator, writer) -> GalleryService:
    return GalleryService(gallery_repo, media_repo, validator, writer)
