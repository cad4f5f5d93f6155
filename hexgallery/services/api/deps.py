# hexgallery/services/api/deps.py
from __future__ import annotations
from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from hexgallery.common.settings import get_settings
from hexgallery.database.core.main import SessionLocal
from hexgallery.database.repos.gallery_repo import SqlAlchemyGalleryRepo
from hexgallery.database.repos.media_repo import SqlAlchemyMediaRepo
from hexgallery.domain.dataclasses.view import ViewContext
from hexgallery.domain.ports.serialization import SerializerPort
from hexgallery.domain.ports.validation import ValidatorPort
from hexgallery.services.galleries.service import GalleryService
from hexgallery.services.serialization.view_projection import ViewProjection
from hexgallery.services.validation.pydantic_validator import PydanticValidator


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """
    Request-scoped transaction. Every repo/service built from this session
    participates in the same transaction: COMMIT on normal exit, ROLLBACK if
    an exception bubbles out (including the gallery errors, so a rejected
    request never leaves partial writes behind).
    """
    with db.begin():
        yield db


def get_validator() -> ValidatorPort:
    return PydanticValidator()


def get_view_projection() -> SerializerPort:
    """Read context for API responses, taken from settings.serialization."""
    s = get_settings().serialization
    return ViewProjection(ViewContext(group=s.read_group, max_depth=s.max_depth))


def get_gallery_service(
    db: Session = Depends(transactional_session),
    validator: ValidatorPort = Depends(get_validator),
) -> GalleryService:
    return GalleryService(
        galleries=SqlAlchemyGalleryRepo(db),
        media=SqlAlchemyMediaRepo(db),
        validator=validator,
    )
