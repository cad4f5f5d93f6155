# hexgallery/database/repos/media_repo.py
from __future__ import annotations

import uuid
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hexgallery.common.logging import get_logger
from hexgallery.database.models.media import Media as DBMedia
from hexgallery.database.repos._mapping import to_domain_media
from hexgallery.domain.entities.media import Media as DomainMedia
from hexgallery.domain.errors import PersistenceError

logger = get_logger()


class SqlAlchemyMediaRepo:
    """
    Read side of the media table; satisfies MediaRepositoryPort.
    `add` exists for seeding (fixtures, imports): galleries never create media.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, media_id: UUID) -> Optional[DomainMedia]:
        try:
            row = self.db.get(DBMedia, media_id)
            return to_domain_media(row) if row else None
        except SQLAlchemyError as e:
            logger.error("could not load media id=%s", media_id, exc_info=True)
            raise PersistenceError(f"Could not load media ({media_id})") from e

    def add(self, media: DomainMedia) -> DomainMedia:
        row = DBMedia(
            id=media.id or uuid.uuid4(),
            name=media.name,
            description=media.description,
            enabled=media.enabled,
            context=media.context,
            copyright=media.copyright,
            author_name=media.author_name,
            provider_name=media.provider_name,
            provider_reference=media.provider_reference,
            provider_metadata=dict(media.provider_metadata or {}),
            content_type=media.content_type,
            size=media.size,
            width=media.width,
            height=media.height,
            length=media.length,
            data_origin=media.data_origin,
        )
        self.db.add(row)
        self.db.flush()
        return to_domain_media(row)
