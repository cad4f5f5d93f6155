# hexgallery/database/repos/gallery_repo.py
from __future__ import annotations

import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Dict, Iterator, List, Mapping, Optional
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from hexgallery.common.logging import get_logger
from hexgallery.database.models.gallery import Gallery as DBGallery, GalleryHasMedia as DBGalleryHasMedia
from hexgallery.database.repos._mapping import to_domain_gallery
from hexgallery.domain.dataclasses.page import Page
from hexgallery.domain.entities.gallery import Gallery as DomainGallery, SORTABLE_FIELDS
from hexgallery.domain.enums.sort_direction import SortDirection
from hexgallery.domain.errors import ConflictError, PersistenceError

logger = get_logger()


class SqlAlchemyGalleryRepo:
    """
    SQLAlchemy-backed repository that satisfies GalleryRepositoryPort.

    The gallery is saved as one aggregate: the row itself plus a reconcile of
    its gallery_has_media rows against the domain AssociationSet.

    Concurrency
    -----------
    `gallery.version` is a version_id_col. Every save of an existing gallery
    touches the row, so two requests that loaded the same snapshot cannot
    both win: the loser gets a ConflictError (stale version / StaleDataError),
    as does anyone racing on the (gallery_id, media_id) unique constraint.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    def find_by_id(self, gallery_id: UUID) -> Optional[DomainGallery]:
        with self._db_errors(gallery_id):
            row = self.db.get(DBGallery, gallery_id)
            return to_domain_gallery(row) if row else None

    def query(
        self,
        criteria: Mapping[str, object],
        page: int,
        page_size: int,
        sort: Mapping[str, SortDirection],
    ) -> Page[DomainGallery]:
        stmt = select(DBGallery)
        if criteria.get("enabled") is not None:
            stmt = stmt.where(DBGallery.enabled == bool(criteria["enabled"]))

        order = []
        for field, direction in sort.items():
            if field not in SORTABLE_FIELDS:
                raise ValueError(f"Unsupported sort field: {field}")
            col = getattr(DBGallery, field)
            order.append(col.desc() if SortDirection(direction) == SortDirection.desc else col.asc())
        # default order, and a stable tie-breaker for any explicit sort
        order.extend([DBGallery.date_created.asc(), DBGallery.id.asc()])

        with self._db_errors(None):
            total = int(self.db.execute(select(func.count()).select_from(stmt.subquery())).scalar_one())
            result: Page[DomainGallery] = Page(page=page, page_size=page_size, total=total)
            rows = self.db.execute(
                stmt.order_by(*order).offset(result.offset).limit(page_size)
            ).scalars().all()
            result.items = [to_domain_gallery(r) for r in rows]
        return result

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------
    def save(self, gallery: DomainGallery) -> None:
        row = self._get_row(gallery.id)

        if row is None:
            if gallery.version is not None:
                # loaded earlier, gone now
                raise ConflictError(
                    f"Gallery ({gallery.id}) was removed by a concurrent request",
                    details={"gallery_id": str(gallery.id)},
                )
            row = DBGallery(id=gallery.id or uuid.uuid4())
            self.db.add(row)
        else:
            if gallery.version is not None and row.version != gallery.version:
                logger.warning(
                    "stale gallery snapshot id=%s loaded_version=%s current_version=%s",
                    gallery.id, gallery.version, row.version,
                )
                raise ConflictError(
                    f"Gallery ({gallery.id}) was modified by a concurrent request",
                    details={"gallery_id": str(gallery.id), "version": gallery.version},
                )
            # touch the row so the version counter moves even for association-only changes
            row.last_updated = datetime.now(timezone.utc)

        row.name = gallery.name
        row.context = gallery.context
        row.default_format = gallery.default_format
        row.enabled = gallery.enabled
        row.data_origin = gallery.data_origin

        links = self._sync_associations(row, gallery)
        self._flush(gallery.id)
        with self._db_errors(gallery.id):
            self._write_back(row, links, gallery)

    def delete(self, gallery: DomainGallery) -> None:
        row = self._get_row(gallery.id)
        if not row:
            return
        # associations go with it (delete-orphan); media rows are untouched
        self.db.delete(row)
        self._flush(gallery.id)

    # -------------------------------------------------------------------------
    # helpers
    # -------------------------------------------------------------------------
    def _get_row(self, gallery_id: Optional[UUID]) -> Optional[DBGallery]:
        if gallery_id is None:
            return None
        with self._db_errors(gallery_id):
            return self.db.get(DBGallery, gallery_id)

    def _sync_associations(self, row: DBGallery, gallery: DomainGallery) -> List[DBGalleryHasMedia]:
        current: Dict[UUID, DBGalleryHasMedia] = {link.media_id: link for link in row.associations}
        wanted = gallery.associations.as_list()
        wanted_ids = {a.media_id for a in wanted}

        # taken before removals so a new link never reuses a sequence deleted in the same flush
        next_sequence = max((link.sequence for link in current.values()), default=-1) + 1

        for media_id, link in current.items():
            if media_id not in wanted_ids:
                row.associations.remove(link)

        links: List[DBGalleryHasMedia] = []
        for idx, a in enumerate(wanted):
            position = a.position if a.position is not None else idx
            link = current.get(a.media_id)
            if link is None:
                link = DBGalleryHasMedia(
                    id=a.id or uuid.uuid4(),
                    media_id=a.media_id,
                    position=position,
                    sequence=next_sequence,
                    enabled=a.enabled,
                )
                next_sequence += 1
                row.associations.append(link)
            else:
                link.position = position
                link.enabled = a.enabled
            links.append(link)
        return links

    def _flush(self, gallery_id: Optional[UUID]) -> None:
        with self._db_errors(gallery_id):
            self.db.flush()

    @contextmanager
    def _db_errors(self, gallery_id: Optional[UUID]) -> Iterator[None]:
        """Translate driver/ORM failures into gallery errors (reads and writes alike)."""
        try:
            yield
        except StaleDataError as e:
            logger.warning("concurrent update on gallery id=%s: %s", gallery_id, e)
            raise ConflictError(
                f"Gallery ({gallery_id}) was modified by a concurrent request",
                details={"gallery_id": str(gallery_id)},
            ) from e
        except IntegrityError as e:
            logger.warning("integrity conflict on gallery id=%s: %s", gallery_id, e.orig)
            raise ConflictError(
                f"Gallery ({gallery_id}) conflicts with existing data",
                details={"gallery_id": str(gallery_id), "reason": str(e.orig)},
            ) from e
        except SQLAlchemyError as e:
            logger.error("persistence failure on gallery id=%s", gallery_id, exc_info=True)
            raise PersistenceError(f"Could not access gallery ({gallery_id})") from e

    @staticmethod
    def _write_back(row: DBGallery, links: List[DBGalleryHasMedia], gallery: DomainGallery) -> None:
        """Copy generated ids, timestamps and the new version onto the domain objects."""
        gallery.id = row.id
        gallery.version = row.version
        gallery.date_created = row.date_created
        gallery.last_updated = row.last_updated
        for a, link in zip(gallery.associations.as_list(), links):
            a.id = link.id
            a.gallery_id = row.id
            a.position = link.position
            a.date_created = link.date_created
            a.last_updated = link.last_updated
