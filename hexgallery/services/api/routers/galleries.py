# hexgallery/services/api/routers/galleries.py
from __future__ import annotations

import re
from http import HTTPStatus
from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, Request

from hexgallery.common.settings import get_settings
from hexgallery.domain.ports.serialization import SerializerPort
from hexgallery.services.api.deps import get_gallery_service, get_view_projection
from hexgallery.services.galleries.service import GalleryService
from hexgallery.services.schemas import (
    DeletedRead,
    ErrorRead,
    GalleryHasMediaRead,
    GalleryPageRead,
    GalleryRead,
    MediaRead,
)

cfg = get_settings()
router = APIRouter(
    prefix=f"{cfg.api.prefix}/galleries",
    tags=["galleries"],
    responses={
        HTTPStatus.BAD_REQUEST.value: {"model": ErrorRead},
        HTTPStatus.NOT_FOUND.value: {"model": ErrorRead},
        HTTPStatus.CONFLICT.value: {"model": ErrorRead},
    },
)

_ORDER_BY_KEY = re.compile(r"^order_by\[(?P<field>[^\]]+)\]$")


# ---- helpers ----

def _order_by(request: Request) -> Union[None, str, Dict[str, str]]:
    """
    Accepts both `?order_by=name` and `?order_by[name]=desc` (repeatable).
    The bracketed form wins when both are present.
    """
    mapping: Dict[str, str] = {}
    for key, value in request.query_params.multi_items():
        m = _ORDER_BY_KEY.match(key)
        if m:
            mapping[m.group("field")] = value
    if mapping:
        return mapping
    return request.query_params.get("order_by") or None


# ---- galleries ----

@router.get("", response_model=GalleryPageRead, response_model_exclude_unset=True)
def list_galleries(
    request: Request,
    page: int = Query(cfg.pagination.default_page, ge=1),
    count: int = Query(cfg.pagination.default_page_size, ge=1, le=cfg.pagination.max_page_size),
    enabled: Optional[bool] = Query(None),
    order_by: Optional[str] = Query(None, description="Field name, or use order_by[field]=asc|desc"),
    service: GalleryService = Depends(get_gallery_service),
    projection: SerializerPort = Depends(get_view_projection),
):
    result = service.list_galleries({"enabled": enabled}, page=page, page_size=count, sort=_order_by(request))
    return projection.render(result)


@router.get("/{gallery_id}", response_model=GalleryRead, response_model_exclude_unset=True)
def get_gallery(
    gallery_id: UUID,
    service: GalleryService = Depends(get_gallery_service),
    projection: SerializerPort = Depends(get_view_projection),
):
    return projection.render(service.get_gallery(gallery_id))


@router.get("/{gallery_id}/media", response_model=List[MediaRead], response_model_exclude_unset=True)
def list_gallery_media(
    gallery_id: UUID,
    service: GalleryService = Depends(get_gallery_service),
    projection: SerializerPort = Depends(get_view_projection),
):
    return projection.render(service.list_gallery_media(gallery_id))


@router.get(
    "/{gallery_id}/gallery-has-media",
    response_model=List[GalleryHasMediaRead],
    response_model_exclude_unset=True,
)
def list_gallery_associations(
    gallery_id: UUID,
    service: GalleryService = Depends(get_gallery_service),
    projection: SerializerPort = Depends(get_view_projection),
):
    return projection.render(service.list_gallery_associations(gallery_id))


@router.post("", response_model=GalleryRead, response_model_exclude_unset=True, status_code=HTTPStatus.CREATED)
def create_gallery(
    payload: Optional[Dict[str, Any]] = Body(None),
    service: GalleryService = Depends(get_gallery_service),
    projection: SerializerPort = Depends(get_view_projection),
):
    return projection.render(service.create_gallery(payload))


@router.put("/{gallery_id}", response_model=GalleryRead, response_model_exclude_unset=True)
def update_gallery(
    gallery_id: UUID,
    payload: Optional[Dict[str, Any]] = Body(None),
    service: GalleryService = Depends(get_gallery_service),
    projection: SerializerPort = Depends(get_view_projection),
):
    return projection.render(service.update_gallery(gallery_id, payload))


@router.delete("/{gallery_id}", response_model=DeletedRead)
def delete_gallery(
    gallery_id: UUID,
    service: GalleryService = Depends(get_gallery_service),
) -> DeletedRead:
    service.delete_gallery(gallery_id)
    return DeletedRead(deleted=True)


# ---- gallery <-> media associations ----

@router.post(
    "/{gallery_id}/media/{media_id}/gallery-has-media",
    response_model=GalleryHasMediaRead,
    response_model_exclude_unset=True,
    status_code=HTTPStatus.CREATED,
)
def add_gallery_media(
    gallery_id: UUID,
    media_id: UUID,
    payload: Optional[Dict[str, Any]] = Body(None),
    service: GalleryService = Depends(get_gallery_service),
    projection: SerializerPort = Depends(get_view_projection),
):
    return projection.render(service.add_association(gallery_id, media_id, payload))


@router.put(
    "/{gallery_id}/media/{media_id}/gallery-has-media",
    response_model=GalleryHasMediaRead,
    response_model_exclude_unset=True,
)
def update_gallery_media(
    gallery_id: UUID,
    media_id: UUID,
    payload: Optional[Dict[str, Any]] = Body(None),
    service: GalleryService = Depends(get_gallery_service),
    projection: SerializerPort = Depends(get_view_projection),
):
    return projection.render(service.update_association(gallery_id, media_id, payload))


@router.delete("/{gallery_id}/media/{media_id}/gallery-has-media", response_model=DeletedRead)
def delete_gallery_media(
    gallery_id: UUID,
    media_id: UUID,
    service: GalleryService = Depends(get_gallery_service),
) -> DeletedRead:
    service.delete_association(gallery_id, media_id)
    return DeletedRead(deleted=True)
