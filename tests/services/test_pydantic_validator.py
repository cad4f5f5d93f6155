# tests/services/test_pydantic_validator.py
from __future__ import annotations

from uuid import uuid4

import pytest

from hexgallery.domain.entities.gallery import Gallery
from hexgallery.domain.entities.links.gallery_has_media import GalleryHasMedia
from hexgallery.domain.entities.media import Media
from hexgallery.domain.errors import ValidationError
from hexgallery.services.validation.pydantic_validator import (
    GALLERY_HAS_MEDIA_SCHEMA,
    GALLERY_SCHEMA,
    PydanticValidator,
)


@pytest.fixture()
def validator():
    return PydanticValidator()


def test_builds_new_gallery_with_defaults(validator):
    g = validator.validate(GALLERY_SCHEMA, None, {"name": "New"})
    assert isinstance(g, Gallery)
    assert (g.name, g.context, g.default_format, g.enabled) == ("New", "default", "reference", False)


def test_merges_into_target(validator):
    target = Gallery(id=uuid4(), name="Old", context="web", version=3)
    out = validator.validate(GALLERY_SCHEMA, target, {"name": "Renamed"})
    assert out is target
    assert (target.name, target.context, target.version) == ("Renamed", "web", 3)


def test_invalid_data_reports_fields_and_leaves_target(validator):
    target = Gallery(name="Old")
    with pytest.raises(ValidationError) as ei:
        validator.validate(GALLERY_SCHEMA, target, {"name": "x" * 300, "surprise": 1})

    fields = {e["field"] for e in ei.value.errors}
    assert {"name", "surprise"} <= fields
    assert ei.value.submitted == {"name": "x" * 300, "surprise": 1}
    assert ei.value.to_dict()["error"]["code"] == "VALIDATION_ERROR"
    assert target.name == "Old"


def test_association_schema(validator):
    a = validator.validate(GALLERY_HAS_MEDIA_SCHEMA, None, {"enabled": True})
    assert isinstance(a, GalleryHasMedia)
    assert a.position is None and a.enabled is True

    existing = GalleryHasMedia(media=Media(id=uuid4()), position=2)
    validator.validate(GALLERY_HAS_MEDIA_SCHEMA, existing, {"position": 5})
    assert existing.position == 5
    assert existing.media is not None


def test_none_submitted_is_empty_object(validator):
    a = validator.validate(GALLERY_HAS_MEDIA_SCHEMA, None, None)
    assert a.enabled is False


def test_unknown_schema(validator):
    with pytest.raises(KeyError):
        validator.validate("nope", None, {})
