# tests/database/test_sqlalchemy_media_repo.py
from __future__ import annotations

import uuid

import pytest
from sqlalchemy.exc import OperationalError

from hexgallery.database.models.media import Media as DBMedia
from hexgallery.database.repos.media_repo import SqlAlchemyMediaRepo
from hexgallery.domain.entities.media import Media
from hexgallery.domain.errors import PersistenceError


def test_add_persists_core_fields(db):
    repo = SqlAlchemyMediaRepo(db)

    m = repo.add(Media(
        name="sunset.jpg",
        description="Evening",
        enabled=True,
        provider_name="image",
        provider_reference="abc123",
        provider_metadata={"exif": {"iso": 100}},
        content_type="image/jpeg",
        size=2048,
        width=640,
        height=480,
    ))

    assert m.id is not None
    row = db.get(DBMedia, m.id)
    assert isinstance(row, DBMedia)
    assert row.name == "sunset.jpg"
    assert row.provider_metadata == {"exif": {"iso": 100}}
    assert row.width == 640 and row.height == 480


def test_add_keeps_given_id(db):
    given = uuid.uuid4()
    m = SqlAlchemyMediaRepo(db).add(Media(id=given, name="x"))
    assert m.id == given


def test_find_by_id_round_trips(db):
    repo = SqlAlchemyMediaRepo(db)
    created = repo.add(Media(name="clip.mp4", content_type="video/mp4", length=12.5))

    found = repo.find_by_id(created.id)
    assert found is not None
    assert found.name == "clip.mp4"
    assert found.length == 12.5
    assert found.enabled is False
    assert found.date_created is not None


def test_find_by_id_missing(db):
    assert SqlAlchemyMediaRepo(db).find_by_id(uuid.uuid4()) is None


def test_read_failure_is_a_persistence_error(db, monkeypatch):
    def _broken(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection lost"))

    monkeypatch.setattr(db, "get", _broken)
    with pytest.raises(PersistenceError):
        SqlAlchemyMediaRepo(db).find_by_id(uuid.uuid4())
