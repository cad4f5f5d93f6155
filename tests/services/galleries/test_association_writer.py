# tests/services/galleries/test_association_writer.py
from __future__ import annotations

from uuid import uuid4

import pytest

from hexgallery.domain.entities.gallery import Gallery
from hexgallery.domain.errors import ConflictError, NotFoundError, ValidationError


@pytest.fixture()
def gallery(gallery_repo) -> Gallery:
    g = Gallery(name="G")
    gallery_repo.save(g)
    gallery_repo.saves = 0
    return g


def test_create_appends_at_next_position_and_saves_once(writer, gallery_repo, media_repo, gallery):
    m1, m2 = media_repo.add("a"), media_repo.add("b")

    a1 = writer.create_association(gallery, m1, {"enabled": True})
    a2 = writer.create_association(gallery, m2, None)

    assert (a1.position, a2.position) == (0, 1)
    assert a1.enabled is True and a2.enabled is False
    assert a1.media is m1 and a1.gallery_id == gallery.id
    assert gallery_repo.saves == 2
    stored = gallery_repo.find_by_id(gallery.id)
    assert [a.media_id for a in stored.associations] == [m1.id, m2.id]


def test_create_honours_submitted_position(writer, media_repo, gallery):
    a = writer.create_association(gallery, media_repo.add(), {"position": 7})
    assert a.position == 7


def test_create_duplicate_is_conflict_without_save(writer, gallery_repo, media_repo, gallery):
    m = media_repo.add()
    writer.create_association(gallery, m, {})
    saves = gallery_repo.saves

    with pytest.raises(ConflictError):
        writer.create_association(gallery, m, {"position": 3})

    assert gallery_repo.saves == saves
    assert len(gallery.associations) == 1


def test_create_invalid_data_does_not_touch_gallery(writer, gallery_repo, media_repo, gallery):
    with pytest.raises(ValidationError) as ei:
        writer.create_association(gallery, media_repo.add(), {"position": -1})

    assert ei.value.errors[0]["field"] == "position"
    assert ei.value.submitted == {"position": -1}
    assert len(gallery.associations) == 0
    assert gallery_repo.saves == 0


def test_create_rejects_unknown_fields(writer, media_repo, gallery):
    with pytest.raises(ValidationError):
        writer.create_association(gallery, media_repo.add(), {"media": "nope"})


def test_update_changes_fields_and_keeps_position_when_omitted(writer, gallery_repo, media_repo, gallery):
    m = media_repo.add()
    writer.create_association(gallery, m, {"position": 4})

    updated = writer.update_association(gallery, m, {"enabled": True})
    assert updated.enabled is True
    assert updated.position == 4

    updated = writer.update_association(gallery, m, {"position": None})
    assert updated.position == 4

    updated = writer.update_association(gallery, m, {"position": 1})
    assert updated.position == 1
    assert gallery_repo.find_by_id(gallery.id).associations.find_by_media_id(m.id).position == 1


def test_update_is_idempotent(writer, gallery_repo, media_repo, gallery):
    m = media_repo.add()
    writer.create_association(gallery, m, {})

    writer.update_association(gallery, m, {"position": 2, "enabled": True})
    once = gallery_repo.find_by_id(gallery.id).associations.as_list()
    writer.update_association(gallery, m, {"position": 2, "enabled": True})
    twice = gallery_repo.find_by_id(gallery.id).associations.as_list()

    assert [(a.media_id, a.position, a.enabled) for a in once] == [(a.media_id, a.position, a.enabled) for a in twice]


def test_update_missing_association_is_not_found(writer, gallery_repo, media_repo, gallery):
    with pytest.raises(NotFoundError):
        writer.update_association(gallery, media_repo.add(), {"enabled": True})
    assert gallery_repo.saves == 0


def test_update_invalid_data_leaves_association_untouched(writer, media_repo, gallery):
    m = media_repo.add()
    a = writer.create_association(gallery, m, {"position": 2, "enabled": True})

    with pytest.raises(ValidationError):
        writer.update_association(gallery, m, {"position": "first"})

    assert (a.position, a.enabled) == (2, True)


def test_remove(writer, gallery_repo, media_repo, gallery):
    m1, m2 = media_repo.add("a"), media_repo.add("b")
    writer.create_association(gallery, m1, {})
    writer.create_association(gallery, m2, {})

    writer.remove_association(gallery, m1.id)

    assert [a.media_id for a in gallery_repo.find_by_id(gallery.id).associations] == [m2.id]


def test_remove_missing_is_not_found_without_save(writer, gallery_repo, gallery):
    with pytest.raises(NotFoundError):
        writer.remove_association(gallery, uuid4())
    assert gallery_repo.saves == 0
