# tests/services/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy.orm import Session
from starlette.testclient import TestClient

from hexgallery.database.repos.media_repo import SqlAlchemyMediaRepo
from hexgallery.domain.entities.media import Media
from hexgallery.services.api.app import create_app
from hexgallery.services.api.deps import transactional_session


@pytest.fixture()
def api_session(db_engine):
    """One connection/transaction for the whole test, rolled back at the end."""
    conn = db_engine.connect()
    trans = conn.begin()
    session = Session(bind=conn, future=True)
    try:
        yield session
    finally:
        session.close()
        trans.rollback()
        conn.close()


@pytest.fixture()
def api_client(api_session):
    """
    A TestClient whose FastAPI dependency `transactional_session` is overridden
    to yield `api_session`. All API calls in one test share the same session
    (so POST -> GET works), and everything is rolled back at the end of the test.
    """
    app = create_app()

    def _override():
        # yield the same session for every request in this test
        yield api_session

    app.dependency_overrides[transactional_session] = _override

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def make_media(api_session):
    """Seed a media row the API can link to."""
    repo = SqlAlchemyMediaRepo(api_session)

    def _make(name: str = "photo.jpg", **kw) -> Media:
        return repo.add(Media(name=name, enabled=True, content_type="image/jpeg", **kw))

    return _make
