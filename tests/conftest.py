# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator
from itertools import count
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from postboard.api.v1.dependencies import get_media_store
from postboard.core.security import create_access_token
from postboard.db.session import Base
from postboard.db.session import get_db as app_get_session
from postboard.main import app as fastapi_app
from postboard.models import Category, Post, User
from postboard.services.media_store import MediaStoreClient, UploadedImage

TEST_DB_URL = "sqlite://"

_UPLOAD_COUNTER = count(1)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    # Repository commits only release savepoints; the outer transaction is rolled back.
    session = Session(
        bind=connection,
        autoflush=False,
        expire_on_commit=False,
        join_transaction_mode="create_savepoint",
    )

    try:
        yield session
    finally:
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


def _fake_upload(payload: str) -> UploadedImage:
    n = next(_UPLOAD_COUNTER)
    return UploadedImage(url=f"https://media.test/img-{n}.png", public_id=f"img-{n}")


@pytest.fixture()
def media_store(app: FastAPI) -> Iterator[AsyncMock]:
    """Replace the Cloudinary client with a recording mock."""
    store = AsyncMock(spec=MediaStoreClient)
    store.upload.side_effect = _fake_upload
    store.remove.return_value = None

    app.dependency_overrides[get_media_store] = lambda: store
    try:
        yield store
    finally:
        app.dependency_overrides.pop(get_media_store, None)


@pytest.fixture()
def client(app: FastAPI, media_store: AsyncMock) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def test_user(db_session: Session) -> Iterator[User]:
    """Create and return a persisted test user."""
    user = User(name="Test User")
    db_session.add(user)
    db_session.flush()
    db_session.refresh(user)
    yield user


@pytest.fixture()
def other_user(db_session: Session) -> Iterator[User]:
    """Create and return a second persisted user."""
    user = User(name="Other User")
    db_session.add(user)
    db_session.flush()
    db_session.refresh(user)
    yield user


@pytest.fixture()
def auth_token(test_user: User) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    token = create_access_token(test_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def other_auth_token(other_user: User) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    token = create_access_token(other_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def category(db_session: Session) -> Iterator[Category]:
    """Create a default test category."""
    category = Category(name="Travel")
    db_session.add(category)
    db_session.flush()
    db_session.refresh(category)
    yield category


@pytest.fixture()
def other_category(db_session: Session) -> Iterator[Category]:
    """Create a second category for move/update tests."""
    category = Category(name="Food")
    db_session.add(category)
    db_session.flush()
    db_session.refresh(category)
    yield category


@pytest.fixture()
def test_post(db_session: Session, test_user: User, category: Category) -> Iterator[Post]:
    """Create a post with an image owned by the primary test user."""
    post = Post(
        title="Original title",
        content="Original body",
        image_url="https://media.test/original.png",
        image_id="original",
        user_id=test_user.id,
        category_id=category.id,
    )
    db_session.add(post)
    db_session.flush()
    db_session.refresh(post)
    yield post
