from __future__ import annotations

import os
from collections.abc import Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from agora_forum.core.security import create_access_token
from agora_forum.db.session import Base
from agora_forum.db.session import get_db as app_get_session
from agora_forum.main import app as fastapi_app
from agora_forum.models import Account, Comment, Forum, Post
from agora_forum.services import CommentService, PostService, Principal

TEST_DB_URL = "sqlite://"


@pytest.fixture()
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
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


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


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


def _make_account(db_session: Session, username: str) -> Account:
    account = Account(username=username, display_name=username.title())
    db_session.add(account)
    db_session.commit()
    return account


@pytest.fixture()
def alice(db_session: Session) -> Principal:
    """Signed-in principal backed by a persisted account."""
    _make_account(db_session, "alice")
    return Principal(username="alice")


@pytest.fixture()
def bob(db_session: Session) -> Principal:
    """Second signed-in principal backed by a persisted account."""
    _make_account(db_session, "bob")
    return Principal(username="bob")


@pytest.fixture()
def alice_headers(alice: Principal) -> dict[str, str]:
    """Return authorization headers for alice."""
    return {"Authorization": f"Bearer {create_access_token(alice.username)}"}


@pytest.fixture()
def bob_headers(bob: Principal) -> dict[str, str]:
    """Return authorization headers for bob."""
    return {"Authorization": f"Bearer {create_access_token(bob.username)}"}


@pytest.fixture()
def forum(db_session: Session) -> Forum:
    """Create an empty forum with id F1."""
    forum = Forum(id="F1", name="General")
    db_session.add(forum)
    db_session.commit()
    return forum


@pytest.fixture()
def post_service(db_session: Session) -> PostService:
    return PostService(db_session)


@pytest.fixture()
def comment_service(db_session: Session) -> CommentService:
    return CommentService(db_session)


@pytest.fixture()
def alice_post(post_service: PostService, forum: Forum, alice: Principal) -> Post:
    """A post authored by alice in forum F1."""
    updated = post_service.create_post(forum.id, "Hello", "First post", alice)
    return updated.posts[-1]


@pytest.fixture()
def alice_comment(comment_service: CommentService, alice_post: Post, alice: Principal) -> Comment:
    """A comment by alice on her own post."""
    view = comment_service.submit_comment(alice_post.id, alice, "First comment")
    return view.post.comments[-1]
