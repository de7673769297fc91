"""Shared fixtures: a testing app on in-memory SQLite with an in-memory search index."""

from __future__ import annotations

import pytest

from blog import create_app, db
from blog.model import Blog, Tag, User
from blog.repo.es.interfaces import ESEntryRepositoryInterface
from blog.repo.postgre.interfaces import EntryInterface
from config import Config
from tests.helpers.auth import bearer_headers
from tests.helpers.fakes import InMemoryESEntryRepository, SpyEntryRepository


class TestConfig(Config):
    __test__ = False

    TESTING = True
    SECRET_KEY = "test-secret-key-with-enough-length"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    AUTO_CREATE_SCHEMA = True
    ELASTICSEARCH_ENABLED = False
    LOG_TO_FILE = False
    APP_NAME = "blogApp"
    PAGINATION_DEFAULT_SIZE = 20
    PAGINATION_MAX_SIZE = 2000
    TOKEN_VALIDITY_SEC = 3600
    TOKEN_VALIDITY_REMEMBER_ME_SEC = 7200


@pytest.fixture
def es_repo() -> InMemoryESEntryRepository:
    return InMemoryESEntryRepository()


@pytest.fixture
def entry_repo() -> SpyEntryRepository:
    return SpyEntryRepository()


@pytest.fixture
def app(es_repo, entry_repo):
    app = create_app(
        TestConfig,
        dependencies={
            ESEntryRepositoryInterface.__name__: es_repo,
            EntryInterface.__name__: entry_repo,
        },
    )
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def seed(app):
    """Two users with one blog each, plus two tags. Returns their ids."""
    with app.app_context():
        alice = User(login="alice", password="alice-pass", email="alice@example.com").save()
        bob = User(login="bob", password="bob-pass", email="bob@example.com").save()
        inactive = User(login="carol", password="carol-pass", activated=False).save()
        alice_blog = Blog(name="Alice writes", handle="alice", user_id=alice.id).save()
        bob_blog = Blog(name="Bob writes", handle="bob", user_id=bob.id).save()
        python = Tag(name="python").save()
        flask = Tag(name="flask").save()
        return {
            "alice": alice.id,
            "bob": bob.id,
            "carol": inactive.id,
            "alice_blog": alice_blog.id,
            "bob_blog": bob_blog.id,
            "python": python.id,
            "flask": flask.id,
        }


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(app, seed):
    return bearer_headers(app, "alice")


@pytest.fixture
def bob_headers(app, seed):
    return bearer_headers(app, "bob")
