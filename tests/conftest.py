"""Shared test fixtures for sqla-admin-decor tests."""

from __future__ import annotations

import datetime
import enum

import pytest
from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    create_engine,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    Session,
    column_property,
    mapped_column,
    relationship,
    sessionmaker,
)

from sqla_admin_decor.adapters._base import BaseProperty, BaseResource
from sqla_admin_decor.adapters._sqlalchemy import SQLAlchemyResource
from sqla_admin_decor.config._config import _reset_global_config
from sqla_admin_decor.testing._actors import MockAdmin

# Fixtures shipped with the library, imported for test discovery.
from sqla_admin_decor.testing._fixtures import (  # noqa: F401
    admin_config,
    admin_registry,
    isolated_admin_state,
)

# ---------------------------------------------------------------------------
# Test models
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


class Status(enum.Enum):
    draft = "draft"
    published = "published"
    archived = "archived"


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str] = mapped_column(String(200))
    first_name: Mapped[str] = mapped_column(String(100))
    password: Mapped[str] = mapped_column(String(200))
    created_at: Mapped[datetime.datetime | None] = mapped_column(DateTime, nullable=True)

    posts: Mapped[list[Post]] = relationship("Post", back_populates="author")


class Post(Base):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(200))
    body: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_published: Mapped[bool] = mapped_column(Boolean, default=False)
    status: Mapped[Status] = mapped_column(Enum(Status), default=Status.draft)
    rating: Mapped[float | None] = mapped_column(Float, nullable=True)
    published_on: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)
    author_id: Mapped[int] = mapped_column(ForeignKey("users.id"))

    author: Mapped[User] = relationship("User", back_populates="posts")


class Author(Base):
    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first: Mapped[str] = mapped_column(String(100))
    last: Mapped[str] = mapped_column(String(100))
    full_name: Mapped[str] = column_property(first + " " + last)


# ---------------------------------------------------------------------------
# Plain in-memory resource
# ---------------------------------------------------------------------------


class MemoryResource(BaseResource):
    """Resource over a fixed list of ``BaseProperty`` descriptors."""

    def __init__(
        self,
        properties: list[BaseProperty],
        *,
        resource_id: str = "items",
        database_name: str = "memory",
        database_type: str | None = None,
    ) -> None:
        self._properties = properties
        self._id = resource_id
        self._database_name = database_name
        self._database_type = database_type

    def id(self) -> str:
        return self._id

    def database_name(self) -> str:
        return self._database_name

    def database_type(self) -> str | None:
        return self._database_type

    def properties(self) -> list[BaseProperty]:
        return list(self._properties)


def make_properties(*names: str) -> list[BaseProperty]:
    """Build plain properties; ``id`` becomes the primary key."""
    return [BaseProperty(name, is_id=(name == "id")) for name in names]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_config():
    """Every test starts from and leaves behind the default global config."""
    _reset_global_config()
    yield
    _reset_global_config()


@pytest.fixture()
def engine():
    """Create an in-memory SQLite engine with all tables."""
    eng = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(eng)
    return eng


@pytest.fixture()
def session(engine):
    """Provide a transactional session that rolls back after each test."""
    factory = sessionmaker(bind=engine)
    sess = factory()
    try:
        yield sess
    finally:
        sess.rollback()
        sess.close()


@pytest.fixture()
def sample_data(session: Session) -> dict[str, list]:
    """Seed the database with sample data for testing."""
    alice = User(id=1, email="alice@example.com", first_name="Alice", password="x")
    bob = User(id=2, email="bob@example.com", first_name="Bob", password="y")
    session.add_all([alice, bob])

    post1 = Post(id=1, title="Public Post", is_published=True, author_id=1)
    post2 = Post(id=2, title="Draft Post", is_published=False, author_id=2)
    session.add_all([post1, post2])

    session.flush()
    return {"users": [alice, bob], "posts": [post1, post2]}


@pytest.fixture()
def post_resource() -> SQLAlchemyResource:
    return SQLAlchemyResource(Post)


@pytest.fixture()
def user_resource() -> SQLAlchemyResource:
    return SQLAlchemyResource(User)


@pytest.fixture()
def admin() -> MockAdmin:
    return MockAdmin(id=1, role="admin")


@pytest.fixture()
def viewer() -> MockAdmin:
    return MockAdmin(id=3, role="viewer")
