"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest
from sqlalchemy import Integer, String, create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column
from sqlalchemy.pool import StaticPool
from starlette.requests import Request

from fastapi_collections.data.base import BaseCollectionProvider


@dataclass
class Book:
    id: int
    title: str
    year: int


class CountingProvider(BaseCollectionProvider):
    """Provider recording how often each extension point runs."""

    def __init__(self, models, *, total=None, **kwargs):
        super().__init__(**kwargs)
        self.source = list(models)
        self.total = len(self.source) if total is None else total
        self.calls = {"models": 0, "keys": 0, "total": 0}

    def prepare_models(self):
        self.calls["models"] += 1
        return list(self.source)

    def prepare_keys(self, models):
        self.calls["keys"] += 1
        return [model.id for model in models]

    def prepare_total_count(self):
        self.calls["total"] += 1
        return self.total


@dataclass
class FormModel:
    """Validatable and array-representable model."""

    name: str
    errors: dict[str, list[str]] = field(default_factory=dict)

    def has_errors(self):
        return bool(self.errors)

    def get_errors(self):
        return self.errors

    def to_array(self, fields=None, expand=None):
        data = {"name": self.name, "length": len(self.name)}
        if fields:
            data = {key: value for key, value in data.items() if key in fields}
        if expand and "upper" in expand:
            data["upper"] = self.name.upper()
        return data


class Base(DeclarativeBase):
    pass


class Article(Base):
    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)


def make_request(method="GET", query_string=b""):
    """Build a bare Starlette request for the given method and query."""
    scope = {
        "type": "http",
        "method": method,
        "path": "/",
        "query_string": query_string,
        "headers": [],
    }
    return Request(scope)


@pytest.fixture
def books():
    return [
        Book(id=1, title="Dune", year=1965),
        Book(id=2, title="Neuromancer", year=1984),
        Book(id=3, title="Hyperion", year=1989),
    ]


@pytest.fixture
def provider(books):
    return CountingProvider(books, total=42)


@pytest.fixture
def session():
    """In-memory SQLite session with five articles."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    with Session(engine) as db:
        db.add_all(
            [
                Article(id=1, title="alpha", rating=3),
                Article(id=2, title="bravo", rating=5),
                Article(id=3, title="charlie", rating=1),
                Article(id=4, title="delta", rating=4),
                Article(id=5, title="echo", rating=2),
            ]
        )
        db.commit()
        yield db
    engine.dispose()
