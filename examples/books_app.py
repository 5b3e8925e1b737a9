"""Example FastAPI app serving a sortable, paginated book collection.

Run with:
    uvicorn examples.books_app:app --reload

Set FASTAPI_COLLECTIONS_COLLECTION_ENVELOPE=items to wrap the list in an
envelope with count metadata.
"""
from __future__ import annotations

from typing import Iterator

from fastapi import Depends, FastAPI, Request
from sqlalchemy import Integer, String, create_engine, select
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from fastapi_collections import (
    InvalidArgumentError,
    PaginatedDataProvider,
    SerializerDep,
    StandardPagination,
    invalid_argument_handler,
)
from fastapi_collections.sqlalchemy import SQLAlchemyCollectionProvider

DATABASE_URL = "sqlite:///./books_example.db"

engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
SessionLocal = sessionmaker(engine, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


class Book(Base):
    __tablename__ = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    def to_array(self, fields=None, expand=None):
        data = {"id": self.id, "title": self.title, "year": self.year}
        if fields:
            data = {key: value for key, value in data.items() if key in fields}
        return data


def get_session() -> Iterator[Session]:
    with SessionLocal() as session:
        yield session


app = FastAPI(title="Book collection example")
app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)


@app.on_event("startup")
def seed() -> None:
    Base.metadata.create_all(engine)
    with SessionLocal() as session:
        if session.scalar(select(Book.id).limit(1)) is None:
            session.add_all(
                [
                    Book(title="Dune", year=1965),
                    Book(title="Neuromancer", year=1984),
                    Book(title="Hyperion", year=1989),
                ]
            )
            session.commit()


@app.api_route("/books", methods=["GET", "HEAD"])
def list_books(
    request: Request,
    serializer: SerializerDep,
    session: Session = Depends(get_session),
):
    pagination = StandardPagination.from_params(request.query_params)
    provider = SQLAlchemyCollectionProvider(
        session,
        select(Book),
        offset=pagination.offset,
        limit=pagination.limit,
        sort={
            "attributes": ["title", "year"],
            "default_order": {"id": "asc"},
            "params": request.query_params,
        },
    )
    return serializer.serialize(provider)


@app.get("/years")
def list_years(request: Request, serializer: SerializerDep):
    pagination = StandardPagination.from_params(
        request.query_params, base_url=str(request.url)
    )
    return serializer.serialize(PaginatedDataProvider(range(1950, 2000), pagination))
