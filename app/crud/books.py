from __future__ import annotations

from typing import Any, Protocol, cast

from app.models.book import Book
from app.schemas.books import BookIn, BookOut
from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import CursorResult
from sqlalchemy.orm import Session


class BookRepository(Protocol):
    """Data access for the ``books`` table.

    Every method maps to exactly one parameterized statement. Errors from the
    underlying store are not wrapped.
    """

    def create(self, book: BookIn) -> BookOut: ...

    def list(self) -> list[BookOut]: ...

    def update(self, book_id: int, book: BookIn) -> bool: ...

    def delete(self, book_id: int) -> bool: ...


class SqlBookRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, book: BookIn) -> BookOut:
        stmt = insert(Book).values(**book.model_dump()).returning(Book)
        row = self.db.execute(stmt).scalar_one()
        out = BookOut.model_validate(row)
        self.db.commit()
        return out

    def list(self) -> list[BookOut]:
        rows = self.db.execute(select(Book).order_by(Book.id)).scalars().all()
        return [BookOut.model_validate(r) for r in rows]

    def update(self, book_id: int, book: BookIn) -> bool:
        stmt = (
            update(Book)
            .where(Book.id == book_id)
            .values(**book.model_dump())
            .execution_options(synchronize_session=False)
        )
        res = cast(CursorResult[Any], self.db.execute(stmt))
        self.db.commit()
        return bool(res.rowcount)

    def delete(self, book_id: int) -> bool:
        stmt = (
            delete(Book)
            .where(Book.id == book_id)
            .execution_options(synchronize_session=False)
        )
        res = cast(CursorResult[Any], self.db.execute(stmt))
        self.db.commit()
        return bool(res.rowcount)
