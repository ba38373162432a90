from __future__ import annotations

import threading

from app.schemas.books import BookIn, BookOut


class InMemoryBookRepository:
    """Dict-backed BookRepository with the same semantics as the SQL store."""

    def __init__(self, books: list[BookIn] | None = None):
        self._lock = threading.Lock()
        self._books: dict[int, BookOut] = {}
        self._next_id = 1
        for b in books or []:
            self.create(b)

    def create(self, book: BookIn) -> BookOut:
        with self._lock:
            out = BookOut(id=self._next_id, **book.model_dump())
            self._books[out.id] = out
            self._next_id += 1
            return out.model_copy()

    def list(self) -> list[BookOut]:
        with self._lock:
            return [self._books[k].model_copy() for k in sorted(self._books)]

    def update(self, book_id: int, book: BookIn) -> bool:
        with self._lock:
            if book_id not in self._books:
                return False
            self._books[book_id] = BookOut(id=book_id, **book.model_dump())
            return True

    def delete(self, book_id: int) -> bool:
        with self._lock:
            return self._books.pop(book_id, None) is not None
