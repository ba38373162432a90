from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from app.api.deps import get_book_repository, parse_book_id, read_book_payload
from app.api.errors import INVALID_BOOK
from app.crud.books import BookRepository
from app.schemas.books import BookIn, BookOut
from fastapi import APIRouter, Depends, HTTPException, Response, status

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["books"])


def _require_valid(book: BookIn) -> None:
    if not book.is_valid():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_BOOK)


@contextmanager
def _store_errors(action: str) -> Iterator[None]:
    """Report any repository failure as a 500 carrying the error text."""
    try:
        yield
    except Exception as exc:
        logger.exception("%s failed", action)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc


@router.post("", response_model=BookOut, status_code=status.HTTP_201_CREATED)
def create_book(
    payload: BookIn = Depends(read_book_payload),
    repo: BookRepository = Depends(get_book_repository),
):
    _require_valid(payload)
    with _store_errors("create book"):
        book = repo.create(payload)
    logger.info("created book %d", book.id)
    return book


@router.get("", response_model=list[BookOut])
def list_books(repo: BookRepository = Depends(get_book_repository)):
    with _store_errors("list books"):
        return repo.list()


@router.put("/{book_id}", response_model=BookOut)
def update_book(
    book_id: int = Depends(parse_book_id),
    payload: BookIn = Depends(read_book_payload),
    repo: BookRepository = Depends(get_book_repository),
):
    _require_valid(payload)
    with _store_errors("update book"):
        matched = repo.update(book_id, payload)
    if not matched:
        logger.warning("update matched no book with id %d", book_id)
    return BookOut(id=book_id, **payload.model_dump())


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: int = Depends(parse_book_id),
    repo: BookRepository = Depends(get_book_repository),
):
    with _store_errors("delete book"):
        matched = repo.delete(book_id)
    if not matched:
        logger.warning("delete matched no book with id %d", book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
