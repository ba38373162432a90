from __future__ import annotations

import re

from app.api.errors import INVALID_BODY, INVALID_ID
from app.crud.books import BookRepository, SqlBookRepository
from app.db.session import get_db
from app.schemas.books import BookIn
from fastapi import Depends, HTTPException, Request, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

# Decimal digits with an optional sign; no whitespace, underscores or fractions.
_BOOK_ID_RE = re.compile(r"[+-]?[0-9]+")


def get_book_repository(db: Session = Depends(get_db)) -> BookRepository:
    return SqlBookRepository(db)


def parse_book_id(book_id: str) -> int:
    if not _BOOK_ID_RE.fullmatch(book_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_ID)
    return int(book_id)


async def read_book_payload(request: Request) -> BookIn:
    """Decode the body as a Book whatever Content-Type the client sent."""
    body = await request.body()
    try:
        return BookIn.model_validate_json(body)
    except ValidationError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_BODY)
