from app.models.base import Base
from app.models.book import Book


__all__ = [
    "Base",
    "Book",
]
