from __future__ import annotations

from sqlalchemy import Boolean, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class Book(Base):
    __tablename__ = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(Text, nullable=False)

    # Non-negative progress is enforced by the HTTP handlers, not the table.
    progress: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True, default="")
    finished: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)
    rating: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
