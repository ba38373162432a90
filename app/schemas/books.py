from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class BookIn(BaseModel):
    """Request body for create and update; any ``id`` in the payload is ignored."""

    # Strict: JSON types must match exactly ("5" or 5.0 is not a progress value).
    model_config = ConfigDict(extra="ignore", strict=True)

    title: str = ""
    author: str = ""
    progress: int = 0
    notes: str = ""
    finished: bool = False
    rating: int = 0

    def is_valid(self) -> bool:
        return bool(self.title) and bool(self.author) and self.progress >= 0


class BookOut(BaseModel):
    id: int
    title: str
    author: str
    progress: int = 0
    notes: str = ""
    finished: bool = False
    rating: int = 0

    model_config = ConfigDict(from_attributes=True)

    # Columns other than title/author are nullable in the table.
    @field_validator("progress", "rating", mode="before")
    @classmethod
    def _null_int(cls, v):
        return 0 if v is None else v

    @field_validator("notes", mode="before")
    @classmethod
    def _null_str(cls, v):
        return "" if v is None else v

    @field_validator("finished", mode="before")
    @classmethod
    def _null_bool(cls, v):
        return False if v is None else v
