from __future__ import annotations

from app.api.routes import books, health
from fastapi import APIRouter

api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(books.router)
