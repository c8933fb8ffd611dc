# app/comment/schemas.py
from datetime import datetime
from uuid import UUID

from pydantic import Field

from app.core.schemas import CamelModel


class CommentCreate(CamelModel):
    author_name: str = Field(..., min_length=1, max_length=100)
    message: str = Field(..., min_length=1, max_length=500)


class CommentOut(CommentCreate):
    id: UUID
    ticket_id: UUID
    created_at: datetime
