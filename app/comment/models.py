# app/comment/models.py
from sqlalchemy import Column, ForeignKey, Index, String, Uuid

from app.core.database import Base
from app.core.models import CreatedAtMixin, UUIDPrimaryKeyMixin


class Comment(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "comments"
    __table_args__ = (Index("ix_comments_ticket_created", "ticket_id", "created_at"),)

    ticket_id = Column(Uuid, ForeignKey("tickets.id"), nullable=False)
    author_name = Column(String(100), nullable=False)
    message = Column(String(500), nullable=False)
