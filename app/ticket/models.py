# app/ticket/models.py
from sqlalchemy import Column, Enum, Index, String

from app.core.database import Base
from app.core.models import TimestampMixin, UTCDateTime, UUIDPrimaryKeyMixin
from app.ticket.schemas import TicketPriority, TicketStatus


class Ticket(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "tickets"
    __table_args__ = (Index("ix_tickets_deleted_created", "deleted_at", "created_at"),)

    title = Column(String(80), nullable=False)
    description = Column(String(2000), nullable=False)
    status = Column(
        Enum(TicketStatus, native_enum=False, length=20), default=TicketStatus.OPEN, nullable=False, index=True
    )
    priority = Column(
        Enum(TicketPriority, native_enum=False, length=20), default=TicketPriority.MEDIUM, nullable=False, index=True
    )
    deleted_at = Column(UTCDateTime, nullable=True)
