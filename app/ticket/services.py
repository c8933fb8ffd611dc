# app/ticket/services.py
import logging
from uuid import UUID

from sqlalchemy.orm import Session

from app.core.errors import NotFoundError
from app.core.pagination import PageResult
from app.ticket import repository
from app.ticket.models import Ticket
from app.ticket.schemas import TicketCreate, TicketListQuery, TicketStatus, TicketUpdate

logger = logging.getLogger(__name__)


def list_tickets(db: Session, params: TicketListQuery) -> PageResult:
    return repository.find_many(db, params)


def get_ticket(db: Session, ticket_id: UUID) -> Ticket:
    db_ticket = repository.find_by_id(db, ticket_id)
    if db_ticket is None:
        logger.debug("Ticket %s not found", ticket_id)
        raise NotFoundError("Ticket")
    return db_ticket


def create_ticket(db: Session, payload: TicketCreate) -> Ticket:
    db_ticket = repository.create(
        db,
        title=payload.title,
        description=payload.description,
        status=TicketStatus.OPEN,
        priority=payload.priority,
    )
    logger.info("Created ticket %s (priority=%s)", db_ticket.id, db_ticket.priority.value)
    return db_ticket


def update_ticket(db: Session, ticket_id: UUID, payload: TicketUpdate) -> Ticket:
    db_ticket = get_ticket(db, ticket_id)
    changes = payload.model_dump(exclude_unset=True)
    db_ticket = repository.update(db, db_ticket, changes)
    logger.info("Updated ticket %s fields=%s", ticket_id, sorted(changes))
    return db_ticket


def delete_ticket(db: Session, ticket_id: UUID) -> None:
    db_ticket = get_ticket(db, ticket_id)
    repository.soft_delete(db, db_ticket)
    logger.info("Soft-deleted ticket %s", ticket_id)
