# app/ticket/repository.py
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from app.core.models import utcnow
from app.core.pagination import PageResult, paginate
from app.ticket.models import Ticket
from app.ticket.schemas import TicketListQuery, TicketPriority, TicketSort, TicketStatus


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def live_tickets(db: Session) -> Query:
    """Base query for every ticket read: soft-deleted rows are never visible."""
    return db.query(Ticket).filter(Ticket.deleted_at.is_(None))


def filtered_tickets(db: Session, params: TicketListQuery) -> Query:
    query = live_tickets(db)
    if params.status:
        query = query.filter(Ticket.status == params.status)
    if params.priority:
        query = query.filter(Ticket.priority == params.priority)

    search = (params.search or "").strip()
    if search:
        pattern = f"%{_escape_like(search)}%"
        query = query.filter(
            or_(
                Ticket.title.ilike(pattern, escape="\\"),
                Ticket.description.ilike(pattern, escape="\\"),
            )
        )

    # id breaks ties between tickets created in the same instant
    if params.sort == TicketSort.CREATED_AT_ASC:
        return query.order_by(Ticket.created_at.asc(), Ticket.id.asc())
    return query.order_by(Ticket.created_at.desc(), Ticket.id.desc())


def find_many(db: Session, params: TicketListQuery) -> PageResult:
    return paginate(filtered_tickets(db, params), params.page, params.limit)


def find_by_id(db: Session, ticket_id: UUID) -> Ticket | None:
    return live_tickets(db).filter(Ticket.id == ticket_id).first()


def create(db: Session, title: str, description: str, status: TicketStatus, priority: TicketPriority) -> Ticket:
    db_ticket = Ticket(title=title, description=description, status=status, priority=priority)
    db.add(db_ticket)
    db.commit()
    db.refresh(db_ticket)
    return db_ticket


def update(db: Session, db_ticket: Ticket, changes: dict) -> Ticket:
    for field, value in changes.items():
        setattr(db_ticket, field, value)
    # an empty change set still counts as a mutation
    db_ticket.updated_at = utcnow()
    db.commit()
    db.refresh(db_ticket)
    return db_ticket


def soft_delete(db: Session, db_ticket: Ticket) -> Ticket:
    db_ticket.deleted_at = utcnow()
    db.commit()
    db.refresh(db_ticket)
    return db_ticket
