# app/ticket/routes.py
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.pagination import Page
from app.ticket import services as ticket_service
from app.ticket.schemas import (
    TicketCreate,
    TicketListQuery,
    TicketOut,
    TicketPriority,
    TicketSort,
    TicketStatus,
    TicketUpdate,
)

router = APIRouter(prefix="/tickets", tags=["Tickets"])


@router.get("", response_model=Page[TicketOut])
@router.get("/", response_model=Page[TicketOut], include_in_schema=False)
def list_all(
    q: str | None = Query(default=None, description="Case-insensitive substring of title or description"),
    status: TicketStatus | None = Query(default=None),
    priority: TicketPriority | None = Query(default=None),
    sort: TicketSort = Query(default=TicketSort.CREATED_AT_DESC),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    db: Session = Depends(get_db),
):
    params = TicketListQuery(search=q, status=status, priority=priority, sort=sort, page=page, limit=limit)
    result = ticket_service.list_tickets(db, params)
    return Page[TicketOut].model_validate(result)


@router.post("", response_model=TicketOut, status_code=201)
@router.post("/", response_model=TicketOut, status_code=201, include_in_schema=False)
def create(ticket: TicketCreate, db: Session = Depends(get_db)):
    return ticket_service.create_ticket(db, ticket)


@router.get("/{ticket_id}", response_model=TicketOut)
def get(ticket_id: UUID, db: Session = Depends(get_db)):
    return ticket_service.get_ticket(db, ticket_id)


@router.patch("/{ticket_id}", response_model=TicketOut)
def update(ticket_id: UUID, ticket: TicketUpdate, db: Session = Depends(get_db)):
    return ticket_service.update_ticket(db, ticket_id, ticket)


@router.delete("/{ticket_id}", status_code=204, response_class=Response)
def delete(ticket_id: UUID, db: Session = Depends(get_db)):
    ticket_service.delete_ticket(db, ticket_id)
    return Response(status_code=204)
