# app/comment/routes.py
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.comment import services as comment_service
from app.comment.schemas import CommentCreate, CommentOut
from app.core.database import get_db
from app.core.pagination import Page

router = APIRouter(prefix="/tickets/{ticket_id}/comments", tags=["Comments"])


@router.get("", response_model=Page[CommentOut])
def list_for_ticket(
    ticket_id: UUID,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    db: Session = Depends(get_db),
):
    result = comment_service.list_comments(db, ticket_id, page, limit)
    return Page[CommentOut].model_validate(result)


@router.post("", response_model=CommentOut, status_code=201)
def add(ticket_id: UUID, comment: CommentCreate, db: Session = Depends(get_db)):
    return comment_service.add_comment(db, ticket_id, comment)
