# app/comment/repository.py
from uuid import UUID

from sqlalchemy.orm import Session

from app.comment.models import Comment
from app.core.pagination import PageResult, paginate


def find_by_ticket(db: Session, ticket_id: UUID, page: int, limit: int) -> PageResult:
    # oldest first, unlike the ticket list
    query = (
        db.query(Comment)
        .filter(Comment.ticket_id == ticket_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
    )
    return paginate(query, page, limit)


def create(db: Session, ticket_id: UUID, author_name: str, message: str) -> Comment:
    db_comment = Comment(ticket_id=ticket_id, author_name=author_name, message=message)
    db.add(db_comment)
    db.commit()
    db.refresh(db_comment)
    return db_comment
