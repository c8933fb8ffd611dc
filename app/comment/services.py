# app/comment/services.py
import logging
from uuid import UUID

from sqlalchemy.orm import Session

from app.comment import repository
from app.comment.models import Comment
from app.comment.schemas import CommentCreate
from app.core.pagination import PageResult
from app.ticket.services import get_ticket

logger = logging.getLogger(__name__)


def list_comments(db: Session, ticket_id: UUID, page: int, limit: int) -> PageResult:
    get_ticket(db, ticket_id)
    return repository.find_by_ticket(db, ticket_id, page, limit)


def add_comment(db: Session, ticket_id: UUID, payload: CommentCreate) -> Comment:
    get_ticket(db, ticket_id)
    db_comment = repository.create(db, ticket_id, author_name=payload.author_name, message=payload.message)
    logger.info("Added comment %s to ticket %s", db_comment.id, ticket_id)
    return db_comment
