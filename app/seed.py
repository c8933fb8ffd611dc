# app/seed.py
"""
Load demo tickets and comments into the configured database.

    python -m app.seed [--reset]
"""
import argparse
import logging

from sqlalchemy.orm import Session

from app.comment import services as comment_service
from app.comment.schemas import CommentCreate
from app.core.config import get_settings
from app.core.database import build_engine, build_session_factory, drop_db, init_db
from app.core.errors import RequestValidationFailed
from app.core.logging import configure_logging
from app.core.validation import Invalid, parse_input
from app.ticket import repository as ticket_repository
from app.ticket import services as ticket_service
from app.ticket.schemas import TicketCreate, TicketStatus

logger = logging.getLogger(__name__)

DEMO_TICKETS = [
    {
        "ticket": {
            "title": "Cannot log in to dashboard",
            "description": (
                "When I enter my credentials and click Sign In, the page just refreshes and I stay on the "
                "login screen. No error message is shown. This started happening after the last update."
            ),
            "priority": "HIGH",
        },
        "status": TicketStatus.OPEN,
        "comments": [
            {
                "authorName": "Support Agent",
                "message": "We are looking into the login issue. Can you confirm whether you use 2FA?",
            },
            {
                "authorName": "John Doe",
                "message": "Yes, I have 2FA enabled. I receive the code but after entering it the same thing happens.",
            },
        ],
    },
    {
        "ticket": {
            "title": "Export report shows wrong date range",
            "description": (
                "I selected January 1-31 in the date picker for the monthly report, but the exported CSV contains "
                "data from December. Please fix the export logic to respect the selected range."
            ),
            "priority": "MEDIUM",
        },
        "status": TicketStatus.IN_PROGRESS,
        "comments": [
            {
                "authorName": "Dev Team",
                "message": "The bug is in the timezone conversion. We will ship a fix in the next release.",
            },
        ],
    },
    {
        "ticket": {
            "title": "Suggestion: dark mode for the app",
            "description": (
                "It would be great to have a dark theme option in settings. Many users work in low-light "
                "environments and prefer dark backgrounds. Consider adding a toggle in the user preferences."
            ),
            "priority": "LOW",
        },
        "status": TicketStatus.RESOLVED,
        "comments": [],
    },
]


def _parse(model, data):
    result = parse_input(model, data)
    if isinstance(result, Invalid):
        raise RequestValidationFailed([v.as_dict() for v in result.violations])
    return result.value


def seed(db: Session, fixtures: list[dict] | None = None) -> tuple[int, int]:
    if fixtures is None:
        fixtures = DEMO_TICKETS
    tickets = comments = 0
    for fixture in fixtures:
        db_ticket = ticket_service.create_ticket(db, _parse(TicketCreate, fixture["ticket"]))
        # creation always yields OPEN; demo data needs the other states too
        if fixture["status"] != TicketStatus.OPEN:
            ticket_repository.update(db, db_ticket, {"status": fixture["status"]})
        tickets += 1
        for data in fixture["comments"]:
            comment_service.add_comment(db, db_ticket.id, _parse(CommentCreate, data))
            comments += 1
    return tickets, comments


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the support ticket database with demo data.")
    parser.add_argument("--reset", action="store_true", help="drop and recreate all tables first")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    try:
        if args.reset:
            logger.info("Dropping all tables")
            drop_db(engine)
        init_db(engine)
        with build_session_factory(engine)() as db:
            tickets, comments = seed(db)
    finally:
        engine.dispose()
    print(f"Seed completed. Created {tickets} tickets and {comments} comments.")


if __name__ == "__main__":
    main()
