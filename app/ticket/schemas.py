# app/ticket/schemas.py
from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from app.core.schemas import CamelModel


class TicketStatus(str, Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"


class TicketPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class TicketSort(str, Enum):
    CREATED_AT_ASC = "createdAt_asc"
    CREATED_AT_DESC = "createdAt_desc"


class TicketBase(CamelModel):
    title: str = Field(..., min_length=5, max_length=80)
    description: str = Field(..., min_length=20, max_length=2000)


class TicketCreate(TicketBase):
    # status is not accepted here: new tickets always start OPEN
    priority: TicketPriority = TicketPriority.MEDIUM


class TicketUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=5, max_length=80)
    description: str | None = Field(default=None, min_length=20, max_length=2000)
    status: TicketStatus | None = None
    priority: TicketPriority | None = None

    @field_validator("title", "description", "status", "priority")
    @classmethod
    def reject_null(cls, value):
        # defaults are not validated, so this only fires for an explicit null
        if value is None:
            raise PydanticCustomError("null_not_allowed", "Field may be omitted but not null")
        return value


class TicketOut(TicketBase):
    id: UUID
    status: TicketStatus
    priority: TicketPriority
    created_at: datetime
    updated_at: datetime


class TicketListQuery(CamelModel):
    search: str | None = None
    status: TicketStatus | None = None
    priority: TicketPriority | None = None
    sort: TicketSort = TicketSort.CREATED_AT_DESC
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)
