# app/core/pagination.py
import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from sqlalchemy.orm import Query

from app.core.schemas import CamelModel

T = TypeVar("T")


class Page(CamelModel, Generic[T]):
    items: list[T]
    total: int
    page: int
    limit: int
    total_pages: int


@dataclass
class PageResult(Generic[T]):
    items: list[T]
    total: int
    page: int
    limit: int
    total_pages: int


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if total else 0


def paginate(query: Query, page: int, limit: int) -> PageResult:
    """Run an ordered query for one page and count the whole filtered set."""
    total = query.order_by(None).count()
    offset = (page - 1) * limit
    # past the last page: skip the row query, huge offsets overflow the driver
    items = query.offset(offset).limit(limit).all() if offset < total else []
    return PageResult(
        items=items,
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages(total, limit),
    )
