"""Response envelopes shared by every endpoint"""

import math
from datetime import datetime
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Meta(BaseModel):
    timestamp: datetime
    path: str
    request_id: Optional[str] = None


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope"""
    success: bool = True
    data: T
    meta: Meta


class ErrorBody(BaseModel):
    code: str
    message: str
    details: Optional[Any] = None


class ErrorResponse(BaseModel):
    """Error envelope"""
    success: bool = False
    error: ErrorBody
    meta: Meta


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> 'Pagination':
        total_pages = math.ceil(total / limit) if limit else 0
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )


class Paginated(BaseModel, Generic[T]):
    items: List[T]
    pagination: Pagination


class MessageResponse(BaseModel):
    message: str
