"""Envelope builders used by routes and error handlers"""

from datetime import datetime, timezone
from typing import Any

from fastapi import Request

from ..application.dtos.common import ApiResponse, Meta


def build_meta(request: Request) -> Meta:
    return Meta(
        timestamp=datetime.now(timezone.utc),
        path=request.url.path,
        request_id=getattr(request.state, "request_id", None),
    )


def ok(request: Request, data: Any) -> ApiResponse:
    return ApiResponse(data=data, meta=build_meta(request))
