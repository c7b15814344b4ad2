"""Pydantic models for the parts API.

Upstream models mirror the Bilibili pagelist envelope; public models are
the stable schema returned to callers.
"""

from pydantic import BaseModel


class UpstreamPart(BaseModel):
    """One entry of the upstream pagelist.

    Fields not listed here (from, vid, weblink, dimension, ...) are ignored;
    missing fields default to zero values.
    """

    cid: int = 0
    page: int = 0
    part: str = ""
    duration: int = 0  # seconds


class PagelistEnvelope(BaseModel):
    """Upstream pagelist response envelope.

    data is null when code is non-zero.
    """

    code: int
    message: str = ""
    ttl: int = 0
    data: list[UpstreamPart] | None = None


class PublicPart(BaseModel):
    """Part as exposed to callers."""

    cid: int
    page: int
    title: str
    duration: int  # seconds


class PartsResponse(BaseModel):
    """Successful response body."""

    parts: list[PublicPart]


class ErrorResponse(BaseModel):
    """Error response body."""

    error: str
    upstream_status: int | None = None
    upstream_code: int | None = None
