"""Parts API endpoint.

GET /bilibili-parts?url=<BV id or video URL> - List video parts
OPTIONS /bilibili-parts - Cross-origin preflight
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from bilibili_parts.api.app import get_cors_policy, get_provider
from bilibili_parts.api.cors import ALLOWED_METHODS, CorsPolicy
from bilibili_parts.core.identity import extract_bvid
from bilibili_parts.errors import ClientInputError, InternalError, PartsNotFound, PartsServiceError
from bilibili_parts.models.types import ErrorResponse, PartsResponse
from bilibili_parts.normalize.parts import build_parts_response
from bilibili_parts.providers.base import ProviderBase

logger = logging.getLogger(__name__)

router = APIRouter()

PARTS_PATH = "/bilibili-parts"
REJECTED_METHODS = ["POST", "PUT", "PATCH", "DELETE", "HEAD"]


def _error_response(error: PartsServiceError, headers: dict[str, str]) -> JSONResponse:
    """Render a pipeline error as a JSON body with its status."""
    body = ErrorResponse(
        error=error.message,
        upstream_status=getattr(error, "upstream_status", None),
        upstream_code=getattr(error, "upstream_code", None),
    )
    return JSONResponse(
        status_code=error.status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


def _fetch_parts(raw_input: str | None, provider: ProviderBase) -> PartsResponse:
    """Run extract -> fetch -> translate for one request.

    Args:
        raw_input: Value of the url query parameter.
        provider: Upstream provider.

    Returns:
        PartsResponse with at least one part.

    Raises:
        PartsServiceError: Any classified failure.
    """
    if not raw_input:
        logger.warning("Missing 'url' parameter")
        raise ClientInputError("Missing 'url' parameter")

    bvid = extract_bvid(raw_input)
    if bvid is None:
        logger.warning(f"Invalid BVid format for input: {raw_input}")
        raise ClientInputError("Invalid BV id or video URL format")

    logger.info(f"Received request, processing BVid: {bvid}")

    envelope = provider.fetch_envelope(bvid)
    try:
        return build_parts_response(envelope)
    except PartsNotFound:
        logger.info(f"No parts found for BVid: {bvid}")
        raise


@router.options(PARTS_PATH, include_in_schema=False)
def preflight(
    request: Request,
    cors: CorsPolicy = Depends(get_cors_policy),
) -> Response:
    """Answer cross-origin preflight.

    Always 200 with an empty body; permission headers only for allowed
    origins.
    """
    logger.info("Received OPTIONS request for CORS preflight")
    return Response(status_code=200, headers=cors.headers_for(request.headers.get("origin")))


@router.get(
    PARTS_PATH,
    response_model=PartsResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
def get_parts(
    request: Request,
    url: str | None = None,
    cors: CorsPolicy = Depends(get_cors_policy),
    provider: ProviderBase = Depends(get_provider),
) -> Response:
    """List the parts of a Bilibili video.

    Args:
        request: Incoming request (for the Origin header).
        url: BV id or full video URL.
        cors: Cross-origin policy (injected).
        provider: Upstream provider (injected).

    Returns:
        200 with {"parts": [...]}, or an ErrorResponse with the mapped status.
    """
    headers = cors.headers_for(request.headers.get("origin"))

    try:
        body = _fetch_parts(url, provider)
        response = JSONResponse(content=body.model_dump(), headers=headers)
    except PartsServiceError as e:
        return _error_response(e, headers)
    except Exception:
        logger.exception(f"Unexpected failure while handling input: {url}")
        return _error_response(InternalError(), headers)

    logger.info(f"Successfully returned {len(body.parts)} parts")
    return response


@router.api_route(PARTS_PATH, methods=REJECTED_METHODS, include_in_schema=False)
def method_not_allowed(
    request: Request,
    cors: CorsPolicy = Depends(get_cors_policy),
) -> Response:
    """Reject every method other than GET and OPTIONS with 405."""
    logger.warning(f"Received unsupported request method: {request.method}")
    headers = cors.headers_for(request.headers.get("origin"))
    headers["Allow"] = ALLOWED_METHODS
    return JSONResponse(
        status_code=405,
        content=ErrorResponse(error="Only GET requests are supported").model_dump(exclude_none=True),
        headers=headers,
    )
