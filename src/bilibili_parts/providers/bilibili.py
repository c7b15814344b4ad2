"""Bilibili pagelist provider.

Calls the public pagelist endpoint once per request with a bounded
timeout and browser-like headers, then classifies the outcome.
"""

from __future__ import annotations

import logging
import time

import httpx
from pydantic import ValidationError

from bilibili_parts.config import DEFAULT_API_TIMEOUT, DEFAULT_USER_AGENT
from bilibili_parts.errors import (
    InternalError,
    UpstreamApplicationError,
    UpstreamParseError,
    UpstreamStatusError,
    UpstreamUnavailable,
)
from bilibili_parts.models.types import PagelistEnvelope
from bilibili_parts.providers.base import ProviderBase

logger = logging.getLogger(__name__)

PAGELIST_URL = "https://api.bilibili.com/x/player/pagelist"
VIDEO_PAGE_URL = "https://www.bilibili.com/video/{bvid}"


class BilibiliProvider(ProviderBase):
    """Provider backed by the Bilibili pagelist API."""

    def __init__(
        self,
        timeout: float = DEFAULT_API_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        debug: bool = False,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize provider.

        Args:
            timeout: Upstream timeout in seconds.
            user_agent: User-Agent header value.
            debug: Log raw response bodies.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.debug = debug
        self.transport = transport

    def _build_headers(self, bvid: str) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Referer": VIDEO_PAGE_URL.format(bvid=bvid),
        }

    def _request(self, bvid: str) -> tuple[int, bytes]:
        """Perform the GET under one overall deadline.

        httpx timeouts bound each connect/read separately, so the body is
        streamed and the deadline is checked between chunks. The client and
        response are closed on every exit path.

        Returns:
            (status_code, body)
        """
        deadline = time.monotonic() + self.timeout
        with httpx.Client(
            timeout=self.timeout, transport=self.transport, follow_redirects=True
        ) as client:
            try:
                request = client.build_request(
                    "GET",
                    PAGELIST_URL,
                    params={"bvid": bvid},
                    headers=self._build_headers(bvid),
                )
            except httpx.InvalidURL as e:
                logger.error(f"Failed to build Bilibili API request for {bvid}: {e}")
                raise InternalError() from e

            logger.info(f"Attempting to fetch from Bilibili API: {request.url}")

            try:
                response = client.send(request, stream=True)
            except httpx.TimeoutException as e:
                logger.error(f"Bilibili API request timed out after {self.timeout}s for {bvid}: {e}")
                raise UpstreamUnavailable() from e
            except httpx.RequestError as e:
                logger.error(f"Bilibili API request failed for {bvid}: {e}")
                raise UpstreamUnavailable() from e

            try:
                chunks = []
                for chunk in response.iter_bytes():
                    chunks.append(chunk)
                    if time.monotonic() > deadline:
                        logger.error(f"Bilibili API response exceeded {self.timeout}s for {bvid}")
                        raise UpstreamUnavailable()
            except httpx.TimeoutException as e:
                logger.error(f"Bilibili API response timed out after {self.timeout}s for {bvid}: {e}")
                raise UpstreamUnavailable() from e
            except httpx.RequestError as e:
                logger.error(f"Failed to read Bilibili API response for {bvid}: {e}")
                raise InternalError() from e
            finally:
                response.close()

            return response.status_code, b"".join(chunks)

    def fetch_envelope(self, bvid: str) -> PagelistEnvelope:
        """Fetch and classify the pagelist envelope.

        Args:
            bvid: Validated BV id.

        Returns:
            Envelope with code 0. data may still be empty.
        """
        status_code, body = self._request(bvid)
        logger.info(f"Received response from Bilibili API with status: {status_code}")

        text = body.decode("utf-8", errors="replace")
        if self.debug:
            logger.info(f"Bilibili API raw response body: {text}")

        if not 200 <= status_code < 300:
            logger.error(f"Bilibili API returned status {status_code} for {bvid}, body: {text}")
            raise UpstreamStatusError(status_code)

        try:
            envelope = PagelistEnvelope.model_validate_json(body)
        except ValidationError as e:
            logger.error(f"Failed to parse Bilibili API response for {bvid}: {e}, body: {text}")
            raise UpstreamParseError() from e

        if envelope.code != 0:
            logger.error(
                f"Bilibili API returned error code {envelope.code} for {bvid}: {envelope.message}"
            )
            raise UpstreamApplicationError(envelope.code, envelope.message)

        return envelope
