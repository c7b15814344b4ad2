"""Mock provider for demo/testing.

Returns a canned envelope or raises a canned error without calling the
network, so the request handler can be exercised offline.
"""

from __future__ import annotations

from bilibili_parts.errors import PartsServiceError
from bilibili_parts.models.types import PagelistEnvelope
from bilibili_parts.providers.base import ProviderBase


class MockProvider(ProviderBase):
    """Mock provider that replays a fixed outcome.

    Records every BV id it was asked for in `calls`.
    """

    def __init__(
        self,
        envelope: PagelistEnvelope | None = None,
        error: PartsServiceError | None = None,
    ):
        """Initialize mock provider.

        Args:
            envelope: Envelope to return. Defaults to code 0 with no parts.
            error: Error to raise instead of returning.
        """
        self.envelope = envelope if envelope is not None else PagelistEnvelope(code=0, data=[])
        self.error = error
        self.calls: list[str] = []

    def fetch_envelope(self, bvid: str) -> PagelistEnvelope:
        """Return the canned envelope or raise the canned error."""
        self.calls.append(bvid)
        if self.error is not None:
            raise self.error
        return self.envelope
