"""Base provider interface.

Provider adapter: narrow interface `fetch_envelope(bvid) -> envelope`
- Forbidden: response shaping, HTTP status decisions for the caller
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bilibili_parts.models.types import PagelistEnvelope


class ProviderBase(ABC):
    """Abstract base class for pagelist providers.

    Providers perform exactly one upstream round trip per call and raise
    a bilibili_parts.errors.PartsServiceError subclass on failure.
    """

    @abstractmethod
    def fetch_envelope(self, bvid: str) -> PagelistEnvelope:
        """Fetch the pagelist envelope for a video.

        Args:
            bvid: Validated BV id.

        Returns:
            Envelope with code 0.

        Raises:
            UpstreamUnavailable: Network failure or timeout.
            UpstreamStatusError: Non-success HTTP status.
            UpstreamParseError: Body is not a valid envelope.
            UpstreamApplicationError: Envelope code is non-zero.
        """
        pass
