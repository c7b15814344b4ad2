"""Error taxonomy for the parts pipeline.

Every failure the pipeline can produce maps to exactly one HTTP status:
- 400: ClientInputError
- 404: PartsNotFound
- 500: InternalError, UpstreamParseError
- 502: UpstreamStatusError, UpstreamApplicationError
- 503: UpstreamUnavailable
"""

from __future__ import annotations


class PartsServiceError(Exception):
    """Base class for errors reported to the caller.

    Attributes:
        status_code: HTTP status returned to the caller.
        message: Human-readable message returned to the caller.
    """

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientInputError(PartsServiceError):
    """Missing or unusable input from the caller."""

    status_code = 400


class PartsNotFound(PartsServiceError):
    """Upstream answered successfully but listed no parts."""

    status_code = 404

    def __init__(self, message: str = "No parts found for this video"):
        super().__init__(message)


class InternalError(PartsServiceError):
    """Request construction or serialization failure."""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


class UpstreamUnavailable(PartsServiceError):
    """Upstream could not be reached or timed out."""

    status_code = 503

    def __init__(self, message: str = "Bilibili API unreachable or timed out"):
        super().__init__(message)


class UpstreamStatusError(PartsServiceError):
    """Upstream answered with a non-success HTTP status."""

    status_code = 502

    def __init__(self, upstream_status: int):
        super().__init__(f"Bilibili API error, status code: {upstream_status}")
        self.upstream_status = upstream_status


class UpstreamParseError(PartsServiceError):
    """Upstream body was not a valid pagelist envelope."""

    status_code = 500

    def __init__(self, message: str = "Failed to parse Bilibili API response"):
        super().__init__(message)


class UpstreamApplicationError(PartsServiceError):
    """Upstream envelope carried a non-zero application code."""

    status_code = 502

    def __init__(self, upstream_code: int, upstream_message: str):
        super().__init__(f"Bilibili API error: {upstream_message} (Code: {upstream_code})")
        self.upstream_code = upstream_code
        self.upstream_message = upstream_message
