"""Cross-origin policy for the parts endpoint.

Permission headers are echoed only when the caller's Origin matches the
allow-list. Requests from other origins are still served; the browser
enforces blocking, not the server.
"""

from __future__ import annotations

from dataclasses import dataclass, field

WILDCARD = "*"
ALLOWED_METHODS = "GET, OPTIONS"
ALLOWED_HEADERS = "Content-Type"


@dataclass
class CorsPolicy:
    """Allow-list based cross-origin policy.

    Attributes:
        allowed_origins: Exact origins, or "*" to permit any origin.
    """

    allowed_origins: list[str] = field(default_factory=list)

    def match(self, origin: str | None) -> str | None:
        """Return the first allow-list entry permitting origin.

        The entry itself is returned, so a "*" entry is echoed as "*".
        """
        for allowed in self.allowed_origins:
            if allowed == WILDCARD or (origin and allowed == origin):
                return allowed
        return None

    def headers_for(self, origin: str | None) -> dict[str, str]:
        """Permission headers for origin, or {} when not allowed."""
        allowed = self.match(origin)
        if allowed is None:
            return {}
        return {
            "Access-Control-Allow-Origin": allowed,
            "Access-Control-Allow-Methods": ALLOWED_METHODS,
            "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        }
