"""Environment-sourced configuration.

All settings come from environment variables with fixed defaults.
Invalid values fall back to the default rather than failing startup.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_PORT = 2323
DEFAULT_ALLOWED_ORIGINS = "http://localhost:2233"
DEFAULT_API_TIMEOUT = 10.0  # seconds
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


def _get_env(key: str, default: str) -> str:
    """Read an environment variable, treating empty as unset."""
    value = os.environ.get(key, "")
    return value if value else default


def parse_origins(raw: str) -> list[str]:
    """Split a comma-separated origin list.

    Args:
        raw: Value such as "http://a.example,http://b.example".

    Returns:
        Stripped, non-empty entries in their original order.
    """
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def parse_timeout(raw: str) -> float:
    """Parse API_TIMEOUT in seconds.

    Non-numeric and non-positive values fall back to DEFAULT_API_TIMEOUT.
    """
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(f"Invalid API_TIMEOUT {raw!r}, using {DEFAULT_API_TIMEOUT}")
        return DEFAULT_API_TIMEOUT

    if timeout <= 0:
        logger.warning(f"Non-positive API_TIMEOUT {raw!r}, using {DEFAULT_API_TIMEOUT}")
        return DEFAULT_API_TIMEOUT

    return timeout


def parse_port(raw: str) -> int:
    """Parse PORT, falling back to DEFAULT_PORT when not an integer."""
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid PORT {raw!r}, using {DEFAULT_PORT}")
        return DEFAULT_PORT


@dataclass
class Settings:
    """Service settings.

    Attributes:
        port: Listening port.
        allowed_origins: Cross-origin allow-list; "*" permits any origin.
        api_timeout: Upstream call timeout in seconds.
        user_agent: User-Agent header sent upstream.
        debug: Log raw upstream bodies when True.
    """

    port: int = DEFAULT_PORT
    allowed_origins: list[str] = field(
        default_factory=lambda: parse_origins(DEFAULT_ALLOWED_ORIGINS)
    )
    api_timeout: float = DEFAULT_API_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    debug: bool = False

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the current environment."""
        return cls(
            port=parse_port(_get_env("PORT", str(DEFAULT_PORT))),
            allowed_origins=parse_origins(_get_env("ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS)),
            api_timeout=parse_timeout(_get_env("API_TIMEOUT", str(DEFAULT_API_TIMEOUT))),
            user_agent=_get_env("USER_AGENT", DEFAULT_USER_AGENT),
            debug=_get_env("DEBUG", "false").lower() == "true",
        )
