"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-endpoint rate limits, keyed by client address.
Protects against denial-of-service and resource abuse.

Exceeding a limit raises slowapi's RateLimitExceeded, an HTTP error with
status 429, which the API envelope renders like any other failure.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

DEFAULT_RATE_LIMIT = "60/minute"
HEAVY_RATE_LIMIT = "10/minute"


def build_limiter(enabled: bool = True) -> Limiter:
    """Create a limiter with its own in-memory counters.

    Each application gets a fresh limiter so that route limits and
    counters are never shared between application instances.

    Args:
        enabled: When False, decorated routes are never limited.

    Returns:
        A configured slowapi Limiter.
    """
    return Limiter(key_func=get_remote_address, enabled=enabled)
