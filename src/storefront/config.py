"""Environment-driven settings that sit outside the Protean domain config."""

import os
from dataclasses import dataclass

DEFAULT_BILLING_TIMEOUT = 10.0
DEFAULT_SESSION_TTL_HOURS = 24 * 7


@dataclass(frozen=True)
class BillingSettings:
    """Connection settings for the Diamante invoicing API."""

    api_url: str = ""
    api_key: str = ""
    timeout: float = DEFAULT_BILLING_TIMEOUT

    @classmethod
    def from_env(cls) -> "BillingSettings":
        return cls(
            api_url=os.getenv("DIAMANTE_API_URL", "").rstrip("/"),
            api_key=os.getenv("DIAMANTE_API_KEY", ""),
            timeout=float(os.getenv("DIAMANTE_TIMEOUT", DEFAULT_BILLING_TIMEOUT)),
        )


def session_ttl_hours() -> int:
    return int(os.getenv("SESSION_TTL_HOURS", DEFAULT_SESSION_TTL_HOURS))
