"""
Basic auth header encoding and credential masking.
"""
import base64
from typing import Dict, Optional

from .types import BasicAuth

AUTH_HEADER = "Authorization"

# Headers whose values are masked before logging or printing
SENSITIVE_HEADERS = frozenset({"authorization", "proxy-authorization", "x-api-key"})


def _base64_encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("utf-8")


def encode_basic_auth(auth: BasicAuth) -> Dict[str, str]:
    """
    Encode basic auth credentials into an Authorization header (RFC 7617).

    Empty username or password is allowed; the header is always produced
    for explicitly set credentials.
    """
    credentials = f"{auth.username}:{auth.password}"
    return {AUTH_HEADER: f"Basic {_base64_encode(credentials)}"}


def mask_value(value: Optional[str], visible_chars: int = 10) -> str:
    """Mask sensitive value for safe logging, showing the first visible_chars."""
    if value is None:
        return "<None>"
    if len(value) <= visible_chars:
        return "*" * len(value)
    return value[:visible_chars] + "*" * (len(value) - visible_chars)


def mask_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Return a copy of headers with credential values masked."""
    masked = dict(headers)
    for key in masked:
        if key.lower() in SENSITIVE_HEADERS:
            masked[key] = mask_value(masked[key])
    return masked
