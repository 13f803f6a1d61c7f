"""
Outgoing request assembly for fetch_request_builder.
"""
import logging
from typing import Dict, Mapping, Optional

from urllib.parse import urlencode

from ..auth import encode_basic_auth, mask_headers
from ..config import BuilderSettings, default_serializer
from ..types import BasicAuth, Serializer

logger = logging.getLogger("fetch_request_builder.request_builder")


def build_url(url: str, query: Optional[Mapping[str, str]] = None) -> str:
    """Append query parameters to url as a standard query string.

    The query goes before any "#fragment" so it reaches the server.
    """
    if not query:
        return url

    query_str = urlencode({k: str(v) for k, v in query.items()})
    base, hash_mark, fragment = url.partition("#")
    if base.endswith(("?", "&")):
        base = f"{base}{query_str}"
    else:
        separator = "&" if "?" in base else "?"
        base = f"{base}{separator}{query_str}"
    return f"{base}{hash_mark}{fragment}"


def build_body(
    body: bytes,
    body_params: Optional[Mapping[str, str]] = None,
    serializer: Optional[Serializer] = None,
) -> bytes:
    """Pick the outgoing body.

    A raw body always wins. Without one, body params are serialized as JSON.
    """
    if body:
        return body

    if body_params:
        return (serializer or default_serializer).serialize(dict(body_params))

    return b""


def build_headers(
    headers: Optional[Mapping[str, str]] = None,
    basic_auth: Optional[BasicAuth] = None,
    json_body: bool = False,
    settings: Optional[BuilderSettings] = None,
) -> Dict[str, str]:
    """Build outgoing headers from the spec's headers and credentials.

    The default content-type is only added for JSON bodies (with_body() or
    body params); raw bodies carry whatever content-type the caller set.
    """
    result = dict(headers or {})

    if json_body and settings is not None and settings.auto_content_type:
        if "content-type" not in {k.lower() for k in result}:
            result["Content-Type"] = settings.default_content_type

    if basic_auth is not None:
        # Credentials set on the spec replace any Authorization header
        for key in [k for k in result if k.lower() == "authorization"]:
            del result[key]
        result.update(encode_basic_auth(basic_auth))

    logger.debug(f"build_headers: json_body={json_body}, headers={mask_headers(result)}")
    return result
