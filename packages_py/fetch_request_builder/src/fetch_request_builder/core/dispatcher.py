"""
Dispatch of a finalized RequestSpec through a transport.
"""
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional

from ..auth import mask_headers
from ..config import BuilderSettings, get_settings
from ..errors import InvalidVerbError
from ..printing import print_request, print_response
from ..types import AsyncTransport, DispatchResult, HttpVerb, Transport, parse_verb
from .request_builder import build_body, build_headers, build_url

if TYPE_CHECKING:
    from .request_spec import RequestSpec

logger = logging.getLogger("fetch_request_builder.dispatcher")


@dataclass
class PreparedRequest:
    """Wire-ready view of a RequestSpec."""

    verb: HttpVerb
    url: str
    headers: Dict[str, str]
    body: bytes


def prepare(spec: "RequestSpec", settings: Optional[BuilderSettings] = None) -> PreparedRequest:
    """Validate spec and assemble the verb, URL, headers and body to send.

    Raises InvalidVerbError for an unrecognized verb, and anything build()
    raises for an incomplete spec.
    """
    settings = settings or get_settings()

    verb = parse_verb(spec.verb)
    if spec.verb and verb is None:
        raise InvalidVerbError(spec.verb)
    spec.build()

    body = build_body(spec.body, spec.body_params)
    json_body = spec.body_is_json if spec.body else bool(body)
    return PreparedRequest(
        verb=verb,
        url=build_url(spec.url, spec.query_params),
        headers=build_headers(spec.headers, spec.basic_auth, json_body, settings),
        body=body,
    )


def _trace_request(request: PreparedRequest, settings: BuilderSettings) -> None:
    logger.debug(
        f"dispatch: {request.verb} {request.url} "
        f"headers={mask_headers(request.headers)} body_bytes={len(request.body)}"
    )
    if settings.print_requests:
        print_request(
            request.verb.value,
            request.url,
            request.headers,
            request.body,
            settings.log_body_max_chars,
        )


def _trace_response(request: PreparedRequest, result: DispatchResult, settings: BuilderSettings) -> None:
    logger.debug(
        f"dispatch: {request.verb} {request.url} -> status={result.status} "
        f"body_bytes={len(result.body)}"
    )
    if settings.print_requests:
        print_response(request.url, result.status, result.body, settings.log_body_max_chars)


def dispatch(
    spec: "RequestSpec",
    transport: Transport,
    settings: Optional[BuilderSettings] = None,
) -> DispatchResult:
    """Send spec through transport and return the reported status and body.

    Errors raised by the transport propagate unchanged.
    """
    settings = settings or get_settings()
    request = prepare(spec, settings)
    _trace_request(request, settings)

    response = transport.execute(
        request.verb.value, request.url, request.headers, request.body
    )

    result = DispatchResult(status=response.status, body=response.body)
    _trace_response(request, result, settings)
    return result


async def dispatch_async(
    spec: "RequestSpec",
    transport: AsyncTransport,
    settings: Optional[BuilderSettings] = None,
) -> DispatchResult:
    """Async counterpart of dispatch()."""
    settings = settings or get_settings()
    request = prepare(spec, settings)
    _trace_request(request, settings)

    response = await transport.execute(
        request.verb.value, request.url, request.headers, request.body
    )

    result = DispatchResult(status=response.status, body=response.body)
    _trace_response(request, result, settings)
    return result
