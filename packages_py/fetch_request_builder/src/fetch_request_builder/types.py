"""
Type definitions for fetch_request_builder.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Protocol, Union


class HttpVerb(str, Enum):
    """HTTP method tokens accepted by the builder (case-sensitive)."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    TRACE = "TRACE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"

    def __str__(self) -> str:
        return self.value


# Verbs that may address a single resource via with_id()
ID_ADDRESSABLE_VERBS: FrozenSet[HttpVerb] = frozenset(
    {HttpVerb.GET, HttpVerb.PUT, HttpVerb.DELETE}
)

# A verb as stored on a RequestSpec: the enum, or a free-form string that
# failed to parse and is rejected at build/dispatch time.
VerbLike = Union[HttpVerb, str]


def parse_verb(value: Optional[VerbLike]) -> Optional[HttpVerb]:
    """Return the HttpVerb matching value, or None if it is not one of the nine."""
    if isinstance(value, HttpVerb):
        return value
    if not isinstance(value, str):
        return None
    try:
        return HttpVerb(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class BasicAuth:
    """Basic auth credentials."""

    username: str
    password: str

    def __repr__(self) -> str:
        return f"BasicAuth(username={self.username!r}, password='***')"


@dataclass
class TransportResponse:
    """Raw response reported by a transport."""

    status: int
    body: bytes = b""


@dataclass
class DispatchResult:
    """Result of dispatching a RequestSpec."""

    status: int
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class Transport(Protocol):
    """Synchronous transport capability."""

    def execute(
        self,
        verb: str,
        url: str,
        headers: Dict[str, str],
        body: bytes,
    ) -> TransportResponse:
        """Send the request and return status and raw body. Errors are raised."""
        ...


class AsyncTransport(Protocol):
    """Asynchronous transport capability."""

    async def execute(
        self,
        verb: str,
        url: str,
        headers: Dict[str, str],
        body: bytes,
    ) -> TransportResponse:
        """Send the request and return status and raw body. Errors are raised."""
        ...


class Serializer(Protocol):
    """Serializer protocol for request bodies."""

    def serialize(self, data: object) -> bytes:
        """Serialize data to bytes."""
        ...
