"""
Fluent HTTP request builder.

Configure a request through chained calls, validate it with build(), and
dispatch it through any transport exposing
execute(verb, url, headers, body). Configuration errors are latched on the
request and surface from build() or dispatch().
"""
from .types import (
    HttpVerb,
    ID_ADDRESSABLE_VERBS,
    BasicAuth,
    TransportResponse,
    DispatchResult,
    Transport,
    AsyncTransport,
    Serializer,
)
from .errors import (
    RequestBuilderError,
    RequestConfigError,
    BodySerializationError,
    UnsupportedIdVerbError,
    RequestValidationError,
    MissingVerbError,
    MissingURLError,
    RequestDispatchError,
    InvalidVerbError,
)
from .config import (
    BuilderSettings,
    JsonSerializer,
    get_settings,
)
from .core.request_spec import RequestSpec, new_builder, init_request
from .core.dispatcher import dispatch, dispatch_async
from .transports.httpx_transport import HttpxTransport, AsyncHttpxTransport

__all__ = [
    # Types
    "HttpVerb",
    "ID_ADDRESSABLE_VERBS",
    "BasicAuth",
    "TransportResponse",
    "DispatchResult",
    "Transport",
    "AsyncTransport",
    "Serializer",
    # Errors
    "RequestBuilderError",
    "RequestConfigError",
    "BodySerializationError",
    "UnsupportedIdVerbError",
    "RequestValidationError",
    "MissingVerbError",
    "MissingURLError",
    "RequestDispatchError",
    "InvalidVerbError",
    # Config
    "BuilderSettings",
    "JsonSerializer",
    "get_settings",
    # Builder
    "RequestSpec",
    "new_builder",
    "init_request",
    "dispatch",
    "dispatch_async",
    # Transports
    "HttpxTransport",
    "AsyncHttpxTransport",
]

__version__ = "0.1.0"
