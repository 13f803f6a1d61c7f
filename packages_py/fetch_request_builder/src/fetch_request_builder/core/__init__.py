"""
Core modules for fetch_request_builder.
"""
from .request_spec import RequestSpec, new_builder, init_request
from .dispatcher import PreparedRequest, dispatch, dispatch_async, prepare
from .request_builder import build_url, build_headers, build_body

__all__ = [
    "RequestSpec",
    "new_builder",
    "init_request",
    "PreparedRequest",
    "dispatch",
    "dispatch_async",
    "prepare",
    "build_url",
    "build_headers",
    "build_body",
]
