"""
Transport implementations for fetch_request_builder.
"""
from .httpx_transport import AsyncHttpxTransport, HttpxTransport

__all__ = [
    "HttpxTransport",
    "AsyncHttpxTransport",
]
