"""
Error types for fetch_request_builder.

Configuration errors are latched on the RequestSpec and surface from build()
or dispatch(). Validation and dispatch errors are raised directly. Errors
raised by a transport are never wrapped.
"""
from typing import Optional


class RequestBuilderError(Exception):
    """Base error for fetch_request_builder."""

    code = "REQUEST_BUILDER_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.name = type(self).__name__


class RequestConfigError(RequestBuilderError):
    """A configuration step could not complete."""

    code = "CONFIG_ERROR"


class BodySerializationError(RequestConfigError):
    """with_body() could not serialize the given value."""

    code = "BODY_SERIALIZATION_ERROR"

    def __init__(self, message: str, value_type: Optional[str] = None) -> None:
        super().__init__(message)
        self.value_type = value_type


class UnsupportedIdVerbError(RequestConfigError):
    """with_id() was called for a verb that does not address a single resource."""

    code = "UNSUPPORTED_ID_VERB"

    def __init__(self, verb: object) -> None:
        super().__init__(f"verb {verb} does not support ID-based addressing")
        self.verb = verb


class RequestValidationError(RequestBuilderError):
    """build() found the spec incomplete."""

    code = "VALIDATION_ERROR"


class MissingVerbError(RequestValidationError):
    code = "MISSING_VERB"

    def __init__(self) -> None:
        super().__init__("missing HTTP verb")


class MissingURLError(RequestValidationError):
    code = "MISSING_URL"

    def __init__(self) -> None:
        super().__init__("missing URL")


class RequestDispatchError(RequestBuilderError):
    """dispatch() refused to send the request."""

    code = "DISPATCH_ERROR"


class InvalidVerbError(RequestValidationError, RequestDispatchError):
    """The verb is not one of the nine recognized HTTP method tokens."""

    code = "INVALID_VERB"

    def __init__(self, verb: object) -> None:
        super().__init__(f"invalid verb: {verb!r}")
        self.verb = verb
