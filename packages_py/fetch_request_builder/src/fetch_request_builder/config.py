"""
Configuration for fetch_request_builder.
"""
import dataclasses
import json
from functools import lru_cache
from typing import Any, Mapping

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CONTENT_TYPE = "application/json"


class BuilderSettings(BaseSettings):
    """Dispatch settings loaded from FETCH_REQUEST_BUILDER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FETCH_REQUEST_BUILDER_",
        case_sensitive=False,
        env_file=None,  # Use system env only
    )

    # Pretty-print outgoing requests and responses to the console
    print_requests: bool = False

    # Add a content-type header to JSON bodies (with_body, body params) when none is set
    auto_content_type: bool = True
    default_content_type: str = DEFAULT_CONTENT_TYPE

    # Bodies longer than this are truncated in logs and console output
    log_body_max_chars: int = 500


@lru_cache()
def get_settings() -> BuilderSettings:
    """Get cached settings instance."""
    return BuilderSettings()


def to_serializable(data: Any) -> Any:
    """Convert structured records to plain JSON-compatible values.

    Pydantic models are dumped by alias, dataclass instances are converted
    field by field. Mappings are copied into a plain dict. Anything else is
    returned as-is for json to accept or reject.
    """
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True)
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return dataclasses.asdict(data)
    if isinstance(data, Mapping):
        return dict(data)
    return data


def _json_default(value: Any) -> Any:
    converted = to_serializable(value)
    if converted is value:
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
    return converted


class JsonSerializer:
    """Compact UTF-8 JSON serializer for request bodies."""

    def serialize(self, data: Any) -> bytes:
        """Serialize data to JSON bytes.

        Raises TypeError or ValueError when data cannot be represented as JSON,
        and RecursionError for self-referencing dataclasses.
        """
        text = json.dumps(
            to_serializable(data),
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_json_default,
        )
        return text.encode("utf-8")


default_serializer = JsonSerializer()
