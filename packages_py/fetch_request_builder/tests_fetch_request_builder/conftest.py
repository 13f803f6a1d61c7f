"""
Shared fixtures for fetch_request_builder tests.
"""
from dataclasses import dataclass, field
from unittest.mock import AsyncMock, MagicMock

import pytest

from fetch_request_builder.config import BuilderSettings, get_settings
from fetch_request_builder.types import TransportResponse


@dataclass
class Nested:
    field1: str = ""
    field2: int = 0
    field3: int = 0


@dataclass
class Employee:
    name: str
    job_title: str
    job_title2: str
    nested: Nested = field(default_factory=Nested)


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Isolate tests from FETCH_REQUEST_BUILDER_* variables in the environment."""
    for name in ("PRINT_REQUESTS", "AUTO_CONTENT_TYPE", "DEFAULT_CONTENT_TYPE", "LOG_BODY_MAX_CHARS"):
        monkeypatch.delenv(f"FETCH_REQUEST_BUILDER_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Settings with console tracing off."""
    return BuilderSettings(print_requests=False)


@pytest.fixture
def employee():
    return Employee(
        name="name",
        job_title="jobTitle1",
        job_title2="jobTitle2",
        nested=Nested(field1="field1"),
    )


@pytest.fixture
def mock_transport():
    """Sync transport returning 200 with a JSON body."""
    transport = MagicMock()
    transport.execute = MagicMock(
        return_value=TransportResponse(status=200, body=b'{"success": true}')
    )
    return transport


@pytest.fixture
def mock_async_transport():
    """Async transport returning 200 with a JSON body."""
    transport = MagicMock()
    transport.execute = AsyncMock(
        return_value=TransportResponse(status=200, body=b'{"success": true}')
    )
    return transport
