"""Test configuration and fixtures."""

import os
from datetime import UTC, datetime

import pytest

# Force the in-memory backend BEFORE mcpolice.config is imported.
os.environ["STORE_BACKEND"] = "memory"

from fastapi.testclient import TestClient

from mcpolice.api.app import create_app
from mcpolice.mcp.dispatcher import ToolCallDispatcher
from mcpolice.services.violations import ViolationService
from mcpolice.store import MemoryBackend, ViolationStore

ROME_7 = "Rome Statute Article 7"


class FakeClock:
    """Controllable clock for timestamp-dependent tests."""

    def __init__(self, now: datetime | None = None):
        self.now = now or datetime(2026, 10, 19, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def store(backend):
    return ViolationStore(backend)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def service(store, clock):
    return ViolationService(store, clock=clock)


@pytest.fixture
def dispatcher(service):
    return ToolCallDispatcher(service)


@pytest.fixture
def client(service):
    """API client bound to a fresh in-memory service."""
    return TestClient(create_app(service))


def make_report(
    service: ViolationService,
    statute: str = ROME_7,
    organization: str = "TestAI",
    content: str = "x",
):
    return service.submit(
        statute=statute,
        responsible_organization=organization,
        offending_content=content,
    )
