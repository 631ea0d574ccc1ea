"""
Test configuration and fixtures
"""

import uuid
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from hr_service.app import create_app
from hr_service.domain.entities import Employee, Position
from hr_service.repositories.memory_repository import MemoryHRRepository
from hr_service.services.correlation import CORRELATION_ID_KEY
from hr_service.services.hr_service import HRService


@pytest.fixture
def repository():
    """Create an empty in-memory repository."""
    return MemoryHRRepository()


@pytest.fixture
def mock_logger():
    """Create a logger double recording correlation events."""
    return MagicMock()


@pytest.fixture
def service(repository, mock_logger):
    """Create HR service over the in-memory repository."""
    return HRService(repository=repository, logger=mock_logger)


@pytest.fixture
def ctx():
    """Call context carrying a correlation identifier."""
    return {CORRELATION_ID_KEY: str(uuid.uuid4())}


@pytest.fixture
def bad_ctx():
    """Call context without a correlation identifier."""
    return {"noname_id": str(uuid.uuid4())}


@pytest.fixture
def worker_position():
    """Stored-style position with its own identifier."""
    return Position(name="worker", salary=Decimal("500"), id=uuid.uuid4())


@pytest.fixture
def lead_position():
    """Stored-style position with its own identifier."""
    return Position(name="lead", salary=Decimal("2000"), id=uuid.uuid4())


@pytest.fixture
def make_employee():
    """Factory for stored-style employees."""

    def _make(first_name: str, last_name: str, position_id: uuid.UUID) -> Employee:
        return Employee(
            first_name=first_name,
            last_name=last_name,
            position_id=position_id,
            id=uuid.uuid4(),
        )

    return _make


@pytest.fixture
def client(repository, mock_logger):
    """Create a test client serving a service over the test repository."""
    app = create_app(service=HRService(repository=repository, logger=mock_logger))
    with TestClient(app) as test_client:
        yield test_client
