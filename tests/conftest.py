import pytest
from fastapi.testclient import TestClient

from booking_grid.main import create_app
from booking_grid.schemas.event import Event, Service


@pytest.fixture(scope="session")
def client() -> TestClient:
    """
    Shared TestClient fixture for all API tests.

    Uses the application factory so configuration stays test-friendly.
    """
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def consultation() -> Event:
    """
    The 90-minute reference appointment: 10:00-11:30 on 2025-05-10.
    """
    return Event(
        id="evt-1",
        title="Business Consultation",
        service_id="svc-1",
        start="2025-05-10T10:00:00",
        end="2025-05-10T11:30:00",
        client_name="Jane Doe",
        status="scheduled",
    )


@pytest.fixture
def services() -> list[Service]:
    return [
        Service(id="svc-1", name="Business Consultation", color="#10b981"),
        Service(id="svc-2", name="Technical Support", color="#3b82f6"),
    ]
