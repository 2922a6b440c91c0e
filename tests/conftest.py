"""Test configuration and fixtures"""

import pytest
from httpx import ASGITransport, AsyncClient

from marketplace_api.main import app
from marketplace_api.api.deps import get_registry
from marketplace_api.reservations.registry import ProviderRegistry
from marketplace_api.schemas.reservation import (
    AvailabilityRequest,
    CreateReservationRequest,
    CancelReservationRequest,
)


@pytest.fixture
def registry():
    """Fresh provider registry"""
    return ProviderRegistry()


@pytest.fixture
def availability_request():
    return AvailabilityRequest(vendor_id="vendor-1", date="2026-11-14", party_size=2, time="19:00")


@pytest.fixture
def create_request():
    return CreateReservationRequest(
        vendor_id="vendor-1",
        user_id="user-1",
        date="2026-11-14",
        time="19:00",
        party_size=4,
        guest_name="Jane Smith",
        guest_email="jane@example.com",
        special_requests="Window table",
    )


@pytest.fixture
def cancel_request():
    return CancelReservationRequest(reservation_id="res-1", vendor_id="vendor-1", reason="Plans changed")


@pytest.fixture
async def client(registry):
    """Test client sharing the registry fixture"""
    app.dependency_overrides[get_registry] = lambda: registry

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
