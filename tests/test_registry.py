"""Tests for provider lookup and booking strategy"""

import pytest

from marketplace_api.reservations.providers import (
    DeepLinkProvider,
    OpenTableProvider,
    ResyProvider,
)
from marketplace_api.reservations.registry import (
    ProviderRegistry,
    ReservationSystemType,
    provider_name_for,
)


@pytest.mark.parametrize("system", [None, "Website", "Phone", "None", "", "Tock"])
def test_systems_without_integration_get_deep_link(registry, system):
    provider = registry.get_reservation_provider(system)
    assert provider.name == "DeepLink"
    assert isinstance(provider, DeepLinkProvider)


@pytest.mark.parametrize("system,name", [
    ("OpenTable", "OpenTable"),
    ("SevenRooms", "SevenRooms"),
    ("Resy", "Resy"),
    (ReservationSystemType.RESY, "Resy"),
    (ReservationSystemType.PHONE, "DeepLink"),
])
def test_provider_names(registry, system, name):
    assert registry.get_reservation_provider(system).name == name
    assert provider_name_for(system) == name


@pytest.mark.parametrize("system", [None, "Website", "OpenTable", "SevenRooms", "Resy"])
def test_same_instance_for_repeated_lookups(registry, system):
    assert registry.get_reservation_provider(system) is registry.get_reservation_provider(system)


def test_fallback_systems_share_one_deep_link_instance(registry):
    website = registry.get_reservation_provider("Website")
    assert registry.get_reservation_provider("Phone") is website
    assert registry.get_reservation_provider(None) is website
    assert registry.get_reservation_provider("None") is website


def test_providers_are_created_lazily(registry):
    assert "Resy" not in registry
    registry.get_reservation_provider("Resy")
    assert "Resy" in registry
    assert "OpenTable" not in registry


def test_registries_do_not_share_instances():
    assert ProviderRegistry().get_reservation_provider("Resy") is not ProviderRegistry().get_reservation_provider("Resy")


def test_website_with_link_uses_deep_link(registry):
    info = registry.get_reservation_info("Website", "https://example.com/book")

    assert info.provider.name == "DeepLink"
    assert info.use_deep_link is True
    assert info.deep_link_url == "https://example.com/book"
    assert info.supports_direct_booking is False
    assert info.supports_availability is False


def test_deep_link_without_link_has_no_url(registry):
    info = registry.get_reservation_info("Phone", None)
    assert info.use_deep_link is True
    assert info.deep_link_url is None

    assert registry.get_reservation_info(None, "").deep_link_url is None


def test_resy_info_promises_direct_booking(registry):
    """Resy's flags select direct booking even though the stub cannot book"""
    info = registry.get_reservation_info("Resy", None)

    assert isinstance(info.provider, ResyProvider)
    assert info.use_deep_link is False
    assert info.deep_link_url is None
    assert info.supports_direct_booking is True
    assert info.supports_availability is True


@pytest.mark.asyncio
async def test_resy_direct_booking_still_fails_not_implemented(registry, create_request):
    info = registry.get_reservation_info("Resy", "https://resy.com/cities/ny/venue")
    assert info.use_deep_link is False
    # link is ignored when booking directly
    assert info.deep_link_url is None

    result = await info.provider.create_reservation(create_request)
    assert result.success is False
    assert result.error_code == "NOT_IMPLEMENTED"


@pytest.mark.parametrize("system", [None, "", "Website", "Phone", "None"])
def test_direct_booking_unsupported_without_integration(registry, system):
    assert registry.is_direct_booking_supported(system) is False


@pytest.mark.parametrize("system", ["OpenTable", "SevenRooms", "Resy"])
def test_direct_booking_follows_provider_flag(registry, system):
    provider = registry.get_reservation_provider(system)
    assert registry.is_direct_booking_supported(system) is provider.supports_direct_booking


def test_direct_booking_opentable(registry):
    assert registry.is_direct_booking_supported("OpenTable") is OpenTableProvider.supports_direct_booking
