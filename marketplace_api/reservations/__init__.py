"""Reservation provider layer"""

from marketplace_api.reservations.credentials import resolve_provider_config
from marketplace_api.reservations.providers import (
    ReservationProvider,
    AnyReservationProvider,
    DeepLinkProvider,
    OpenTableProvider,
    SevenRoomsProvider,
    ResyProvider,
)
from marketplace_api.reservations.registry import (
    ProviderRegistry,
    ReservationInfo,
    ReservationSystemType,
    provider_name_for,
)
from marketplace_api.reservations.results import (
    generate_confirmation_code,
    not_implemented_error,
)
from marketplace_api.reservations.types import ErrorCode, ProviderName

__all__ = [
    "resolve_provider_config",
    "ReservationProvider",
    "AnyReservationProvider",
    "DeepLinkProvider",
    "OpenTableProvider",
    "SevenRoomsProvider",
    "ResyProvider",
    "ProviderRegistry",
    "ReservationInfo",
    "ReservationSystemType",
    "provider_name_for",
    "generate_confirmation_code",
    "not_implemented_error",
    "ErrorCode",
    "ProviderName",
]
