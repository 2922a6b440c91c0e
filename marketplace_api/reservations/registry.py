"""
Reservation provider registry.

Maps a vendor's configured reservation system to a shared provider instance
and decides whether the booking flow books in-app or redirects the guest.
"""

import enum
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union
import structlog

from marketplace_api.reservations.providers import (
    AnyReservationProvider,
    DeepLinkProvider,
    OpenTableProvider,
    SevenRoomsProvider,
    ResyProvider,
)
from marketplace_api.reservations.types import ProviderName

logger = structlog.get_logger()


class ReservationSystemType(str, enum.Enum):
    """Reservation systems a vendor profile can be configured with"""
    OPENTABLE = "OpenTable"
    SEVENROOMS = "SevenRooms"
    RESY = "Resy"
    WEBSITE = "Website"
    PHONE = "Phone"
    NONE = "None"


ReservationSystem = Union[ReservationSystemType, str, None]

_PROVIDER_FACTORIES: Dict[str, Callable[[], AnyReservationProvider]] = {
    ProviderName.OPENTABLE.value: OpenTableProvider,
    ProviderName.SEVENROOMS.value: SevenRoomsProvider,
    ProviderName.RESY.value: ResyProvider,
    ProviderName.DEEP_LINK.value: DeepLinkProvider,
}

# Systems that always send the guest elsewhere, whatever the provider says
_EXTERNAL_ONLY = {ReservationSystemType.WEBSITE.value, ReservationSystemType.PHONE.value}


def _system_value(reservation_system: ReservationSystem) -> Optional[str]:
    if isinstance(reservation_system, ReservationSystemType):
        return reservation_system.value
    return reservation_system


def provider_name_for(reservation_system: ReservationSystem) -> str:
    """Provider name serving a reservation system. Anything without an API integration is DeepLink."""
    system = _system_value(reservation_system)
    if system in _PROVIDER_FACTORIES:
        return system
    return ProviderName.DEEP_LINK.value


@dataclass(frozen=True)
class ReservationInfo:
    """Booking strategy for one vendor"""
    provider: AnyReservationProvider
    use_deep_link: bool
    deep_link_url: Optional[str]
    supports_direct_booking: bool
    supports_availability: bool


class ProviderRegistry:
    """
    Holds one provider instance per provider name.

    Create one at startup and hand it to request handlers. Instances are
    built lazily on first lookup and reused afterwards; providers are
    stateless, so two handlers racing on the first lookup is harmless.
    """

    def __init__(self):
        self._instances: Dict[str, AnyReservationProvider] = {}

    def get_reservation_provider(
        self,
        reservation_system: ReservationSystem = None,
    ) -> AnyReservationProvider:
        """Provider for a reservation system; Website, Phone, None and unknown systems get DeepLink"""
        name = provider_name_for(reservation_system)
        provider = self._instances.get(name)
        if provider is None:
            provider = self._instances.setdefault(name, _PROVIDER_FACTORIES[name]())
            logger.info(
                "Reservation provider created",
                provider=name,
                reservation_system=_system_value(reservation_system),
            )
        return provider

    def get_reservation_info(
        self,
        reservation_system: ReservationSystem = None,
        reservation_link: Optional[str] = None,
    ) -> ReservationInfo:
        """Decide between in-app booking and redirecting to the vendor's link"""
        provider = self.get_reservation_provider(reservation_system)
        use_deep_link = (
            not provider.supports_direct_booking
            or _system_value(reservation_system) in _EXTERNAL_ONLY
        )

        return ReservationInfo(
            provider=provider,
            use_deep_link=use_deep_link,
            deep_link_url=reservation_link if use_deep_link and reservation_link else None,
            supports_direct_booking=provider.supports_direct_booking and not use_deep_link,
            supports_availability=provider.supports_real_time_availability and not use_deep_link,
        )

    def is_direct_booking_supported(self, reservation_system: ReservationSystem = None) -> bool:
        system = _system_value(reservation_system)
        if not system or system in _EXTERNAL_ONLY or system == ReservationSystemType.NONE.value:
            return False
        return self.get_reservation_provider(system).supports_direct_booking

    def __contains__(self, name: str) -> bool:
        return name in self._instances
