"""Deep-link fallback provider"""

from typing import Optional

from marketplace_api.schemas.reservation import (
    AvailabilityRequest,
    CreateReservationRequest,
    CancelReservationRequest,
    ReservationProviderConfig,
    ReservationProviderResult,
)
from marketplace_api.reservations.results import deep_link_only, log_provider_call
from marketplace_api.reservations.types import ErrorCode, ProviderName


class DeepLinkProvider:
    """
    Vendors without an API integration (website, phone or nothing).

    Nothing can be booked in-app; the caller sends the guest to the
    vendor's own booking page instead.
    """

    name = ProviderName.DEEP_LINK.value
    supports_real_time_availability = False
    supports_direct_booking = False

    async def get_availability(
        self,
        request: AvailabilityRequest,
        config: Optional[ReservationProviderConfig] = None,
    ) -> ReservationProviderResult:
        log_provider_call(self.name, "get_availability", request, ErrorCode.DEEP_LINK_ONLY.value)
        return deep_link_only(
            "Deep link providers do not support availability checks. "
            "Redirect user to external booking URL."
        )

    async def create_reservation(
        self,
        request: CreateReservationRequest,
        config: Optional[ReservationProviderConfig] = None,
    ) -> ReservationProviderResult:
        log_provider_call(self.name, "create_reservation", request, ErrorCode.DEEP_LINK_ONLY.value)
        return deep_link_only(
            "Deep link providers do not support direct booking. "
            "Redirect user to external booking URL."
        )

    async def cancel_reservation(
        self,
        request: CancelReservationRequest,
        config: Optional[ReservationProviderConfig] = None,
    ) -> ReservationProviderResult:
        log_provider_call(self.name, "cancel_reservation", request, ErrorCode.DEEP_LINK_ONLY.value)
        return deep_link_only(
            "Deep link providers do not support cancellation. "
            "User must cancel on external platform."
        )
