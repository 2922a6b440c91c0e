"""Resy reservation provider"""

from typing import Optional

from marketplace_api.schemas.reservation import (
    AvailabilityRequest,
    CreateReservationRequest,
    CancelReservationRequest,
    ReservationProviderConfig,
    ReservationProviderResult,
)
from marketplace_api.reservations.results import not_implemented_error
from marketplace_api.reservations.types import ProviderName


class ResyProvider:
    """
    Resy integration.

    Advertises real-time availability and direct booking, but no operation
    is wired to the Resy API yet: every call fails with NOT_IMPLEMENTED.
    Callers that choose direct booking from the capability flags must still
    handle that code and fall back to the deep link.
    """

    name = ProviderName.RESY.value
    supports_real_time_availability = True
    supports_direct_booking = True

    async def get_availability(
        self,
        request: AvailabilityRequest,
        config: Optional[ReservationProviderConfig] = None,
    ) -> ReservationProviderResult:
        return not_implemented_error("get_availability", self.name, request)

    async def create_reservation(
        self,
        request: CreateReservationRequest,
        config: Optional[ReservationProviderConfig] = None,
    ) -> ReservationProviderResult:
        return not_implemented_error("create_reservation", self.name, request)

    async def cancel_reservation(
        self,
        request: CancelReservationRequest,
        config: Optional[ReservationProviderConfig] = None,
    ) -> ReservationProviderResult:
        return not_implemented_error("cancel_reservation", self.name, request)
