"""Reservation provider interface"""

from typing import Optional, Protocol

from marketplace_api.schemas.reservation import (
    AvailabilityRequest,
    CreateReservationRequest,
    CancelReservationRequest,
    ReservationProviderConfig,
    ReservationProviderResult,
)


class ReservationProvider(Protocol):
    """
    Contract every reservation system adapter satisfies.

    Capability flags are static per provider. Operations report expected
    failures through the result envelope and never raise for them.
    """

    name: str
    supports_real_time_availability: bool
    supports_direct_booking: bool

    async def get_availability(
        self,
        request: AvailabilityRequest,
        config: Optional[ReservationProviderConfig] = None,
    ) -> ReservationProviderResult:
        """Result data is an AvailabilityResponse"""
        ...

    async def create_reservation(
        self,
        request: CreateReservationRequest,
        config: Optional[ReservationProviderConfig] = None,
    ) -> ReservationProviderResult:
        """Result data is a Reservation"""
        ...

    async def cancel_reservation(
        self,
        request: CancelReservationRequest,
        config: Optional[ReservationProviderConfig] = None,
    ) -> ReservationProviderResult:
        """Result data is a CancelReservationResult"""
        ...
