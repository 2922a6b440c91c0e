"""Pydantic schemas for request/response validation"""

from marketplace_api.schemas.reservation import (
    ReservationStatus,
    TimeSlot,
    AvailabilityRequest,
    AvailabilityResponse,
    CreateReservationRequest,
    Reservation,
    CancelReservationRequest,
    CancelReservationResult,
    ReservationProviderConfig,
    ReservationProviderResult,
    AvailabilityQuery,
    CreateReservationCommand,
    CancelReservationCommand,
    ReservationInfoResponse,
    InitiateReservationRequest,
    InitiateReservationResponse,
)

__all__ = [
    "ReservationStatus",
    "TimeSlot",
    "AvailabilityRequest",
    "AvailabilityResponse",
    "CreateReservationRequest",
    "Reservation",
    "CancelReservationRequest",
    "CancelReservationResult",
    "ReservationProviderConfig",
    "ReservationProviderResult",
    "AvailabilityQuery",
    "CreateReservationCommand",
    "CancelReservationCommand",
    "ReservationInfoResponse",
    "InitiateReservationRequest",
    "InitiateReservationResponse",
]
