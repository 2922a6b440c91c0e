"""Reservation schemas"""

import enum
from datetime import datetime
from typing import Generic, Optional, List, TypeVar
from pydantic import BaseModel, EmailStr, Field, model_validator

T = TypeVar("T")


class ReservationStatus(str, enum.Enum):
    """Reservation lifecycle states"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"
    NO_SHOW = "no_show"


class TimeSlot(BaseModel):
    """Bookable time returned by an availability query"""
    time: str
    available: bool
    party_size: Optional[int] = None


class AvailabilityRequest(BaseModel):
    """Availability query"""
    vendor_id: str
    date: str
    party_size: int = Field(ge=1)
    time: Optional[str] = None


class AvailabilityResponse(BaseModel):
    """Slots for one day as reported by a provider"""
    date: str
    slots: List[TimeSlot] = []
    provider_name: str


class CreateReservationRequest(BaseModel):
    """Booking intent"""
    vendor_id: str
    user_id: str
    date: str
    time: str
    party_size: int = Field(ge=1)
    guest_name: str
    guest_email: EmailStr
    guest_phone: Optional[str] = None
    special_requests: Optional[str] = None


class Reservation(BaseModel):
    """Booking record"""
    id: str
    vendor_id: str
    user_id: str
    provider_reservation_id: Optional[str] = None
    date: str
    time: str
    party_size: int
    guest_name: str
    guest_email: str
    guest_phone: Optional[str] = None
    special_requests: Optional[str] = None
    status: ReservationStatus
    confirmation_code: Optional[str] = None
    provider_name: str
    created_at: datetime
    updated_at: datetime


class CancelReservationRequest(BaseModel):
    """Cancellation request"""
    reservation_id: str
    vendor_id: str
    reason: Optional[str] = None


class CancelReservationResult(BaseModel):
    """Cancellation outcome"""
    cancelled: bool


class ReservationProviderConfig(BaseModel):
    """Per-call provider credentials and mode. Never persisted."""
    api_key: Optional[str] = None
    restaurant_id: Optional[str] = None
    webhook_secret: Optional[str] = None
    sandbox: Optional[bool] = None


class ReservationProviderResult(BaseModel, Generic[T]):
    """
    Envelope returned by every provider operation.

    success=True carries data and no error; success=False carries an error
    and no data.
    """
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @model_validator(mode="after")
    def check_envelope(self):
        if self.success:
            if self.data is None:
                raise ValueError("successful result requires data")
            if self.error is not None or self.error_code is not None:
                raise ValueError("successful result cannot carry an error")
        else:
            if self.data is not None:
                raise ValueError("failed result cannot carry data")
            if not self.error:
                raise ValueError("failed result requires an error message")
        return self


# HTTP request/response wrappers

class AvailabilityQuery(BaseModel):
    """Availability lookup against a vendor's reservation system"""
    reservation_system: Optional[str] = None
    request: AvailabilityRequest
    config: Optional[ReservationProviderConfig] = None


class CreateReservationCommand(BaseModel):
    """Direct booking against a vendor's reservation system"""
    reservation_system: Optional[str] = None
    request: CreateReservationRequest
    config: Optional[ReservationProviderConfig] = None


class CancelReservationCommand(BaseModel):
    """Cancellation against a vendor's reservation system"""
    reservation_system: Optional[str] = None
    request: CancelReservationRequest
    config: Optional[ReservationProviderConfig] = None


class ReservationInfoResponse(BaseModel):
    """Booking strategy for a vendor"""
    provider_name: str
    use_deep_link: bool
    deep_link_url: Optional[str] = None
    supports_direct_booking: bool
    supports_availability: bool


class InitiateReservationRequest(BaseModel):
    """Reserve-a-table request from the storefront"""
    vendor_id: str
    vendor_name: Optional[str] = None
    reservation_system: Optional[str] = None
    reservation_link: Optional[str] = None
    reservations_phone: Optional[str] = None
    user_id: str
    party_size: int = Field(ge=1)
    requested_time: datetime
    guest_name: str
    guest_email: EmailStr
    guest_phone: Optional[str] = None
    special_requests: Optional[str] = None
    deal_claim_id: Optional[str] = None


class InitiateReservationResponse(BaseModel):
    """Outcome of a reserve-a-table request"""
    reservation_id: str
    status: ReservationStatus
    reservation_method: str  # direct, website, phone, none
    vendor_name: Optional[str] = None
    redirect_url: Optional[str] = None
    phone: Optional[str] = None
    confirmation_code: Optional[str] = None
    error_code: Optional[str] = None
    message: str
