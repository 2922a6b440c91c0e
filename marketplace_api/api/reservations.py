"""Reservation API endpoints"""

from typing import Awaitable, Callable, Optional
from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, Query
import structlog

from marketplace_api.api.deps import get_registry
from marketplace_api.reservations.credentials import resolve_provider_config
from marketplace_api.reservations.registry import ProviderRegistry
from marketplace_api.schemas.reservation import (
    AvailabilityQuery,
    AvailabilityResponse,
    CancelReservationCommand,
    CancelReservationResult,
    CreateReservationCommand,
    CreateReservationRequest,
    InitiateReservationRequest,
    InitiateReservationResponse,
    Reservation,
    ReservationInfoResponse,
    ReservationProviderConfig,
    ReservationProviderResult,
    ReservationStatus,
)

router = APIRouter()
logger = structlog.get_logger()


async def _call_provider(
    provider_name: str,
    operation: Callable[..., Awaitable[ReservationProviderResult]],
    request,
    config: ReservationProviderConfig,
) -> ReservationProviderResult:
    """Run a provider operation; anything it raises becomes a 500"""
    try:
        return await operation(request, config)
    except Exception as e:
        logger.error(
            "Reservation provider error",
            provider=provider_name,
            operation=operation.__name__,
            error=str(e),
        )
        raise HTTPException(status_code=500, detail="Reservation provider error")


@router.get("/info", response_model=ReservationInfoResponse)
async def get_reservation_info(
    reservation_system: Optional[str] = Query(None),
    reservation_link: Optional[str] = Query(None),
    registry: ProviderRegistry = Depends(get_registry),
):
    """Booking strategy for a vendor's reservation settings"""
    info = registry.get_reservation_info(reservation_system, reservation_link)
    return ReservationInfoResponse(
        provider_name=info.provider.name,
        use_deep_link=info.use_deep_link,
        deep_link_url=info.deep_link_url,
        supports_direct_booking=info.supports_direct_booking,
        supports_availability=info.supports_availability,
    )


@router.post("/availability", response_model=ReservationProviderResult[AvailabilityResponse])
async def check_availability(
    query: AvailabilityQuery,
    registry: ProviderRegistry = Depends(get_registry),
):
    """Ask the vendor's reservation system for open slots"""
    provider = registry.get_reservation_provider(query.reservation_system)
    config = resolve_provider_config(provider.name, query.config)

    logger.info(
        "Availability request",
        provider=provider.name,
        vendor_id=query.request.vendor_id,
        date=query.request.date,
        party_size=query.request.party_size,
    )
    return await _call_provider(provider.name, provider.get_availability, query.request, config)


@router.post("", response_model=ReservationProviderResult[Reservation])
async def create_reservation(
    command: CreateReservationCommand,
    registry: ProviderRegistry = Depends(get_registry),
):
    """Book directly through the vendor's reservation system"""
    provider = registry.get_reservation_provider(command.reservation_system)
    config = resolve_provider_config(provider.name, command.config)

    logger.info(
        "Create reservation request",
        provider=provider.name,
        vendor_id=command.request.vendor_id,
        user_id=command.request.user_id,
    )
    return await _call_provider(provider.name, provider.create_reservation, command.request, config)


@router.post("/cancel", response_model=ReservationProviderResult[CancelReservationResult])
async def cancel_reservation(
    command: CancelReservationCommand,
    registry: ProviderRegistry = Depends(get_registry),
):
    """Cancel through the vendor's reservation system"""
    provider = registry.get_reservation_provider(command.reservation_system)
    config = resolve_provider_config(provider.name, command.config)

    logger.info(
        "Cancel reservation request",
        provider=provider.name,
        vendor_id=command.request.vendor_id,
        reservation_id=command.request.reservation_id,
    )
    return await _call_provider(provider.name, provider.cancel_reservation, command.request, config)


@router.post("/initiate", response_model=InitiateReservationResponse)
async def initiate_reservation(
    body: InitiateReservationRequest,
    registry: ProviderRegistry = Depends(get_registry),
):
    """
    Start a reservation from the storefront.

    Books in-app when the vendor's system supports it. Otherwise, or when
    the provider declines (NOT_IMPLEMENTED, DEEP_LINK_ONLY), hands the guest
    the vendor's booking link or phone number.
    """
    info = registry.get_reservation_info(body.reservation_system, body.reservation_link)
    vendor_name = body.vendor_name or "the restaurant"
    error_code = None

    if not info.use_deep_link:
        booking = CreateReservationRequest(
            vendor_id=body.vendor_id,
            user_id=body.user_id,
            date=body.requested_time.date().isoformat(),
            time=body.requested_time.strftime("%H:%M"),
            party_size=body.party_size,
            guest_name=body.guest_name,
            guest_email=body.guest_email,
            guest_phone=body.guest_phone,
            special_requests=body.special_requests,
        )
        config = resolve_provider_config(info.provider.name)
        result = await _call_provider(
            info.provider.name, info.provider.create_reservation, booking, config
        )

        if result.success:
            reservation = result.data
            logger.info(
                "Reservation booked",
                provider=info.provider.name,
                vendor_id=body.vendor_id,
                reservation_id=reservation.id,
            )
            return InitiateReservationResponse(
                reservation_id=reservation.id,
                status=reservation.status,
                reservation_method="direct",
                vendor_name=body.vendor_name,
                confirmation_code=reservation.confirmation_code,
                message=f"Your table at {vendor_name} is booked.",
            )

        error_code = result.error_code
        logger.warning(
            "Direct booking unavailable, falling back to deep link",
            provider=info.provider.name,
            vendor_id=body.vendor_id,
            error_code=error_code,
        )

    # deep_link_url is only set when the strategy was deep link from the start
    redirect_url = info.deep_link_url or body.reservation_link or None
    phone = body.reservations_phone or None

    if redirect_url:
        method = "website"
        message = f"Complete your booking on {vendor_name}'s booking page."
    elif phone:
        method = "phone"
        message = f"Call {vendor_name} at {phone} to complete your reservation."
    else:
        method = "none"
        message = f"{body.vendor_name or 'This restaurant'} does not take reservations online. Please contact them directly."

    logger.info(
        "Reservation initiated",
        vendor_id=body.vendor_id,
        reservation_method=method,
        deal_claim_id=body.deal_claim_id,
    )
    return InitiateReservationResponse(
        reservation_id=str(uuid4()),
        status=ReservationStatus.PENDING,
        reservation_method=method,
        vendor_name=body.vendor_name,
        redirect_url=redirect_url,
        phone=phone if not redirect_url else None,
        error_code=error_code,
        message=message,
    )
