"""Result envelope builders shared by every reservation provider"""

import secrets
import string
import time
from typing import Any, Optional
import structlog

from marketplace_api.schemas.reservation import ReservationProviderResult
from marketplace_api.reservations.types import ErrorCode

logger = structlog.get_logger()

_BASE36 = string.digits + string.ascii_uppercase


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_confirmation_code() -> str:
    """
    Short guest-facing code, e.g. ``RL-MF3K2Q1A-7ZQ4``.

    Millisecond timestamp plus a random suffix. Display value only, not a
    dedup key: no collision check is made.
    """
    stamp = _to_base36(time.time_ns() // 1_000_000)
    suffix = "".join(secrets.choice(_BASE36) for _ in range(4))
    return f"RL-{stamp}-{suffix}"


def ok(data: Any) -> ReservationProviderResult:
    return ReservationProviderResult(success=True, data=data)


def failure(error: str, error_code: Optional[str] = None) -> ReservationProviderResult:
    return ReservationProviderResult(
        success=False,
        error=error,
        error_code=error_code,
    )


def log_provider_call(provider_name: str, operation: str, request: Any, error_code: Optional[str] = None) -> None:
    """Debug line for a provider operation; request may be any object"""
    logger.debug(
        "Reservation provider call",
        provider=provider_name,
        operation=operation,
        vendor_id=getattr(request, "vendor_id", None),
        error_code=error_code,
    )


def not_implemented_error(
    method: str,
    provider_name: str,
    request: Any = None,
) -> ReservationProviderResult:
    """Failure for an operation a provider has not integrated yet"""
    log_provider_call(provider_name, method, request, ErrorCode.NOT_IMPLEMENTED.value)
    return failure(
        f"{method} is not implemented for {provider_name} provider",
        ErrorCode.NOT_IMPLEMENTED.value,
    )


def deep_link_only(error: str) -> ReservationProviderResult:
    """Failure telling the caller to redirect to the vendor's booking page"""
    return failure(error, ErrorCode.DEEP_LINK_ONLY.value)
