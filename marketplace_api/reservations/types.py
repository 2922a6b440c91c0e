"""Identifiers shared across the reservation layer"""

import enum


class ProviderName(str, enum.Enum):
    """Stable provider names, stamped onto reservations and availability"""
    DEEP_LINK = "DeepLink"
    OPENTABLE = "OpenTable"
    SEVENROOMS = "SevenRooms"
    RESY = "Resy"


class ErrorCode(str, enum.Enum):
    """Failure codes carried in ReservationProviderResult.error_code"""
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"
    DEEP_LINK_ONLY = "DEEP_LINK_ONLY"
