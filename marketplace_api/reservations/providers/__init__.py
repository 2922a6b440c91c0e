"""Reservation provider implementations"""

from typing import Union

from marketplace_api.reservations.providers.base import ReservationProvider
from marketplace_api.reservations.providers.deep_link import DeepLinkProvider
from marketplace_api.reservations.providers.opentable import OpenTableProvider
from marketplace_api.reservations.providers.sevenrooms import SevenRoomsProvider
from marketplace_api.reservations.providers.resy import ResyProvider

AnyReservationProvider = Union[
    DeepLinkProvider,
    OpenTableProvider,
    SevenRoomsProvider,
    ResyProvider,
]

__all__ = [
    "ReservationProvider",
    "AnyReservationProvider",
    "DeepLinkProvider",
    "OpenTableProvider",
    "SevenRoomsProvider",
    "ResyProvider",
]
