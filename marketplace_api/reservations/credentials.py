"""Per-call provider configuration"""

from typing import Dict, Optional

from marketplace_api.config import Settings, get_settings
from marketplace_api.schemas.reservation import ReservationProviderConfig
from marketplace_api.reservations.types import ProviderName


def _defaults(provider_name: str, settings: Settings) -> Dict[str, Optional[str]]:
    if provider_name == ProviderName.OPENTABLE.value:
        return {
            "api_key": settings.opentable_api_key,
            "restaurant_id": settings.opentable_restaurant_id,
        }
    if provider_name == ProviderName.SEVENROOMS.value:
        return {
            "api_key": settings.sevenrooms_api_key,
            "webhook_secret": settings.sevenrooms_webhook_secret,
        }
    if provider_name == ProviderName.RESY.value:
        return {
            "api_key": settings.resy_api_key,
            "webhook_secret": settings.resy_webhook_secret,
        }
    return {}


def resolve_provider_config(
    provider_name: str,
    override: Optional[ReservationProviderConfig] = None,
    settings: Optional[Settings] = None,
) -> ReservationProviderConfig:
    """
    Merge a caller's per-call config over the provider's configured defaults.

    Fields the caller set win. Empty settings values count as unset.
    sandbox falls back to RESERVATIONS_SANDBOX.
    """
    settings = settings or get_settings()
    values = {k: v for k, v in _defaults(provider_name, settings).items() if v}
    values["sandbox"] = settings.reservations_sandbox

    if override is not None:
        values.update(override.model_dump(exclude_none=True))

    return ReservationProviderConfig(**values)
