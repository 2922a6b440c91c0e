"""FastAPI dependencies"""

from fastapi import Request

from marketplace_api.reservations.registry import ProviderRegistry


def get_registry(request: Request) -> ProviderRegistry:
    """Registry created in the application lifespan"""
    return request.app.state.reservation_registry
