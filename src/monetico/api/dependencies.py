"""FastAPI dependencies for the checkout API."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from ..application.checkout import CheckoutService
from ..env import Settings, get_settings
from ..gateway import Monetico


@lru_cache
def get_cached_settings() -> Settings:
    """Read settings from the environment once per process."""
    return get_settings()


def get_monetico(settings: Settings = Depends(get_cached_settings)) -> Monetico:
    """Get the merchant gateway configured from settings."""
    return Monetico(
        ept_code=settings.ept_code,
        security_key=settings.security_key,
        company_code=settings.company_code,
        version=settings.version,
        test=settings.test_mode,
    )


def get_checkout_service(
    monetico: Monetico = Depends(get_monetico),
) -> CheckoutService:
    """Get checkout service."""
    return CheckoutService(monetico)
