"""Test fixtures for payment request tests."""

from .payments import (
    COMPANY_CODE,
    EPT_CODE,
    SECURITY_KEY,
    USABLE_KEY_HEX,
    VERSION,
    payment_kwargs,
)

__all__ = [
    "COMPANY_CODE",
    "EPT_CODE",
    "SECURITY_KEY",
    "USABLE_KEY_HEX",
    "VERSION",
    "payment_kwargs",
]
