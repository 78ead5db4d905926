"""Known-good payment data shared by the unit tests."""

from __future__ import annotations

from datetime import datetime
from typing import Any

# Last pair "P0" exercises the key transform: it derives to "...7890".
SECURITY_KEY = "12345678901234567890123456789012345678P0"
USABLE_KEY_HEX = "1234567890123456789012345678901234567890"
EPT_CODE = "1234567"
COMPANY_CODE = "foobar"
VERSION = "3.0"


def payment_kwargs(**overrides: Any) -> dict[str, Any]:
    """Return valid PaymentRequest arguments, with optional overrides."""
    kwargs: dict[str, Any] = {
        "reference": "ABCDEF123",
        "description": "PHPUnit",
        "language": "FR",
        "email": "john@english.fr",
        "amount": 42.42,
        "currency": "EUR",
        "date_time": datetime(2019, 1, 1),
        "success_url": "https://127.0.0.1/success",
        "error_url": "https://127.0.0.1/error",
    }
    kwargs.update(overrides)
    return kwargs
