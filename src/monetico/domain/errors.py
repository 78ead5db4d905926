"""Domain-specific exceptions.

Every error carries the offending field name and value. They do not inherit
from ``ValueError``, so pydantic lets them propagate unchanged out of field
validators.
"""

from __future__ import annotations

from typing import Any


class MoneticoError(Exception):
    """Base class for payment request errors."""

    def __init__(self, field: str, value: Any, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidReference(MoneticoError):
    """Raised when a payment reference is not 3 to 19 alphanumeric characters."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            "reference",
            value,
            f"Invalid reference {value!r}: expected 3 to 19 alphanumeric characters",
        )


class InvalidLanguage(MoneticoError):
    """Raised when a language is not supported by the gateway."""

    def __init__(self, value: Any) -> None:
        super().__init__("language", value, f"Invalid language {value!r}")


class InvalidCurrency(MoneticoError):
    """Raised when a currency is not an accepted ISO 4217 code."""

    def __init__(self, value: Any) -> None:
        super().__init__("currency", value, f"Invalid currency {value!r}")


class InvalidDatetime(MoneticoError):
    """Raised when a date or datetime value is missing or malformed."""

    def __init__(self, value: Any, field: str = "date_time") -> None:
        super().__init__(field, value, f"Invalid datetime for {field}: {value!r}")


class InvalidEmail(MoneticoError):
    """Raised when an email address is not syntactically valid."""

    def __init__(self, value: Any, field: str = "email") -> None:
        super().__init__(field, value, f"Invalid email for {field}: {value!r}")


class InvalidUrl(MoneticoError):
    """Raised when a URL is malformed or uses a scheme other than http(s)."""

    def __init__(self, value: Any, field: str) -> None:
        super().__init__(field, value, f"Invalid URL for {field}: {value!r}")


class InvalidAmount(MoneticoError):
    """Raised when an amount is not a positive decimal number."""

    def __init__(self, value: Any, field: str = "amount") -> None:
        super().__init__(field, value, f"Invalid amount for {field}: {value!r}")


class InvalidThreeDSecureChallenge(MoneticoError):
    """Raised when a 3-D Secure challenge preference is not recognized."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            "ThreeDSecureChallenge",
            value,
            f"Invalid 3-D Secure challenge {value!r}",
        )


class UnknownParameter(MoneticoError):
    """Raised when a context resource is given a parameter outside its whitelist."""

    def __init__(self, resource: str, name: Any, value: Any = None) -> None:
        super().__init__(name, value, f"Unknown parameter {name!r} for {resource}")
        self.resource = resource


class InvalidParameterValue(MoneticoError):
    """Raised when a context resource parameter is not a string or a finite number."""

    def __init__(self, resource: str, name: str, value: Any) -> None:
        super().__init__(
            name,
            value,
            f"Invalid value {value!r} for parameter {name!r} of {resource}",
        )
        self.resource = resource


class InvalidCartItem(MoneticoError):
    """Raised when a cart item has a bad unit price or quantity."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(field, value, f"Invalid cart item {field}: {value!r}")


class InvalidKey(MoneticoError):
    """Raised when the security key is not usable for sealing."""

    def __init__(self, value: Any, reason: str = "malformed key") -> None:
        # The key itself is a secret and never goes into the message.
        super().__init__("key", value, f"Invalid security key: {reason}")


class InvalidEptCode(MoneticoError):
    """Raised when the merchant EPT (terminal) code is malformed."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            "ept_code", value, f"Invalid EPT code {value!r}: expected 7 characters"
        )
