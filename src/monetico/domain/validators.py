"""Pure validation rules for payment request values.

Each rule returns the (possibly normalized) value or raises the matching
:mod:`monetico.domain.errors` exception. Rules are applied where a value is
assigned, never when fields are assembled.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable

from pydantic import AnyUrl, EmailStr, TypeAdapter, ValidationError

from .constants import (
    CURRENCIES,
    DATE_FORMAT,
    LANGUAGES,
    PAYMENT_WAYS,
    THREE_D_SECURE_CHALLENGES,
)
from .errors import (
    InvalidAmount,
    InvalidCurrency,
    InvalidDatetime,
    InvalidEmail,
    InvalidEptCode,
    InvalidLanguage,
    InvalidReference,
    InvalidThreeDSecureChallenge,
    InvalidUrl,
)

REFERENCE_PATTERN = re.compile(r"^[A-Za-z0-9]{3,19}$")
ALLOWED_URL_SCHEMES = frozenset({"http", "https"})
EPT_CODE_LENGTH = 7

_email_adapter: TypeAdapter[str] = TypeAdapter(EmailStr)
_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def validate_reference(value: Any) -> str:
    """Validate a merchant order reference (3 to 19 alphanumeric characters)."""
    if not isinstance(value, str) or not REFERENCE_PATTERN.fullmatch(value):
        raise InvalidReference(value)
    return value


def validate_language(value: Any) -> str:
    """Validate an ISO 639-1 language code and return it upper-cased."""
    if not isinstance(value, str) or value.upper() not in LANGUAGES:
        raise InvalidLanguage(value)
    return value.upper()


def validate_currency(value: Any) -> str:
    """Validate an ISO 4217 currency code and return it upper-cased."""
    if not isinstance(value, str) or value.upper() not in CURRENCIES:
        raise InvalidCurrency(value)
    return value.upper()


def validate_datetime(value: Any, field: str = "date_time") -> datetime:
    """Validate a transaction timestamp.

    Only real date objects are accepted: strings are rejected even when they
    look like dates. A plain ``date`` is promoted to midnight.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    raise InvalidDatetime(value, field)


def validate_commitment_date(value: Any, field: str = "date") -> date:
    """Validate an installment date given as a date or a DD/MM/YYYY string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value, DATE_FORMAT).date()
        except ValueError as e:
            raise InvalidDatetime(value, field) from e
    raise InvalidDatetime(value, field)


def validate_email(value: Any, field: str = "email") -> str:
    """Validate an email address syntactically, returning it unchanged."""
    if not isinstance(value, str):
        raise InvalidEmail(value, field)
    try:
        _email_adapter.validate_python(value)
    except ValidationError as e:
        raise InvalidEmail(value, field) from e
    return value


def validate_url(value: Any, field: str) -> str:
    """Validate an absolute http(s) URL, returning it unchanged."""
    if not isinstance(value, str):
        raise InvalidUrl(value, field)
    try:
        url = _url_adapter.validate_python(value)
    except ValidationError as e:
        raise InvalidUrl(value, field) from e
    if url.scheme not in ALLOWED_URL_SCHEMES or not url.host:
        raise InvalidUrl(value, field)
    return value


def validate_amount(value: Any, field: str = "amount") -> Decimal:
    """Validate a strictly positive, finite amount.

    Floats go through ``str`` so ``42.42`` stays ``Decimal("42.42")`` instead of
    its binary expansion.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise InvalidAmount(value, field)
    try:
        amount = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except InvalidOperation as e:
        raise InvalidAmount(value, field) from e
    if not amount.is_finite() or amount <= 0:
        raise InvalidAmount(value, field)
    return amount


def validate_three_d_secure_challenge(value: Any) -> str:
    """Validate a 3-D Secure challenge preference."""
    if value not in THREE_D_SECURE_CHALLENGES:
        raise InvalidThreeDSecureChallenge(value)
    return value


def validate_ept_code(value: Any) -> str:
    """Validate a merchant terminal (EPT) code."""
    if not isinstance(value, str) or len(value) != EPT_CODE_LENGTH:
        raise InvalidEptCode(value)
    return value


def filter_payment_ways(values: Iterable[str]) -> list[str]:
    """Keep only the payment ways the gateway knows, in input order.

    Unknown entries and repeats are dropped silently.
    """
    kept: list[str] = []
    for way in values:
        if way in PAYMENT_WAYS and way not in kept:
            kept.append(way)
    return kept
