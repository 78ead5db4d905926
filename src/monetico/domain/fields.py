"""Assemble the gateway form fields of a payment request.

The assembled mapping is what gets sealed and what the browser posts, so every
value is a string and formatting must match the gateway byte for byte.
"""

from __future__ import annotations

import base64
import json
from decimal import Decimal
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from .constants import (
    DATE_FORMAT,
    DATETIME_FORMAT,
    FIELD_AMOUNT,
    FIELD_COMMITMENT_AMOUNT,
    FIELD_COMMITMENT_COUNT,
    FIELD_COMMITMENT_DATE,
    FIELD_COMPANY_CODE,
    FIELD_DATE,
    FIELD_DESCRIPTION,
    FIELD_EMAIL,
    FIELD_EPT_CODE,
    FIELD_ERROR_URL,
    FIELD_LANGUAGE,
    FIELD_ORDER_CONTEXT,
    FIELD_REFERENCE,
    FIELD_SUCCESS_URL,
    FIELD_VERSION,
)

if TYPE_CHECKING:
    from .payment_request import PaymentRequest


def format_amount(amount: Decimal, currency: str) -> str:
    """Concatenate an amount and its currency code.

    The amount keeps its natural precision: ``50`` -> ``50EUR``,
    ``42.50`` -> ``42.5EUR``. Exponent notation never appears.
    """
    return f"{format(amount.normalize(), 'f')}{currency}"


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_order_context(context: dict[str, Any]) -> str:
    """Serialize the order context as base64-encoded compact JSON."""
    payload = json.dumps(context, separators=(",", ":"), default=_json_default)
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def assemble_fields(
    request: PaymentRequest,
    ept_code: str,
    version: str,
    company_code: str,
) -> dict[str, str]:
    """Build the ordered field mapping posted to the gateway (seal excluded)."""
    fields: dict[str, str] = {
        FIELD_EPT_CODE: ept_code,
        FIELD_COMPANY_CODE: company_code,
        FIELD_DATE: request.date_time.strftime(DATETIME_FORMAT),
        FIELD_AMOUNT: format_amount(request.amount, request.currency),
        FIELD_REFERENCE: request.reference,
        FIELD_DESCRIPTION: quote(request.description, safe=""),
        FIELD_LANGUAGE: request.language,
        FIELD_EMAIL: request.email,
        FIELD_ORDER_CONTEXT: encode_order_context(request.order_context()),
        FIELD_SUCCESS_URL: request.success_url,
        FIELD_ERROR_URL: request.error_url,
        FIELD_VERSION: str(version),
    }

    fields.update(request.options)

    if request.commitments:
        fields[FIELD_COMMITMENT_COUNT] = str(len(request.commitments))
        for index, commitment in enumerate(request.commitments, start=1):
            fields[f"{FIELD_COMMITMENT_DATE}{index}"] = commitment.date.strftime(
                DATE_FORMAT
            )
            fields[f"{FIELD_COMMITMENT_AMOUNT}{index}"] = format_amount(
                commitment.amount, request.currency
            )

    return fields
