"""Payment form API routes."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, status
from prometheus_client import Counter, Histogram

from ...application.checkout import CheckoutService
from ...application.dtos import CreatePaymentFormDTO, PaymentFormResponseDTO
from ...domain.errors import MoneticoError
from ..dependencies import get_checkout_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payments", tags=["payments"])

payment_form_requests_total = Counter(
    "payment_form_requests_total",
    "Total payment form requests processed",
    ["status"],
)

payment_form_request_duration_milliseconds = Histogram(
    "payment_form_request_duration_milliseconds",
    "Wall time to build and seal a payment form (ms)",
    ["status"],
)


def _observe(label: str, start_time: float) -> None:
    payment_form_requests_total.labels(status=label).inc()
    elapsed = (time.perf_counter() - start_time) * 1000
    payment_form_request_duration_milliseconds.labels(status=label).observe(elapsed)


@router.post(
    "/form",
    response_model=PaymentFormResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def create_payment_form(
    payment_data: CreatePaymentFormDTO,
    checkout_service: CheckoutService = Depends(get_checkout_service),
) -> PaymentFormResponseDTO:
    """Build the sealed fields the browser posts to the gateway."""
    start_time = time.perf_counter()
    try:
        result = checkout_service.create_payment_form(payment_data)
        _observe("success", start_time)
        return result
    except MoneticoError as e:
        _observe("client_error", start_time)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"field": e.field, "message": str(e)},
        )
    except Exception as e:
        logger.exception("Internal server error while building payment form: %s", e)
        _observe("server_error", start_time)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error while building payment form",
        )
