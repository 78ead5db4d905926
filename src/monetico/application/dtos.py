"""Data Transfer Objects for the checkout application layer."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

ParameterValue = Union[str, int, float]


class AddressDTO(BaseModel):
    """Billing or shipping address."""

    address_line1: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    postal_code: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    parameters: dict[str, ParameterValue] = Field(
        default_factory=dict,
        description="Additional whitelisted address parameters (e.g. email, phone)",
    )


class ClientDTO(BaseModel):
    """Customer details, keyed by gateway parameter name."""

    parameters: dict[str, ParameterValue] = Field(default_factory=dict)


class CartItemDTO(BaseModel):
    """A single cart line."""

    unit_price: float = Field(..., ge=0)
    quantity: int = Field(..., ge=1)
    parameters: dict[str, ParameterValue] = Field(default_factory=dict)


class CartDTO(BaseModel):
    """Shopping cart with its items."""

    items: list[CartItemDTO] = Field(default_factory=list)
    parameters: dict[str, ParameterValue] = Field(default_factory=dict)


class CommitmentDTO(BaseModel):
    """One installment: date as DD/MM/YYYY and amount."""

    date: str = Field(..., description="Installment date, DD/MM/YYYY")
    amount: Decimal


class PaymentOptionsDTO(BaseModel):
    """Optional gateway behaviours."""

    card_alias: Optional[str] = None
    force_card: Optional[bool] = None
    disable_3ds: Optional[bool] = None
    sign_label: Optional[str] = None
    disabled_payment_ways: list[str] = Field(default_factory=list)
    three_d_secure_challenge: Optional[str] = None


class CreatePaymentFormDTO(BaseModel):
    """DTO for building a sealed payment form."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "reference": "ABCDEF123",
                "description": "Order 123",
                "language": "FR",
                "email": "john@example.com",
                "amount": "42.42",
                "currency": "EUR",
                "date_time": "2019-01-01T00:00:00",
                "success_url": "https://shop.example.com/success",
                "error_url": "https://shop.example.com/error",
            }
        }
    )

    reference: str
    description: str
    language: str
    email: str
    amount: Decimal
    currency: str
    date_time: datetime
    success_url: str
    error_url: str
    options: PaymentOptionsDTO = Field(default_factory=PaymentOptionsDTO)
    client: Optional[ClientDTO] = None
    billing_address: Optional[AddressDTO] = None
    shipping_address: Optional[AddressDTO] = None
    cart: Optional[CartDTO] = None
    commitments: list[CommitmentDTO] = Field(default_factory=list)


class PaymentFormResponseDTO(BaseModel):
    """Gateway endpoint and the sealed fields to post to it."""

    url: str
    fields: dict[str, str]
