"""Payment request entity and its split-payment commitments."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Any, Iterable, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationInfo,
    field_validator,
)

from ..crypto.seal import generate_seal
from .constants import (
    FIELD_CARD_ALIAS,
    FIELD_DISABLE_3DS,
    FIELD_DISABLED_PAYMENT_WAYS,
    FIELD_FORCE_CARD,
    FIELD_SEAL,
    FIELD_SIGN_LABEL,
    FIELD_THREE_D_SECURE_CHALLENGE,
    PRODUCTION_URL,
    TEST_URL,
)
from .fields import assemble_fields
from .resources import (
    BillingAddressResource,
    CartResource,
    ClientResource,
    ShippingAddressResource,
)
from .validators import (
    filter_payment_ways,
    validate_amount,
    validate_commitment_date,
    validate_currency,
    validate_datetime,
    validate_email,
    validate_language,
    validate_reference,
    validate_three_d_secure_challenge,
    validate_url,
)


def _flag(value: bool) -> str:
    return "1" if value else "0"


class Commitment(BaseModel):
    """One installment of a split payment."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    amount: Decimal

    @field_validator("date", mode="before")
    @classmethod
    def _check_date(cls, value: Any) -> dt.date:
        return validate_commitment_date(value)

    @field_validator("amount", mode="before")
    @classmethod
    def _check_amount(cls, value: Any) -> Decimal:
        return validate_amount(value, "commitment amount")


class PaymentRequest(BaseModel):
    """A single payment attempt to be posted to the Monetico gateway.

    Every attribute is validated on construction and on assignment; an invalid
    value raises the matching ``MoneticoError`` and no instance is created.
    Options and order context are attached through the ``set_*`` methods.
    """

    model_config = ConfigDict(
        validate_assignment=True, arbitrary_types_allowed=True, extra="forbid"
    )

    reference: str
    description: str
    language: str
    email: str
    amount: Decimal
    currency: str
    date_time: dt.datetime
    success_url: str
    error_url: str
    commitments: list[Commitment] = Field(default_factory=list)

    client: Optional[ClientResource] = None
    billing_address: Optional[BillingAddressResource] = None
    shipping_address: Optional[ShippingAddressResource] = None
    cart: Optional[CartResource] = None

    _options: dict[str, str] = PrivateAttr(default_factory=dict)

    @field_validator("reference", mode="before")
    @classmethod
    def _check_reference(cls, value: Any) -> str:
        return validate_reference(value)

    @field_validator("language", mode="before")
    @classmethod
    def _check_language(cls, value: Any) -> str:
        return validate_language(value)

    @field_validator("email", mode="before")
    @classmethod
    def _check_email(cls, value: Any) -> str:
        return validate_email(value)

    @field_validator("amount", mode="before")
    @classmethod
    def _check_amount(cls, value: Any) -> Decimal:
        return validate_amount(value)

    @field_validator("currency", mode="before")
    @classmethod
    def _check_currency(cls, value: Any) -> str:
        return validate_currency(value)

    @field_validator("date_time", mode="before")
    @classmethod
    def _check_date_time(cls, value: Any) -> dt.datetime:
        return validate_datetime(value)

    @field_validator("success_url", "error_url", mode="before")
    @classmethod
    def _check_url(cls, value: Any, info: ValidationInfo) -> str:
        return validate_url(value, info.field_name)

    @staticmethod
    def get_url(test: bool = False) -> str:
        """Return the gateway endpoint the form is posted to."""
        return TEST_URL if test else PRODUCTION_URL

    @property
    def options(self) -> dict[str, str]:
        """Option fields in the order they were set; a copy."""
        return dict(self._options)

    def set_card_alias(self, alias: str) -> None:
        """Register or reuse the card stored under ``alias``."""
        self._options[FIELD_CARD_ALIAS] = alias

    def set_force_card(self, value: bool = True) -> None:
        """Force the cardholder to type the card number even with an alias."""
        self._options[FIELD_FORCE_CARD] = _flag(value)

    def set_disable_3ds(self, value: bool = True) -> None:
        self._options[FIELD_DISABLE_3DS] = _flag(value)

    def set_sign_label(self, label: str) -> None:
        """Label shown on the cardholder's bank statement."""
        self._options[FIELD_SIGN_LABEL] = label

    def set_disabled_payment_ways(self, ways: Iterable[str]) -> None:
        """Hide payment ways on the gateway page.

        Unknown ways are ignored; when none is left the option is removed.
        """
        kept = filter_payment_ways(ways)
        if kept:
            self._options[FIELD_DISABLED_PAYMENT_WAYS] = ",".join(kept)
        else:
            self._options.pop(FIELD_DISABLED_PAYMENT_WAYS, None)

    def set_three_d_secure_challenge(self, choice: str) -> None:
        self._options[FIELD_THREE_D_SECURE_CHALLENGE] = (
            validate_three_d_secure_challenge(choice)
        )

    def set_client(self, client: ClientResource) -> None:
        self.client = client

    def set_billing_address(self, address: BillingAddressResource) -> None:
        self.billing_address = address

    def set_shipping_address(self, address: ShippingAddressResource) -> None:
        self.shipping_address = address

    def set_cart(self, cart: CartResource) -> None:
        self.cart = cart

    def order_context(self) -> dict[str, dict[str, Any]]:
        """Return the attached context resources keyed by section name."""
        resources = (
            self.billing_address,
            self.shipping_address,
            self.client,
            self.cart,
        )
        return {
            resource.SECTION: resource.get_parameters()
            for resource in resources
            if resource is not None
        }

    def fields_to_array(
        self, ept_code: str, version: str, company_code: str
    ) -> dict[str, str]:
        """Assemble the gateway form fields, without the seal."""
        return assemble_fields(self, ept_code, version, company_code)

    @staticmethod
    def generate_seal(key: bytes, fields: dict[str, str]) -> str:
        """Compute the ``MAC`` for ``fields`` with a usable (derived) key."""
        return generate_seal(key, fields)

    @staticmethod
    def generate_fields(seal: str, fields: dict[str, str]) -> dict[str, str]:
        """Return a copy of ``fields`` with the seal merged in."""
        return {**fields, FIELD_SEAL: seal}
