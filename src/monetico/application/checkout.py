"""Use cases for building sealed payment forms."""

from __future__ import annotations

import logging

from ..domain.payment_request import PaymentRequest
from ..domain.resources import (
    BillingAddressResource,
    CartItemResource,
    CartResource,
    ClientResource,
    Resource,
    ShippingAddressResource,
)
from ..gateway import Monetico
from .dtos import (
    AddressDTO,
    CartDTO,
    CreatePaymentFormDTO,
    ParameterValue,
    PaymentFormResponseDTO,
    PaymentOptionsDTO,
)

logger = logging.getLogger(__name__)


def _apply_parameters(resource: Resource, parameters: dict[str, ParameterValue]) -> None:
    for name, value in parameters.items():
        resource.set_parameter(name, value)


def _build_address(
    resource_cls: type[BillingAddressResource] | type[ShippingAddressResource],
    dto: AddressDTO,
) -> BillingAddressResource | ShippingAddressResource:
    address = resource_cls(dto.address_line1, dto.city, dto.postal_code, dto.country)
    _apply_parameters(address, dto.parameters)
    return address


def _build_cart(dto: CartDTO) -> CartResource:
    cart = CartResource()
    _apply_parameters(cart, dto.parameters)
    for item_dto in dto.items:
        item = CartItemResource(item_dto.unit_price, item_dto.quantity)
        _apply_parameters(item, item_dto.parameters)
        cart.add_item(item)
    return cart


def _apply_options(request: PaymentRequest, options: PaymentOptionsDTO) -> None:
    if options.card_alias is not None:
        request.set_card_alias(options.card_alias)
    if options.force_card is not None:
        request.set_force_card(options.force_card)
    if options.disable_3ds is not None:
        request.set_disable_3ds(options.disable_3ds)
    if options.sign_label is not None:
        request.set_sign_label(options.sign_label)
    if options.disabled_payment_ways:
        request.set_disabled_payment_ways(options.disabled_payment_ways)
    if options.three_d_secure_challenge is not None:
        request.set_three_d_secure_challenge(options.three_d_secure_challenge)


class CheckoutService:
    """Service turning a payment description into a sealed gateway form."""

    def __init__(self, monetico: Monetico):
        self.monetico = monetico

    def build_request(self, dto: CreatePaymentFormDTO) -> PaymentRequest:
        """Build and validate a PaymentRequest. Raises MoneticoError on bad input."""
        request = PaymentRequest(
            reference=dto.reference,
            description=dto.description,
            language=dto.language,
            email=dto.email,
            amount=dto.amount,
            currency=dto.currency,
            date_time=dto.date_time,
            success_url=dto.success_url,
            error_url=dto.error_url,
            commitments=[
                {"date": commitment.date, "amount": commitment.amount}
                for commitment in dto.commitments
            ],
        )
        _apply_options(request, dto.options)

        if dto.client is not None:
            client = ClientResource()
            _apply_parameters(client, dto.client.parameters)
            request.set_client(client)
        if dto.billing_address is not None:
            request.set_billing_address(
                _build_address(BillingAddressResource, dto.billing_address)
            )
        if dto.shipping_address is not None:
            request.set_shipping_address(
                _build_address(ShippingAddressResource, dto.shipping_address)
            )
        if dto.cart is not None:
            request.set_cart(_build_cart(dto.cart))
        return request

    def create_payment_form(self, dto: CreatePaymentFormDTO) -> PaymentFormResponseDTO:
        """Return the gateway URL and the sealed form fields for a payment."""
        request = self.build_request(dto)
        fields = self.monetico.get_fields(request)
        logger.info(
            "Built payment form for reference %s (test=%s)",
            request.reference,
            self.monetico.test,
        )
        return PaymentFormResponseDTO(url=self.monetico.get_url(), fields=fields)
