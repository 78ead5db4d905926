"""Unit tests for order context resources."""

import base64
import json
from datetime import datetime
from decimal import Decimal

import pytest

from monetico.domain.errors import (
    InvalidCartItem,
    InvalidParameterValue,
    UnknownParameter,
)
from monetico.domain.payment_request import PaymentRequest
from monetico.domain.resources import (
    BillingAddressResource,
    CartItemResource,
    CartResource,
    ClientResource,
    Resource,
    ShippingAddressResource,
)


class TestAddressResources:
    """Test billing and shipping address resources."""

    def test_constructor_sets_mandatory_parameters(self) -> None:
        address = BillingAddressResource("7 rue melingue", "Caen", "14000", "France")

        assert address.get_parameter("addressLine1") == "7 rue melingue"
        assert address.get_parameter("city") == "Caen"
        assert address.get_parameter("postalCode") == "14000"
        assert address.get_parameter("country") == "France"

    def test_unset_parameter_defaults_to_empty_string(self) -> None:
        address = ShippingAddressResource("7 rue melingue", "Caen", "14000", "France")
        assert address.get_parameter("email") == ""

    def test_set_parameter_is_chainable(self) -> None:
        address = ShippingAddressResource("7 rue melingue", "Caen", "14000", "France")
        result = address.set_parameter("email", "john@english.fr")

        assert result is address
        assert address.get_parameter("email") == "john@english.fr"

    def test_shipping_only_parameter_rejected_on_billing(self) -> None:
        billing = BillingAddressResource("7 rue melingue", "Caen", "14000", "France")
        shipping = ShippingAddressResource("7 rue melingue", "Caen", "14000", "France")

        shipping.set_parameter("shipIndicator", "billing_address")
        with pytest.raises(UnknownParameter):
            billing.set_parameter("shipIndicator", "billing_address")

    def test_get_parameters_skips_empty_values(self) -> None:
        address = BillingAddressResource("7 rue melingue", "Caen", "14000", "France")
        address.set_parameter("addressLine2", "")

        assert address.get_parameters() == {
            "addressLine1": "7 rue melingue",
            "city": "Caen",
            "postalCode": "14000",
            "country": "France",
        }


class TestClientResource:
    """Test the client resource whitelist."""

    def test_known_parameters(self) -> None:
        client = ClientResource()
        client.set_parameter("civility", "MR")
        client.set_parameter("firstName", "Foo")
        client.set_parameter("lastName", "Boo")

        assert client.get_parameter("civility") == "MR"
        assert client.get_parameters() == {
            "civility": "MR",
            "firstName": "Foo",
            "lastName": "Boo",
        }

    def test_unknown_parameter_raises(self) -> None:
        client = ClientResource()
        with pytest.raises(UnknownParameter) as exc_info:
            client.set_parameter("favouriteColour", "blue")
        assert exc_info.value.field == "favouriteColour"
        assert exc_info.value.resource == "ClientResource"

    def test_get_unknown_parameter_raises(self) -> None:
        with pytest.raises(UnknownParameter):
            ClientResource().get_parameter("favouriteColour")


class TestCartResources:
    """Test cart and cart item resources."""

    def test_cart_item_requires_price_and_quantity(self) -> None:
        item = CartItemResource(10, 2)
        item.set_parameter("name", "Pen")

        assert item.get_parameters() == {"name": "Pen", "unitPrice": 10, "quantity": 2}

    def test_free_item_keeps_zero_price(self) -> None:
        assert CartItemResource(0, 1).get_parameters()["unitPrice"] == 0

    @pytest.mark.parametrize(
        "unit_price, quantity, field",
        [
            (-1, 1, "unitPrice"),
            ("10", 1, "unitPrice"),
            (10, 0, "quantity"),
            (10, 1.5, "quantity"),
        ],
    )
    def test_invalid_cart_item_raises(
        self, unit_price: object, quantity: object, field: str
    ) -> None:
        with pytest.raises(InvalidCartItem) as exc_info:
            CartItemResource(unit_price, quantity)
        assert exc_info.value.field == field

    def test_cart_item_unknown_parameter_raises(self) -> None:
        with pytest.raises(UnknownParameter):
            CartItemResource(10, 2).set_parameter("colour", "red")

    def test_cart_serializes_items_in_order(self) -> None:
        cart = CartResource()
        cart.set_parameter("giftCardCount", 1)
        cart.add_item(CartItemResource(10, 2).set_parameter("name", "Pen"))
        cart.add_item(CartItemResource(3.5, 1).set_parameter("name", "Ink"))

        assert cart.get_parameters() == {
            "giftCardCount": 1,
            "shoppingCartItems": [
                {"name": "Pen", "unitPrice": 10, "quantity": 2},
                {"name": "Ink", "unitPrice": 3.5, "quantity": 1},
            ],
        }
        assert len(cart.items) == 2

    def test_empty_cart_has_no_items_key(self) -> None:
        assert CartResource().get_parameters() == {}

    def test_add_item_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            CartResource().add_item(ClientResource())

    @pytest.mark.parametrize(
        "unit_price", [Decimal("NaN"), Decimal("Infinity"), float("nan"), float("inf")]
    )
    def test_non_finite_unit_price_raises(self, unit_price: object) -> None:
        with pytest.raises(InvalidCartItem) as exc_info:
            CartItemResource(unit_price, 1)
        assert exc_info.value.field == "unitPrice"

    @pytest.mark.parametrize(
        "name, value",
        [("quantity", 0), ("quantity", "2"), ("unitPrice", -5), ("unitPrice", True)],
    )
    def test_set_parameter_checks_price_and_quantity(
        self, name: str, value: object
    ) -> None:
        item = CartItemResource(10, 1)
        with pytest.raises(InvalidCartItem) as exc_info:
            item.set_parameter(name, value)

        assert exc_info.value.field == name
        assert item.get_parameters() == {"unitPrice": 10, "quantity": 1}

    def test_set_parameter_updates_price_and_quantity(self) -> None:
        item = CartItemResource(10, 1).set_parameter("quantity", 3)
        item.set_parameter("unitPrice", Decimal("4.50"))

        assert item.get_parameters() == {"unitPrice": Decimal("4.50"), "quantity": 3}


def _new_resource(resource_cls: type) -> Resource:
    if resource_cls in (BillingAddressResource, ShippingAddressResource):
        return resource_cls("7 rue melingue", "Caen", "14000", "France")
    if resource_cls is CartItemResource:
        return CartItemResource(10, 1)
    return resource_cls()


ALL_RESOURCES = [
    ClientResource,
    BillingAddressResource,
    ShippingAddressResource,
    CartResource,
    CartItemResource,
]


class TestParameterChecks:
    """Every resource rejects unknown names and unsupported values."""

    @pytest.mark.parametrize("resource_cls", ALL_RESOURCES)
    def test_unknown_parameter_raises(self, resource_cls: type) -> None:
        resource = _new_resource(resource_cls)
        with pytest.raises(UnknownParameter) as exc_info:
            resource.set_parameter("favouriteColour", "blue")

        assert exc_info.value.resource == resource_cls.__name__
        assert "favouriteColour" not in resource.get_parameters()

    @pytest.mark.parametrize(
        "value",
        [datetime(1990, 1, 1), None, True, ["MR"], float("nan"), Decimal("-Infinity")],
    )
    def test_unsupported_value_raises(self, value: object) -> None:
        client = ClientResource()
        with pytest.raises(InvalidParameterValue) as exc_info:
            client.set_parameter("birthdate", value)

        assert exc_info.value.field == "birthdate"
        assert client.get_parameters() == {}

    @pytest.mark.parametrize("value", ["1990-01-01", 3, 2.5, Decimal("12.10")])
    def test_strings_and_numbers_are_accepted(self, value: object) -> None:
        client = ClientResource().set_parameter("accountAge", value)
        assert client.get_parameter("accountAge") == value

    def test_numeric_parameters_are_serialized(self, payment: PaymentRequest) -> None:
        client = ClientResource().set_parameter("lastYearTransactions", Decimal("3"))
        payment.set_client(client)

        fields = payment.fields_to_array("1234567", "3.0", "foobar")

        context = json.loads(base64.b64decode(fields["contexte_commande"]))
        assert context == {"client": {"lastYearTransactions": 3}}
