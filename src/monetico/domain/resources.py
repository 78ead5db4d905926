"""Order context resources: client, addresses and shopping cart.

Each resource only accepts the parameter names the gateway documents for it.
Values are kept as given and serialized into the ``contexte_commande`` JSON.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, ClassVar, Union

from .errors import InvalidCartItem, InvalidParameterValue, UnknownParameter

ParameterValue = Union[str, int, float, Decimal]

_ADDRESS_PARAMETERS: tuple[str, ...] = (
    "civility",
    "name",
    "firstName",
    "lastName",
    "middleName",
    "address",
    "addressLine1",
    "addressLine2",
    "addressLine3",
    "city",
    "postalCode",
    "country",
    "stateOrProvince",
    "countrySubdivision",
    "email",
)


def _is_finite(number: Union[int, float, Decimal]) -> bool:
    if isinstance(number, Decimal):
        return number.is_finite()
    return math.isfinite(number)


class Resource:
    """Base class for whitelisted parameter bags."""

    PARAMETERS: ClassVar[tuple[str, ...]] = ()
    SECTION: ClassVar[str] = ""

    def __init__(self) -> None:
        self._parameters: dict[str, ParameterValue] = {}

    def _check_name(self, name: str, value: Any = None) -> None:
        if name not in self.PARAMETERS:
            raise UnknownParameter(type(self).__name__, name, value)

    def _check_value(self, name: str, value: Any) -> None:
        if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
            raise InvalidParameterValue(type(self).__name__, name, value)
        if not isinstance(value, str) and not _is_finite(value):
            raise InvalidParameterValue(type(self).__name__, name, value)

    def set_parameter(self, name: str, value: ParameterValue) -> Resource:
        """Set a whitelisted parameter; returns the resource for chaining.

        Values must be strings or finite numbers.
        """
        self._check_name(name, value)
        self._check_value(name, value)
        self._parameters[name] = value
        return self

    def get_parameter(self, name: str) -> ParameterValue:
        """Return a parameter value, or an empty string when it is unset."""
        self._check_name(name)
        return self._parameters.get(name, "")

    def get_parameters(self) -> dict[str, Any]:
        """Return the non-empty parameters in whitelist order."""
        return {
            name: self._parameters[name]
            for name in self.PARAMETERS
            if self._parameters.get(name, "") not in ("", None)
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._parameters!r})"


class ClientResource(Resource):
    """Customer identity and account history used for 3-D Secure scoring."""

    SECTION = "client"
    PARAMETERS = _ADDRESS_PARAMETERS + (
        "birthLastName",
        "birthCity",
        "birthPostalCode",
        "birthCountry",
        "birthStateOrProvince",
        "birthCountrySubdivision",
        "birthdate",
        "phone",
        "nationalIDNumber",
        "suspiciousAccountActivity",
        "authenticationMethod",
        "authenticationTimestamp",
        "priorAuthenticationMethod",
        "priorAuthenticationTimestamp",
        "paymentMeanAge",
        "lastYearTransactions",
        "last24HoursTransactions",
        "addCardNbLast24Hours",
        "last6MonthsPurchase",
        "lastPasswordChange",
        "accountAge",
        "lastAccountModification",
    )


class _AddressResource(Resource):
    def __init__(
        self,
        address_line1: str,
        city: str,
        postal_code: str,
        country: str,
    ) -> None:
        super().__init__()
        self.set_parameter("addressLine1", address_line1)
        self.set_parameter("city", city)
        self.set_parameter("postalCode", postal_code)
        self.set_parameter("country", country)


class BillingAddressResource(_AddressResource):
    """Billing address of the cardholder."""

    SECTION = "billing"
    PARAMETERS = _ADDRESS_PARAMETERS + (
        "phone",
        "mobilePhone",
        "homePhone",
        "workPhone",
    )


class ShippingAddressResource(_AddressResource):
    """Delivery address of the order."""

    SECTION = "shipping"
    PARAMETERS = BillingAddressResource.PARAMETERS + (
        "shipIndicator",
        "deliveryTimeframe",
        "firstUseDate",
        "matchBillingAddress",
    )


class CartItemResource(Resource):
    """A single cart line. Unit price and quantity are mandatory."""

    PARAMETERS = (
        "name",
        "description",
        "productCode",
        "imageURL",
        "unitPrice",
        "quantity",
        "productSKU",
        "productRisk",
    )

    def __init__(self, unit_price: Union[int, float, Decimal], quantity: int) -> None:
        super().__init__()
        self.set_parameter("unitPrice", unit_price)
        self.set_parameter("quantity", quantity)

    def set_parameter(self, name: str, value: ParameterValue) -> CartItemResource:
        if name == "unitPrice":
            if (
                isinstance(value, bool)
                or not isinstance(value, (int, float, Decimal))
                or not _is_finite(value)
                or value < 0
            ):
                raise InvalidCartItem(name, value)
        elif name == "quantity":
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidCartItem(name, value)
        super().set_parameter(name, value)
        return self


class CartResource(Resource):
    """Shopping cart: gift card details plus an ordered list of items."""

    SECTION = "shoppingCart"
    PARAMETERS = (
        "giftCardAmount",
        "giftCardCount",
        "giftCardCurrency",
        "preOrderDate",
        "preorderIndicator",
        "reorderIndicator",
    )

    def __init__(self) -> None:
        super().__init__()
        self._items: list[CartItemResource] = []

    @property
    def items(self) -> list[CartItemResource]:
        return list(self._items)

    def add_item(self, item: CartItemResource) -> CartResource:
        if not isinstance(item, CartItemResource):
            raise TypeError(f"Expected CartItemResource, got {type(item).__name__}")
        self._items.append(item)
        return self

    def get_parameters(self) -> dict[str, Any]:
        parameters = super().get_parameters()
        if self._items:
            parameters["shoppingCartItems"] = [
                item.get_parameters() for item in self._items
            ]
        return parameters
