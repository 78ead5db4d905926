"""Merchant-side entry point holding the gateway credentials."""

from __future__ import annotations

import logging

from .crypto.seal import generate_seal, get_usable_key
from .domain.constants import DEFAULT_VERSION
from .domain.payment_request import PaymentRequest
from .domain.validators import validate_ept_code

logger = logging.getLogger(__name__)


class Monetico:
    """Seal payment requests for one merchant terminal.

    The security key is derived once at construction; a malformed EPT code or
    key fails immediately.
    """

    def __init__(
        self,
        ept_code: str,
        security_key: str,
        company_code: str,
        version: str = DEFAULT_VERSION,
        test: bool = False,
    ) -> None:
        self.ept_code = validate_ept_code(ept_code)
        self.company_code = company_code
        self.version = version
        self.test = test
        self._usable_key = get_usable_key(security_key)

    def __repr__(self) -> str:
        return (
            f"Monetico(ept_code={self.ept_code!r}, company_code={self.company_code!r}, "
            f"version={self.version!r}, test={self.test!r})"
        )

    @property
    def usable_key(self) -> bytes:
        return self._usable_key

    def get_url(self) -> str:
        return PaymentRequest.get_url(self.test)

    def get_fields(self, request: PaymentRequest) -> dict[str, str]:
        """Return the sealed, form-ready fields for ``request``."""
        fields = request.fields_to_array(self.ept_code, self.version, self.company_code)
        seal = generate_seal(self._usable_key, fields)
        logger.debug(
            "Sealed payment request %s (%d fields)", request.reference, len(fields)
        )
        return request.generate_fields(seal, fields)
