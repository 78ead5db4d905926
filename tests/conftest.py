"""Shared pytest fixtures for payment request tests."""

from __future__ import annotations

import pytest

from monetico.crypto.seal import get_usable_key
from monetico.domain.payment_request import PaymentRequest
from monetico.gateway import Monetico

from tests.fixtures import COMPANY_CODE, EPT_CODE, SECURITY_KEY, payment_kwargs


@pytest.fixture
def payment() -> PaymentRequest:
    """A valid 42.42 EUR payment request without options or context."""
    return PaymentRequest(**payment_kwargs())


@pytest.fixture
def usable_key() -> bytes:
    """Binary HMAC key derived from the test security key."""
    return get_usable_key(SECURITY_KEY)


@pytest.fixture
def monetico() -> Monetico:
    """Gateway configured for the test environment."""
    return Monetico(EPT_CODE, SECURITY_KEY, COMPANY_CODE, test=True)
