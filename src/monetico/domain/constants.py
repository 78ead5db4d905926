"""Fixed values published by the Monetico gateway."""

from __future__ import annotations

from typing import Final

PRODUCTION_URL: Final[str] = "https://p.monetico-services.com/paiement.cgi"
TEST_URL: Final[str] = "https://p.monetico-services.com/test/paiement.cgi"

DEFAULT_VERSION: Final[str] = "3.0"

LANGUAGES: Final[frozenset[str]] = frozenset(
    {"DE", "EN", "ES", "FR", "IT", "JA", "NL", "PT", "SV"}
)

CURRENCIES: Final[frozenset[str]] = frozenset(
    {"EUR", "USD", "GBP", "CHF", "CAD", "JPY", "AUD", "SEK", "NOK", "DKK"}
)

PAYMENT_WAYS: Final[frozenset[str]] = frozenset(
    {"1euro", "3xcb", "4xcb", "fivory", "paypal", "lyfpay"}
)

THREE_D_SECURE_CHALLENGES: Final[tuple[str, ...]] = (
    "no_preference",
    "challenge_preferred",
    "challenge_requested",
    "challenge_mandated",
    "no_challenge_requested",
    "no_challenge_requested_strong_authentication",
    "no_challenge_requested_trusted_third_party",
    "no_challenge_requested_risk_analysis",
)

# Gateway form field names
FIELD_EPT_CODE: Final[str] = "TPE"
FIELD_COMPANY_CODE: Final[str] = "societe"
FIELD_DATE: Final[str] = "date"
FIELD_AMOUNT: Final[str] = "montant"
FIELD_REFERENCE: Final[str] = "reference"
FIELD_DESCRIPTION: Final[str] = "texte-libre"
FIELD_LANGUAGE: Final[str] = "lgue"
FIELD_EMAIL: Final[str] = "mail"
FIELD_ORDER_CONTEXT: Final[str] = "contexte_commande"
FIELD_SUCCESS_URL: Final[str] = "url_retour_ok"
FIELD_ERROR_URL: Final[str] = "url_retour_err"
FIELD_VERSION: Final[str] = "version"
FIELD_SEAL: Final[str] = "MAC"

FIELD_CARD_ALIAS: Final[str] = "aliascb"
FIELD_FORCE_CARD: Final[str] = "forcesaisiecb"
FIELD_DISABLE_3DS: Final[str] = "3dsdebrayable"
FIELD_SIGN_LABEL: Final[str] = "libelleMonetique"
FIELD_DISABLED_PAYMENT_WAYS: Final[str] = "desactivemoyenpaiement"
FIELD_THREE_D_SECURE_CHALLENGE: Final[str] = "ThreeDSecureChallenge"

FIELD_COMMITMENT_COUNT: Final[str] = "nbrech"
FIELD_COMMITMENT_DATE: Final[str] = "dateech"
FIELD_COMMITMENT_AMOUNT: Final[str] = "montantech"

# Protocol 3.0 expects the time of day after the date.
DATETIME_FORMAT: Final[str] = "%d/%m/%Y:%H:%M:%S"
DATE_FORMAT: Final[str] = "%d/%m/%Y"
