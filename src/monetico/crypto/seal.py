from __future__ import annotations

import string
from typing import Final, Mapping

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, hmac

from ..domain.errors import InvalidKey

SECURITY_KEY_LENGTH: Final[int] = 40
FIELD_SEPARATOR: Final[str] = "*"

_HEX_DIGITS = frozenset(string.hexdigits)


def get_usable_key(security_key: str) -> bytes:
    """Derive the binary HMAC key from the 40-character merchant security key.

    The first 38 characters are kept as is. The last pair follows the
    gateway's published transform: a first character between ``G`` and the
    backtick is shifted down by 23, a second character ``M`` becomes ``0``.
    The resulting 40 hex digits decode to a 20-byte key.
    """
    if not isinstance(security_key, str) or len(security_key) != SECURITY_KEY_LENGTH:
        raise InvalidKey(None, f"expected {SECURITY_KEY_LENGTH} characters")

    hex_key = security_key[:38]
    last_pair = security_key[38:40]
    first = ord(last_pair[0])
    if 70 < first < 97:
        hex_key += chr(first - 23) + last_pair[1]
    elif last_pair[1] == "M":
        hex_key += last_pair[0] + "0"
    else:
        hex_key += last_pair

    if not set(hex_key) <= _HEX_DIGITS:
        raise InvalidKey(None, "not a hexadecimal key")
    return bytes.fromhex(hex_key)


def canonical_string(fields: Mapping[str, str]) -> str:
    """Join ``name=value`` pairs sorted by name with ``*``."""
    return FIELD_SEPARATOR.join(
        f"{name}={fields[name]}" for name in sorted(fields)
    )


def _hmac(key: bytes) -> hmac.HMAC:
    if not isinstance(key, (bytes, bytearray)) or not key:
        raise InvalidKey(None, "expected a non-empty binary key")
    return hmac.HMAC(bytes(key), hashes.SHA1())


def generate_seal(key: bytes, fields: Mapping[str, str]) -> str:
    """Compute the upper-case hex HMAC-SHA1 seal over the canonical fields.

    ``key`` is the usable key returned by :func:`get_usable_key`. The result
    does not depend on the iteration order of ``fields``.
    """
    mac = _hmac(key)
    mac.update(canonical_string(fields).encode("utf-8"))
    return mac.finalize().hex().upper()


def verify_seal(key: bytes, fields: Mapping[str, str], seal: str) -> bool:
    """Check ``seal`` against ``fields`` in constant time."""
    mac = _hmac(key)
    mac.update(canonical_string(fields).encode("utf-8"))
    try:
        mac.verify(bytes.fromhex(seal))
    except (InvalidSignature, ValueError):
        return False
    return True
