"""Reversible encoding of internal integer keys into opaque URL-safe tokens.

A token is the URL-safe Base64 encoding (padding kept) of the decimal form of
the key, which keeps tokens issued by the legacy backend decodable:

    encode_id(1)   -> "MQ=="
    encode_id(42)  -> "NDI="

This is obfuscation against casual enumeration, not access control. Callers
must still authenticate the request before trusting a decoded key.
"""

from __future__ import annotations

import base64
import binascii
from typing import Final


MAX_ID: Final[int] = 2**63 - 1

TOKEN_ALPHABET: Final[frozenset[str]] = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_="
)


class InvalidToken(ValueError):
    pass


class IdOutOfRange(ValueError):
    pass


def encode_id(value: int) -> str:
    """Encode a non-negative integer key as an opaque token."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"id must be an int, got {type(value).__name__}")
    if value < 0 or value > MAX_ID:
        raise IdOutOfRange(f"id {value} outside supported range 0..{MAX_ID}")
    raw = str(value).encode("ascii")
    return base64.urlsafe_b64encode(raw).decode("ascii")


_MAX_TOKEN_LENGTH: Final[int] = len(encode_id(MAX_ID))


def decode_id(token: str) -> int:
    """Decode a token produced by :func:`encode_id`.

    Raises:
        InvalidToken: If the token is not the exact encoding of a key in range.
    """
    if not isinstance(token, str) or not token:
        raise InvalidToken("empty token")
    if len(token) > _MAX_TOKEN_LENGTH:
        raise InvalidToken("token too long")
    if any(ch not in TOKEN_ALPHABET for ch in token):
        raise InvalidToken("invalid token alphabet")
    if len(token) % 4:
        raise InvalidToken("invalid token length")
    try:
        raw = base64.urlsafe_b64decode(token.encode("ascii"))
    except (binascii.Error, ValueError) as exc:
        raise InvalidToken("invalid token encoding") from exc
    if not raw.isdigit():
        raise InvalidToken("token payload is not a decimal id")
    value = int(raw)
    if value > MAX_ID:
        raise InvalidToken("token id out of range")
    # Rejects leading zeros, stray padding and non-zero trailing bits.
    if encode_id(value) != token:
        raise InvalidToken("non-canonical token")
    return value


def try_decode_id(token: str) -> int | None:
    """Decode a token, returning None instead of raising on invalid input."""
    try:
        return decode_id(token)
    except InvalidToken:
        return None


def is_valid_token(token: str) -> bool:
    return try_decode_id(token) is not None
