"""Parsing utilities for hex-encoded JSON-RPC values."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal, localcontext

from typing import Any

from getblock.helpers.constants import ETHER
from getblock.helpers.errors import DecodeError


EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def decode_hex_int(value: Any, field: str = "value") -> int:
    """Parse a hex-integer field to int.

    Empty strings and null decode to zero. Any other string is parsed as an
    integer literal with its base taken from the prefix, so "0x" means hex.
    Surrounding whitespace is not trimmed.

    Args:
        value: Raw wire value
        field: Field name reported on failure

    Returns:
        int: Parsed non-negative integer

    Raises:
        DecodeError: If the value is not a valid non-negative integer literal

    Example:
        >>> decode_hex_int("0xff")
        255
        >>> decode_hex_int("")
        0
    """
    if value is None or value == "":
        return 0
    if not isinstance(value, str):
        raise DecodeError(field, value, "expected a hex string")
    if value != value.strip():
        raise DecodeError(field, value, "surrounding whitespace")

    try:
        number = int(value, 0)
    except ValueError as e:
        raise DecodeError(field, value, "not an integer literal") from e

    if number < 0:
        raise DecodeError(field, value, "negative value")
    return number


def encode_hex_int(number: int) -> str:
    """Format a non-negative integer as a 0x-prefixed lowercase hex string.

    Example:
        >>> encode_hex_int(255)
        '0xff'
    """
    if number < 0:
        msg = f"cannot hex-encode negative value {number}"
        raise ValueError(msg)
    return hex(number)


def decode_hex_timestamp(value: Any, field: str = "timestamp") -> datetime:
    """Parse a hex-encoded Unix timestamp to an aware UTC datetime.

    Args:
        value: Hex-encoded count of seconds since the Unix epoch
        field: Field name reported on failure

    Returns:
        datetime: UTC datetime, the epoch itself for an empty value

    Raises:
        DecodeError: If the value is not an integer literal or out of range

    Example:
        >>> decode_hex_timestamp("0x5f5e100")
        datetime.datetime(1973, 3, 3, 9, 46, 40, tzinfo=datetime.timezone.utc)
    """
    seconds = decode_hex_int(value, field)
    try:
        return EPOCH + timedelta(seconds=seconds)
    except OverflowError as e:
        raise DecodeError(field, value, "timestamp out of range") from e


def wei_to_ether(wei: int | None) -> Decimal | None:
    """Convert Wei to Ether exactly (divide by 1e18).

    Args:
        wei: Amount in Wei, or None

    Returns:
        Decimal | None: Amount in Ether, or None if input was None

    Example:
        >>> wei_to_ether(1500000000000000000)
        Decimal('1.5')
    """
    if wei is None:
        return None
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(str(abs(wei))) + 18)
        return Decimal(wei) / ETHER


__all__ = [
    "EPOCH",
    "decode_hex_int",
    "decode_hex_timestamp",
    "encode_hex_int",
    "wei_to_ether",
]
