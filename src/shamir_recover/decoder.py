# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

# src/shamir_recover/decoder.py
"""Conversion between digit strings in bases 2-36 and Python integers."""

from __future__ import annotations

from .errors import InvalidBase, InvalidDigit

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = 36

_DIGIT_VALUES = {ch: value for value, ch in enumerate(DIGITS)}


def _check_base(base: int) -> None:
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(f"base must be an integer, got {base!r}")
    if not MIN_BASE <= base <= MAX_BASE:
        shown = base if base.bit_length() < 64 else f"<{base.bit_length()}-bit integer>"
        raise InvalidBase(f"base {shown} is outside [{MIN_BASE}, {MAX_BASE}]")


def decode(digits: str, base: int) -> int:
    """Return the unsigned magnitude of ``digits`` read in ``base``.

    Digits are case-insensitive. Signs, whitespace, underscores and radix
    prefixes are rejected even though :func:`int` would accept some of them.
    """
    _check_base(base)
    if not digits:
        raise InvalidDigit("digit string is empty")

    value = 0
    for position, ch in enumerate(digits):
        digit = _DIGIT_VALUES.get(ch.lower())
        if digit is None or digit >= base:
            raise InvalidDigit(f"invalid digit {ch!r} at position {position} for base {base}")
        value = value * base + digit
    return value


def encode(value: int, base: int) -> str:
    """Render ``value`` in ``base`` without leading zeros (lowercase digits)."""
    _check_base(base)
    if value < 0:
        return "-" + encode(-value, base)
    if value == 0:
        return "0"

    out: list[str] = []
    while value:
        value, digit = divmod(value, base)
        out.append(DIGITS[digit])
    return "".join(reversed(out))


__all__ = ["decode", "encode", "DIGITS", "MIN_BASE", "MAX_BASE"]
