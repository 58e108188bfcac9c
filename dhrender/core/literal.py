# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Literal parsing for script tokens.

Both parsers raise ValueError on malformed input; callers translate that into
the ScriptError code appropriate for where the literal appeared.
"""

from .types.constants import INT32_MAX

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def parse_int(token: str) -> int:
    """
    Parse a decimal token as a signed 32-bit integer.

    Accepts an optional leading "+" or "-" followed by one or more ASCII
    digits. The magnitude is accumulated in positive space and checked
    against INT32_MAX before the sign is applied, so the most negative
    32-bit value (-2147483648) is rejected.

    Args:
        token: Token text

    Returns:
        int: The parsed value

    Raises:
        ValueError: If the token is empty, contains a non-digit or overflows
    """
    digits = token
    negative = False
    if digits[:1] == "+":
        digits = digits[1:]
    elif digits[:1] == "-":
        negative = True
        digits = digits[1:]

    if not digits:
        raise ValueError(f"Missing digits in integer literal: '{token}'")

    result = 0
    for c in digits:
        if c < "0" or c > "9":
            raise ValueError(f"Invalid digit in integer literal: '{token}'")
        d = ord(c) - 48

        if result > INT32_MAX // 10:
            raise ValueError(f"Integer literal overflow: '{token}'")
        result *= 10

        if result > INT32_MAX - d:
            raise ValueError(f"Integer literal overflow: '{token}'")
        result += d

    return -result if negative else result


def parse_rgb(text: str) -> int:
    """
    Parse exactly six hexadecimal digits as a packed 0xRRGGBB color.

    Raises:
        ValueError: If the text is not exactly six hex digits
    """
    if len(text) != 6 or any(c not in _HEX_DIGITS for c in text):
        raise ValueError(f"Invalid RGB color literal: '{text}'")
    return int(text, 16)
