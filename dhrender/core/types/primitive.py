# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
dhrender Types Primitive Classes Module

The values that live on the interpreter's operand stack. Each is a small
immutable wrapper around a Python int; the class itself is the type tag.
"""


class StackValue(object):
    """Base class for interpreter stack values."""

    __slots__ = ("val",)

    def __init__(self, val: int) -> None:
        self.val = val

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.val == other.val

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.val))


class Int(StackValue):
    """Signed 32-bit integer literal."""

    __slots__ = ()

    def __str__(self) -> str:
        return str(self.val)

    def __repr__(self) -> str:
        return f"Int({self.val})"


class RgbColor(StackValue):
    """Packed 24-bit RGB color literal, 0xRRGGBB."""

    __slots__ = ()

    def __str__(self) -> str:
        return "{%06x}" % self.val

    def __repr__(self) -> str:
        return "RgbColor(0x%06x)" % self.val
