# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
dhrender Types Context Module

Results carried from the first pass into the second, and the bounded
operand stack used by the interpreter.
"""

from dataclasses import dataclass

from .constants import SHADE_NAMES


@dataclass(frozen=True)
class ScriptConfig:
    """Values declared by the metacommand header."""
    width: int
    height: int
    shade: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height} {SHADE_NAMES.get(self.shade, '?')}"


@dataclass(frozen=True)
class ScriptCounts:
    """Number of vertex and triangle operations found in the script body."""
    vertex_count: int
    triangle_count: int


class Stack(list):
    """
    Interpreter operand stack with a fixed capacity.

    Extends Python list; the owner is responsible for checking is_full()
    before appending.
    """
    def __init__(self, max_length: int) -> None:
        super().__init__()
        self.max_length = max_length

    def is_full(self) -> bool:
        return len(self) >= self.max_length

    def __str__(self) -> str:
        return "[" + ", ".join(item.__str__() for item in self) + "]"

    def __repr__(self) -> str:
        return self.__str__()
