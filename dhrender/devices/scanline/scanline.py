# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
Scanline Renderer Client

Implements the accessor callbacks a scanline rendering engine uses to read a
compiled script and write one scanline of output at a time:

  vertex(tri, n)          projected coordinates of vertex n of a triangle
  mode(tri)               per-triangle shading mode (DHSCAN_MODE_*)
  clear()                 reset the scanline buffer to the background
  flat(pixel, tri)        flat shading: copy the triangle color to a pixel
  load(reg, tri, n)       interpolated shading: vertex color -> register
  store(pixel, reg)       interpolated shading: register -> pixel
  mix(target, a, b, t)    linear interpolation between two registers

Colors in the scanline buffer are packed 0xRRGGBB values. Mixing registers
hold RGB components as floats so that repeated mixing does not accumulate
rounding error.
"""

import numpy as np

from ...core import types as dh
from ...core.compiler import CompiledScript


def unpack_rgb(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def pack_rgb(rgb) -> int:
    r, g, b = (int(round(min(max(float(c), 0.0), 255.0))) for c in rgb)
    return (r << 16) | (g << 8) | b


class ScanlineClient:
    """
    Renderer-facing view of a compiled script.

    Args:
        compiled: A compiled script
        background: Packed color written by clear()
    """

    def __init__(self, compiled: CompiledScript, background: int = 0) -> None:
        assert compiled.store.sealed, "store must be complete before rendering"
        self.config = compiled.config
        self.vertices = compiled.store.vertices
        self.triangles = compiled.store.triangles
        self.background = background
        self.scanline = np.full(self.config.width, background, dtype=np.uint32)
        self.registers = np.zeros((dh.DHSCAN_REGCOUNT, 3), dtype=np.float64)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)

    def _vertex_index(self, tri: int, n: int) -> int:
        assert 0 <= n <= 2
        return int(self.triangles[tri][("i", "j", "k")[n]])

    def vertex(self, tri: int, n: int) -> tuple[int, int, float]:
        """Return (x, y, z) of vertex n (0-2) of triangle tri."""
        rec = self.vertices[self._vertex_index(tri, n)]
        return int(rec["x"]), int(rec["y"]), float(rec["z"])

    def mode(self, tri: int) -> int:
        """Shading mode for triangle tri; the same for every triangle."""
        assert 0 <= tri < len(self.triangles)
        if self.config.shade == dh.SHADE_INTER:
            return dh.DHSCAN_MODE_VERTEX
        return dh.DHSCAN_MODE_TRIANGLE

    def clear(self) -> None:
        self.scanline.fill(self.background)

    def flat(self, pixel: int, tri: int) -> None:
        self.scanline[pixel] = self.triangles[tri]["color"]

    def load(self, reg: int, tri: int, n: int) -> None:
        color = int(self.vertices[self._vertex_index(tri, n)]["color"])
        self.registers[reg] = unpack_rgb(color)

    def store(self, pixel: int, reg: int) -> None:
        self.scanline[pixel] = pack_rgb(self.registers[reg])

    def mix(self, target: int, a: int, b: int, t: float) -> None:
        assert target != a and target != b and a != b
        assert 0.0 <= t <= 1.0
        self.registers[target] = self.registers[a] + (self.registers[b] - self.registers[a]) * t
