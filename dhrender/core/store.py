# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Declaration store.

Holds the vertex and triangle records declared by a script in numpy
structured arrays that are sized exactly once, from the first-pass counts.
Records can only be appended, never written by index, and the arrays become
read-only when the store is sealed.
"""

from __future__ import annotations

import numpy as np

# x and y are projected image coordinates and may take any value; z is a
# non-negative depth; color is packed 0xRRGGBB
VERTEX_DTYPE = np.dtype([
    ("x", np.int32),
    ("y", np.int32),
    ("z", np.int32),
    ("color", np.uint32),
])

# i, j and k index the vertex array
TRIANGLE_DTYPE = np.dtype([
    ("i", np.int32),
    ("j", np.int32),
    ("k", np.int32),
    ("color", np.uint32),
])


class DeclarationStore(object):
    """
    Exactly-sized, append-only vertex and triangle storage.

    Args:
        vertex_count: Number of vertices that will be declared
        triangle_count: Number of triangles that will be declared
    """

    def __init__(self, vertex_count: int, triangle_count: int) -> None:
        assert vertex_count >= 0 and triangle_count >= 0
        self._vertices = np.zeros(vertex_count, dtype=VERTEX_DTYPE)
        self._triangles = np.zeros(triangle_count, dtype=TRIANGLE_DTYPE)
        self._vcur = 0
        self._tcur = 0
        self._sealed = False

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def triangle_count(self) -> int:
        return len(self._triangles)

    @property
    def vertices_written(self) -> int:
        return self._vcur

    @property
    def triangles_written(self) -> int:
        return self._tcur

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def vertices(self) -> np.ndarray:
        """Read-only view of the vertex records."""
        view = self._vertices.view()
        view.flags.writeable = False
        return view

    @property
    def triangles(self) -> np.ndarray:
        """Read-only view of the triangle records."""
        view = self._triangles.view()
        view.flags.writeable = False
        return view

    def declare_vertex(self, x: int, y: int, z: int, color: int) -> bool:
        """
        Append a vertex record.

        Returns:
            bool: False if every vertex slot is already written
        """
        assert not self._sealed, "declare_vertex() on sealed store"
        if self._vcur >= len(self._vertices):
            return False
        self._vertices[self._vcur] = (x, y, z, color)
        self._vcur += 1
        return True

    def declare_triangle(self, i: int, j: int, k: int, color: int) -> bool:
        """
        Append a triangle record.

        Vertex indices must already be checked against vertex_count; they
        may refer to vertices not yet declared.

        Returns:
            bool: False if every triangle slot is already written
        """
        assert not self._sealed, "declare_triangle() on sealed store"
        n = len(self._vertices)
        assert 0 <= i < n and 0 <= j < n and 0 <= k < n
        if self._tcur >= len(self._triangles):
            return False
        self._triangles[self._tcur] = (i, j, k, color)
        self._tcur += 1
        return True

    def complete(self) -> bool:
        """True when every vertex and triangle slot has been written."""
        return (self._vcur == len(self._vertices)
                and self._tcur == len(self._triangles))

    def seal(self) -> None:
        """Make the store read-only. Only valid once complete()."""
        assert self.complete(), "seal() on incomplete store"
        self._vertices.flags.writeable = False
        self._triangles.flags.writeable = False
        self._sealed = True

    def __repr__(self) -> str:
        return (f"DeclarationStore(vertices={self._vcur}/{len(self._vertices)}, "
                f"triangles={self._tcur}/{len(self._triangles)})")
