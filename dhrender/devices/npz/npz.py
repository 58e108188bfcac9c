# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
NPZ Output Device

Writes a compiled script's geometry buffers to a numpy .npz archive with
the arrays: width, height, shade, vertices, triangles.
"""

import logging

import numpy as np

from ...core.compiler import CompiledScript

logger = logging.getLogger(__name__)


def write_geometry(path: str, compiled: CompiledScript) -> None:
    """
    Save the compiled geometry.

    Args:
        path: Output file path. numpy appends ".npz" if it is missing.
        compiled: Compiled script

    Raises:
        OSError: if the file cannot be written
    """
    config = compiled.config
    np.savez(
        path,
        width=np.int32(config.width),
        height=np.int32(config.height),
        shade=np.int32(config.shade),
        vertices=compiled.store.vertices,
        triangles=compiled.store.triangles,
    )
    logger.debug("Wrote geometry to %s", path)


def read_geometry(path: str) -> dict:
    """Load an archive written by write_geometry() into a plain dict."""
    with np.load(path) as data:
        return {
            "width": int(data["width"]),
            "height": int(data["height"]),
            "shade": int(data["shade"]),
            "vertices": data["vertices"],
            "triangles": data["triangles"],
        }
