# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Compile parameter initialization.

The compiler's limits live in a single parameters dictionary so that callers
(and tests) can inspect or tighten them without touching module constants.
"""

from typing import Any, Dict, Optional

from . import types as dh


def init_compile_params(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Initialize compile parameters for the script compiler.

    Args:
        overrides: Optional entries replacing the defaults

    Returns:
        Dict[str, Any]: Parameters dictionary containing:
            - Signature: Script signature metacommand token
            - MaxDim: Largest accepted image width/height
            - MaxVertices: Most vertices a script may declare
            - MaxTriangles: Most triangles a script may declare
            - MaxOpStack: Interpreter operand stack capacity

    Raises:
        KeyError: If an override names an unknown parameter
    """
    params = {
        "Signature": dh.SIGNATURE,
        "MaxDim": dh.MAX_DIM,
        "MaxVertices": dh.MAX_VERTEX,
        "MaxTriangles": dh.MAX_TRIS,
        "MaxOpStack": dh.O_STACK_MAX,
    }
    if overrides:
        for key, val in overrides.items():
            if key not in params:
                raise KeyError(f"Unknown compile parameter: {key}")
            params[key] = val
    return params
