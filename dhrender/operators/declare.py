# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from ..core import error as dh_error
from ..core import types as dh
from . import operand_stack as dh_stack

# operand signatures, bottom of stack first
WITH_COLOR = (dh.Int, dh.Int, dh.Int, dh.RgbColor)
WITHOUT_COLOR = (dh.Int, dh.Int, dh.Int)


def v(interp, ostack):
    """
    x y z color **v** -         (interpolated shading)
    x y z **v** -               (flat shading)


    declares the next vertex. x and y are projected image coordinates and may
    have any value; z must be zero or greater. Under flat shading the vertex
    color is not used and is recorded as 0.

    **Errors**:     **stackunderflow**, **operationsyntax**, **negativez**,
                    **syncmismatch**
    **See Also**:   **t**
    """

    if interp.config.shade == dh.SHADE_INTER:
        signature = WITH_COLOR
    else:
        signature = WITHOUT_COLOR

    # 1. STACKUNDERFLOW / OPERATIONSYNTAX
    vals = dh_stack.operands(interp, ostack, signature)
    x, y, z = vals[0], vals[1], vals[2]
    color = vals[3] if len(vals) > 3 else 0

    # 2. NEGATIVEZ
    if z < 0:
        raise dh_error.ScriptError(dh_error.NEGATIVE_Z, interp.line)

    dh_stack.discard(ostack, len(signature))

    # 3. SYNCMISMATCH - more vertices than the first pass counted
    if not interp.store.declare_vertex(x, y, z, color):
        raise dh_error.ScriptError(dh_error.SYNC_MISMATCH, interp.line)


def t(interp, ostack):
    """
    i j k color **t** -         (flat shading)
    i j k **t** -               (interpolated shading)


    declares the next triangle from three vertex indices. Each index must be
    zero or greater and less than the total number of vertices in the script;
    the vertex does not need to be declared yet. Under interpolated shading
    the triangle color is not used and is recorded as 0.

    **Errors**:     **stackunderflow**, **operationsyntax**,
                    **invalidvertexindex**, **syncmismatch**
    **See Also**:   **v**
    """

    if interp.config.shade == dh.SHADE_FLAT:
        signature = WITH_COLOR
    else:
        signature = WITHOUT_COLOR

    # 1. STACKUNDERFLOW / OPERATIONSYNTAX
    vals = dh_stack.operands(interp, ostack, signature)
    color = vals[3] if len(vals) > 3 else 0

    # 2. INVALIDVERTEXINDEX - checked against the first-pass total
    vcount = interp.counts.vertex_count
    for index in vals[:3]:
        if index < 0 or index >= vcount:
            raise dh_error.ScriptError(dh_error.INVALID_VERTEX_INDEX, interp.line)

    dh_stack.discard(ostack, len(signature))

    # 3. SYNCMISMATCH - more triangles than the first pass counted
    if not interp.store.declare_triangle(vals[0], vals[1], vals[2], color):
        raise dh_error.ScriptError(dh_error.SYNC_MISMATCH, interp.line)


# operation name -> operator
operators = {
    "v": v,
    "t": t,
}
