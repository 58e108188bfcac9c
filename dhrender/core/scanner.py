# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Counting scanner (first pass, part B).

Walks the script body without executing it, counting vertex ("v") and
triangle ("t") operations so that the declaration store can be allocated
with exact sizes before the second pass.
"""

import logging
from typing import Any, Dict

from . import error as dh_error
from . import types as dh
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


def count_body(tok: Tokenizer, ent: dh.Entity, params: Dict[str, Any]) -> dh.ScriptCounts:
    """
    Count vertex and triangle operations in the script body.

    Processing starts with ent, the first entity after the header, and runs
    through the end-of-file marker. The tokenizer is then checked for
    trailing data. On error the source position is undefined.

    Args:
        tok: Tokenizer positioned just after ent
        ent: First entity following the header
        params: Compile parameters (see init_compile_params)

    Returns:
        ScriptCounts: number of "v" and "t" operations

    Raises:
        ScriptError: STRAY_METACOMMAND, TOO_MANY_VERTICES,
            TOO_MANY_TRIANGLES or a stream error
    """
    max_vertices = params["MaxVertices"]
    max_triangles = params["MaxTriangles"]
    vcount = 0
    tcount = 0

    while ent.kind != dh.E_EOF:
        if ent.is_meta:
            raise dh_error.ScriptError(dh_error.STRAY_METACOMMAND, tok.line)

        if ent.kind == dh.E_OPERATION:
            if ent.key == "v":
                if vcount >= max_vertices:
                    raise dh_error.ScriptError(dh_error.TOO_MANY_VERTICES, tok.line)
                vcount += 1
            elif ent.key == "t":
                if tcount >= max_triangles:
                    raise dh_error.ScriptError(dh_error.TOO_MANY_TRIANGLES, tok.line)
                tcount += 1

        ent = tok.read()

    # nothing may follow the end-of-file marker
    tok.consume_trailer()

    logger.debug("Counted %d vertices, %d triangles", vcount, tcount)
    return dh.ScriptCounts(vcount, tcount)
