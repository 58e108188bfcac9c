# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Metacommand header parser (first pass, part A).

A script opens with the signature metacommand followed by the header
metacommands, each allowed at most once and in any order:

    %dhrender;
    %dim <width> <height>;
    %shade vertex|triangle;

"shade vertex" selects interpolated shading and "shade triangle" selects
flat shading.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from . import error as dh_error
from . import types as dh
from .literal import parse_int
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)

shade_modes = {
    "vertex": dh.SHADE_INTER,
    "triangle": dh.SHADE_FLAT,
}


def _is_signature(ent: dh.Entity, signature: str) -> bool:
    return ent.kind == dh.E_META_TOKEN and ent.key == signature


def _read_signature(tok: Tokenizer, signature: str) -> None:
    # stream errors here also mean a missing signature; no line is reported
    try:
        ok = (
            tok.read().kind == dh.E_BEGIN_META
            and _is_signature(tok.read(), signature)
            and tok.read().kind == dh.E_END_META
        )
    except dh_error.ScriptError as e:
        logger.debug("Stream error in signature: %r", e)
        ok = False
    if not ok:
        raise dh_error.ScriptError(dh_error.NO_SIGNATURE)


def _read_dim(tok: Tokenizer, max_dim: int) -> tuple[int, int]:
    values = []
    for _ in range(2):
        ent = tok.read()
        if ent.kind != dh.E_META_TOKEN:
            raise dh_error.ScriptError(dh_error.HEADER_SYNTAX, tok.line)
        try:
            iv = parse_int(ent.key)
        except ValueError:
            raise dh_error.ScriptError(dh_error.HEADER_SYNTAX, tok.line)
        if iv < 1 or iv > max_dim:
            raise dh_error.ScriptError(dh_error.DIMENSION_RANGE, tok.line)
        values.append(iv)
    return values[0], values[1]


def _read_shade(tok: Tokenizer) -> int:
    ent = tok.read()
    if ent.kind != dh.E_META_TOKEN:
        raise dh_error.ScriptError(dh_error.HEADER_SYNTAX, tok.line)
    shade = shade_modes.get(ent.key)
    if shade is None:
        raise dh_error.ScriptError(dh_error.SHADING_MODE, tok.line)
    return shade


def parse_header(tok: Tokenizer, params: Dict[str, Any]) -> tuple[dh.ScriptConfig, dh.Entity]:
    """
    Parse the signature and header metacommands.

    Args:
        tok: Tokenizer positioned at the start of the script
        params: Compile parameters (see init_compile_params)

    Returns:
        (ScriptConfig, Entity): the header values and the first entity
        after the header, which the caller must process next

    Raises:
        ScriptError: on any signature, header or stream error
    """
    _read_signature(tok, params["Signature"])

    width = 0
    height = 0
    shade = 0

    ent = tok.read()
    while ent.kind == dh.E_BEGIN_META:
        cmd = tok.read()
        if cmd.kind != dh.E_META_TOKEN:
            raise dh_error.ScriptError(dh_error.INVALID_HEADER_COMMAND, tok.line)

        if cmd.key == "dim":
            if width > 0 or height > 0:
                raise dh_error.ScriptError(dh_error.HEADER_REPEATED, tok.line)
            width, height = _read_dim(tok, params["MaxDim"])

        elif cmd.key == "shade":
            if shade != 0:
                raise dh_error.ScriptError(dh_error.HEADER_REPEATED, tok.line)
            shade = _read_shade(tok)

        else:
            raise dh_error.ScriptError(dh_error.INVALID_HEADER_COMMAND, tok.line)

        # metacommand should now end
        if tok.read().kind != dh.E_END_META:
            raise dh_error.ScriptError(dh_error.INVALID_HEADER_COMMAND, tok.line)

        ent = tok.read()

    if width < 1 or height < 1:
        raise dh_error.ScriptError(dh_error.NO_DIMENSIONS)
    if shade == 0:
        raise dh_error.ScriptError(dh_error.NO_SHADING_MODE)

    config = dh.ScriptConfig(width, height, shade)
    logger.debug("Header: %s", config)
    return config, ent
