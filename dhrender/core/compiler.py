# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Two-pass script compiler.

The first pass parses the metacommand header and counts the vertex and
triangle operations in the body. The declaration store is then allocated
with exactly those counts, the source is rewound, and the second pass
replays the body through the interpreter to fill the store.

Usage:
    compiled = compile_file("scene.dhr")
    compiled.store.vertices["x"]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from . import error as dh_error
from . import types as dh
from .context_init import init_compile_params
from .header import parse_header
from .interpreter import Interpreter
from .scanner import count_body
from .store import DeclarationStore
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledScript:
    """A successfully compiled script, ready for a renderer."""
    config: dh.ScriptConfig
    counts: dh.ScriptCounts
    store: DeclarationStore


def _rewind(source: dh.ScriptSource) -> None:
    try:
        source.rewind()
    except OSError:
        raise dh_error.ScriptError(dh_error.IO_ERROR)


def first_pass(
    source: dh.ScriptSource,
    params: Optional[Dict[str, Any]] = None,
) -> tuple[dh.ScriptConfig, dh.ScriptCounts]:
    """
    Run the first pass over a script.

    The source is rewound first. On success it is left at the end of the
    stream; on error its position is undefined.

    Args:
        source: Multipass script source
        params: Compile parameters (defaults from init_compile_params)

    Returns:
        (ScriptConfig, ScriptCounts)

    Raises:
        ScriptError: on any header, body or stream error
    """
    assert source.is_multipass, "first_pass() needs a rewindable source"
    if params is None:
        params = init_compile_params()

    _rewind(source)
    tok = Tokenizer(source)
    config, ent = parse_header(tok, params)
    counts = count_body(tok, ent, params)
    return config, counts


def second_pass(
    source: dh.ScriptSource,
    config: dh.ScriptConfig,
    counts: dh.ScriptCounts,
    store: DeclarationStore,
    params: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Run the second pass, filling store with the declared geometry.

    The source is rewound first. The store must have been allocated with
    exactly counts and is sealed read-only on success.

    Raises:
        ScriptError: on any interpreter, consistency or stream error
    """
    _rewind(source)
    interp = Interpreter(config, counts, store, params)
    interp.run(Tokenizer(source))
    store.seal()


def compile_script(
    source: dh.ScriptSource,
    params: Optional[Dict[str, Any]] = None,
) -> CompiledScript:
    """
    Compile a script from a multipass source.

    Raises:
        ScriptError: if the script is invalid
    """
    if params is None:
        params = init_compile_params()

    config, counts = first_pass(source, params)
    logger.debug("First pass: %s, %d vertices, %d triangles",
                 config, counts.vertex_count, counts.triangle_count)

    store = DeclarationStore(counts.vertex_count, counts.triangle_count)
    second_pass(source, config, counts, store, params)

    logger.info("Compiled %s: %s, %d vertices, %d triangles", source.name,
                config, counts.vertex_count, counts.triangle_count)
    return CompiledScript(config, counts, store)


def compile_text(text: str, params: Optional[Dict[str, Any]] = None) -> CompiledScript:
    """Compile a script held in a string."""
    with dh.ScriptSource.from_text(text) as source:
        return compile_script(source, params)


def compile_file(path: str, params: Optional[Dict[str, Any]] = None) -> CompiledScript:
    """
    Compile a script file.

    Raises:
        OSError: if the file cannot be opened
        ScriptError: if the script is invalid
    """
    with dh.ScriptSource.from_path(path) as source:
        return compile_script(source, params)
