# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Stack machine interpreter (second pass).

Replays the script body against a declaration store that was allocated
with the first-pass counts. Integer and color literals are pushed onto a
small bounded operand stack; the "v" and "t" operations pop fixed operand
groups and append records to the store.

Architecture:
    - o_stack: bounded operand stack of Int / RgbColor values
    - operators: operation name -> operator function, called as
      operator(interp, o_stack)
    - store: the only object the interpreter writes to
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from . import error as dh_error
from . import types as dh
from .context_init import init_compile_params
from .literal import parse_int, parse_rgb
from .store import DeclarationStore
from .tokenizer import Tokenizer
from ..operators import declare as dh_declare
from ..operators import operand_stack as dh_stack

logger = logging.getLogger(__name__)


class Interpreter(object):
    """
    Second-pass interpreter for one script.

    Args:
        config: Header values from the first pass
        counts: Operation counts from the first pass
        store: Store allocated with exactly counts
        params: Compile parameters (defaults from init_compile_params)
    """

    def __init__(
        self,
        config: dh.ScriptConfig,
        counts: dh.ScriptCounts,
        store: DeclarationStore,
        params: Optional[Dict[str, Any]] = None,
    ) -> None:
        assert store.vertex_count == counts.vertex_count
        assert store.triangle_count == counts.triangle_count
        if params is None:
            params = init_compile_params()

        self.config = config
        self.counts = counts
        self.store = store
        self.o_stack = dh.Stack(params["MaxOpStack"])
        self.operators = dict(dh_declare.operators)
        self.line = 0

    def execute(self, ent: dh.Entity) -> None:
        """
        Execute one body entity.

        Raises:
            ScriptError: on any interpreter error
        """
        self.line = ent.line

        if ent.kind == dh.E_NUMERIC:
            try:
                iv = parse_int(ent.key)
            except ValueError:
                raise dh_error.ScriptError(dh_error.INVALID_INTEGER_LITERAL, self.line)
            dh_stack.push(self, self.o_stack, dh.Int(iv))

        elif ent.kind == dh.E_STRING:
            # only bare curly strings are color literals
            if ent.str_type != dh.STR_CURLY or ent.key:
                raise dh_error.ScriptError(dh_error.UNSUPPORTED_ENTITY, self.line)
            try:
                rgb = parse_rgb(ent.value)
            except ValueError:
                raise dh_error.ScriptError(dh_error.INVALID_RGB_LITERAL, self.line)
            dh_stack.push(self, self.o_stack, dh.RgbColor(rgb))

        elif ent.kind == dh.E_OPERATION:
            op = self.operators.get(ent.key)
            if op is None:
                raise dh_error.ScriptError(dh_error.UNSUPPORTED_OPERATION, self.line)
            op(self, self.o_stack)

        elif ent.is_meta:
            # header was validated by the first pass
            pass

        else:
            raise dh_error.ScriptError(dh_error.UNSUPPORTED_ENTITY, self.line)

    def run(self, tok: Tokenizer) -> None:
        """
        Execute every entity from the start of the script to the end-of-file
        marker, then check that the store is full and the stack is empty.

        Raises:
            ScriptError: on any interpreter, consistency or stream error
        """
        ent = tok.read()
        while ent.kind != dh.E_EOF:
            self.execute(ent)
            ent = tok.read()
        self.check_complete()

    def check_complete(self) -> None:
        """
        Consistency check after the last entity.

        Raises:
            ScriptError: SYNC_MISMATCH if fewer records were declared than the
                first pass counted, STACK_DATA_REMAINING if literals were
                left unconsumed
        """
        if not self.store.complete():
            logger.debug("Second pass wrote %r", self.store)
            raise dh_error.ScriptError(dh_error.SYNC_MISMATCH)
        if len(self.o_stack) > 0:
            logger.debug("Values left on stack: %s", self.o_stack)
            raise dh_error.ScriptError(dh_error.STACK_DATA_REMAINING)
