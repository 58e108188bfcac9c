# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from ..core import error as dh_error
from ..core import types as dh


def push(interp, ostack: dh.Stack, value: dh.StackValue) -> None:
    """
    - value **push** value


    pushes a literal value onto the operand stack.

    **Errors**:     **stackoverflow**
    """

    if ostack.is_full():
        raise dh_error.ScriptError(dh_error.STACK_OVERFLOW, interp.line)

    ostack.append(value)


def operands(interp, ostack: dh.Stack, signature: tuple[type, ...]) -> list[int]:
    """
    Check the top len(signature) operands against signature, bottom first,
    without removing them.

    Returns:
        list[int]: the operand values, bottom first

    **Errors**:     **stackunderflow**, **operationsyntax**
    """

    n = len(signature)

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < n:
        raise dh_error.ScriptError(dh_error.STACK_UNDERFLOW, interp.line)

    # 2. OPERATIONSYNTAX - Check operand types
    group = ostack[len(ostack) - n:]
    for value, expected in zip(group, signature):
        if not isinstance(value, expected):
            raise dh_error.ScriptError(dh_error.OPERATION_SYNTAX, interp.line)

    return [value.val for value in group]


def discard(ostack: dh.Stack, n: int) -> None:
    """Pop n values that were already checked by operands()."""
    assert len(ostack) >= n
    for _ in range(n):
        ostack.pop()
