# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
dhrender Types Entity Module

An Entity is one parsed unit read from a script by the tokenizer.
"""

from __future__ import annotations

from .constants import (
    E_EOF, E_STRING, E_BEGIN_META, E_END_META, E_META_TOKEN, E_META_STRING,
    E_NUMERIC, E_VARIABLE, E_CONSTANT, E_ASSIGN, E_GET, E_BEGIN_GROUP,
    E_END_GROUP, E_BEGIN_ARRAY, E_END_ARRAY, E_OPERATION, META_TYPES,
)

ENTITY_NAMES = {
    E_EOF: "eof",
    E_STRING: "string",
    E_BEGIN_META: "begin-meta",
    E_END_META: "end-meta",
    E_META_TOKEN: "meta-token",
    E_META_STRING: "meta-string",
    E_NUMERIC: "numeric",
    E_VARIABLE: "variable",
    E_CONSTANT: "constant",
    E_ASSIGN: "assign",
    E_GET: "get",
    E_BEGIN_GROUP: "begin-group",
    E_END_GROUP: "end-group",
    E_BEGIN_ARRAY: "begin-array",
    E_END_ARRAY: "end-array",
    E_OPERATION: "operation",
}


class Entity(object):
    """
    A single tokenizer entity.

    Attributes:
        kind: One of the E_* constants
        key: Token text, string prefix, or declared name ("" when unused)
        value: String payload for string entities, else None
        str_type: STR_QUOTED or STR_CURLY for string entities, else 0
        line: Line number the entity was read on (1-based)
    """
    __slots__ = ("kind", "key", "value", "str_type", "line")

    def __init__(self, kind: int, key: str = "", value: str | None = None,
                 str_type: int = 0, line: int = 0) -> None:
        self.kind = kind
        self.key = key
        self.value = value
        self.str_type = str_type
        self.line = line

    @property
    def is_meta(self) -> bool:
        return self.kind in META_TYPES

    def __str__(self) -> str:
        name = ENTITY_NAMES.get(self.kind, str(self.kind))
        if self.value is not None:
            return f"{name} {self.key}<{self.value}>"
        if self.key:
            return f"{name} {self.key}"
        return name

    def __repr__(self) -> str:
        return f"Entity({self.__str__()!r}, line={self.line})"
