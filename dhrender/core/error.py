# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

# error types
OK = 0
NO_SIGNATURE = 1
INVALID_HEADER_COMMAND = 2
HEADER_REPEATED = 3
HEADER_SYNTAX = 4
DIMENSION_RANGE = 5
SHADING_MODE = 6
NO_DIMENSIONS = 7
NO_SHADING_MODE = 8
STRAY_METACOMMAND = 9
TOO_MANY_VERTICES = 10
TOO_MANY_TRIANGLES = 11
UNSUPPORTED_ENTITY = 12
UNSUPPORTED_OPERATION = 13
STACK_UNDERFLOW = 14
STACK_OVERFLOW = 15
STACK_DATA_REMAINING = 16
OPERATION_SYNTAX = 17
NEGATIVE_Z = 18
INVALID_VERTEX_INDEX = 19
INVALID_INTEGER_LITERAL = 20
INVALID_RGB_LITERAL = 21
SYNC_MISMATCH = 22

# entity stream (tokenizer) error types, always negative
IO_ERROR = -1
UNEXPECTED_EOF = -2
BAD_CHARACTER = -3
LONG_TOKEN = -4
OPEN_STRING = -5
NESTED_METACOMMAND = -6
SEMICOLON = -7
UNPAIRED_CLOSE = -8
OPEN_GROUP = -9
METACOMMAND_ENTITY = -10
TRAILER = -11
OPEN_METACOMMAND = -12
EMPTY_NAME = -13
DEEP_NESTING = -14

# Messages start with an uppercase letter and carry no punctuation; the
# caller decides how to terminate them.
_messages = {
    OK: "No error",
    NO_SIGNATURE: "Failed to read script signature",
    INVALID_HEADER_COMMAND: "Invalid header metacommand",
    HEADER_REPEATED: "Repetition of header metacommand",
    HEADER_SYNTAX: "Header metacommand syntax error",
    DIMENSION_RANGE: "Image output dimension out of range",
    SHADING_MODE: "Unrecognized shading mode",
    NO_DIMENSIONS: "You must declare output dimensions in header",
    NO_SHADING_MODE: "You must declare shading mode in header",
    STRAY_METACOMMAND: "Stray metacommand after metacommand header",
    TOO_MANY_VERTICES: "Too many declared vertices",
    TOO_MANY_TRIANGLES: "Too many declared triangles",
    UNSUPPORTED_ENTITY: "Unsupported entity type",
    UNSUPPORTED_OPERATION: "Unsupported operation",
    STACK_UNDERFLOW: "Interpreter stack underflow",
    STACK_OVERFLOW: "Interpreter stack overflow",
    STACK_DATA_REMAINING: "Data remaining on interpreter stack",
    OPERATION_SYNTAX: "Operation syntax error",
    NEGATIVE_Z: "Negative Z coordinate",
    INVALID_VERTEX_INDEX: "Invalid vertex index",
    INVALID_INTEGER_LITERAL: "Invalid integer literal",
    INVALID_RGB_LITERAL: "Invalid RGB color literal",
    SYNC_MISMATCH: "Pass synchronization mismatch",
}

_stream_messages = {
    IO_ERROR: "I/O error",
    UNEXPECTED_EOF: "Unexpected end of file",
    BAD_CHARACTER: "Illegal character",
    LONG_TOKEN: "Token is too long",
    OPEN_STRING: "Unterminated string literal",
    NESTED_METACOMMAND: "Nested metacommand",
    SEMICOLON: "Semicolon used outside of metacommand",
    UNPAIRED_CLOSE: "Closing bracket without opening bracket",
    OPEN_GROUP: "Unclosed group or array at end of file",
    METACOMMAND_ENTITY: "Illegal entity within metacommand",
    TRAILER: "Data present after end of file marker",
    OPEN_METACOMMAND: "Unclosed metacommand at end of file",
    EMPTY_NAME: "Missing name after declaration prefix",
    DEEP_NESTING: "Group or array nesting is too deep",
}


def errstr(code: int) -> str:
    """
    Convert an error code into a message.

    Negative codes are entity stream errors. Unrecognized codes map to
    "Unknown error".
    """
    if code < 0:
        return _stream_messages.get(code, "Unknown error")
    return _messages.get(code, "Unknown error")


class ScriptError(Exception):
    """
    A script failed to compile.

    Attributes:
        code: Error code (positive compiler error or negative stream error)
        line: Script line number, or 0 when the error is not tied to a line
    """

    def __init__(self, code: int, line: int = 0) -> None:
        self.code = code
        self.line = line if line > 0 else 0
        super().__init__(self.__str__())

    @property
    def message(self) -> str:
        return errstr(self.code)

    def __str__(self) -> str:
        if self.line > 0:
            return f"[Line {self.line}] {self.message}"
        return self.message

    def __repr__(self) -> str:
        return f"ScriptError({self.code}, line={self.line})"
