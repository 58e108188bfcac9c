# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Entity stream for dhrender scripts.

The tokenizer reads bytes from a ScriptSource and produces Entity objects:
metacommand boundaries and their tokens/strings, numeric literals, string
literals, operations, declarations, group and array brackets, and finally
the end-of-file marker "|;". Errors are raised as ScriptError with a
negative (stream) error code.
"""

from __future__ import annotations

from . import error as dh_error
from . import types as dh

# White-space characters
TAB = 9
LINE_FEED = 10
RETURN = 13
SPACE = 32

# Delimiter characters
QUOTE = 34
POUND = 35
PERCENT = 37
L_PAREN = 40
R_PAREN = 41
COMMA = 44
SEMICOLON = 59
L_SQR_BRACKET = 91
BACKSLASH = 92
R_SQR_BRACKET = 93
L_CRLY_BRACKET = 123
VERTICAL_BAR = 124
R_CRLY_BRACKET = 125

# the delimiters set
delimiters = set(
    [
        QUOTE,
        POUND,
        PERCENT,
        L_PAREN,
        R_PAREN,
        COMMA,
        SEMICOLON,
        L_SQR_BRACKET,
        R_SQR_BRACKET,
        L_CRLY_BRACKET,
        R_CRLY_BRACKET,
    ]
)

# the white_space set
white_space = set([SPACE, TAB, LINE_FEED, RETURN])

# visible ASCII characters that may appear in a token
token_chars = set(c for c in range(0x21, 0x7F) if c not in delimiters)

# declaration prefixes and the entity kind each one introduces
name_prefixes = {
    "?": dh.E_VARIABLE,
    "@": dh.E_CONSTANT,
    "=": dh.E_ASSIGN,
    ":": dh.E_GET,
}

brackets = {
    L_PAREN: (dh.E_BEGIN_GROUP, None),
    L_SQR_BRACKET: (dh.E_BEGIN_ARRAY, None),
    R_PAREN: (dh.E_END_GROUP, L_PAREN),
    R_SQR_BRACKET: (dh.E_END_ARRAY, L_SQR_BRACKET),
}


class Tokenizer(object):
    """
    Reads entities from a script source.

    After the "|;" marker every further read() returns an E_EOF entity.
    Use consume_trailer() to verify nothing but white space follows the
    marker.

    Attributes:
        line: Line number of the most recently read entity (0 before the
            first read)
    """

    def __init__(self, source: dh.ScriptSource) -> None:
        self.source = source
        self.line = 0
        self._line_num = 1
        self._after_cr = False
        self._undo = (1, False)
        self._in_meta = False
        self._open = []
        self._done = False

    @property
    def done(self) -> bool:
        """True once the end-of-file marker has been read."""
        return self._done

    # ------------------------------------------------------------------
    # byte level
    # ------------------------------------------------------------------

    def _getc(self) -> int | None:
        # CR LF is one line break; a lone CR or LF is one line break each
        self._undo = (self._line_num, self._after_cr)
        try:
            c = self.source.read()
        except OSError:
            raise dh_error.ScriptError(dh_error.IO_ERROR, self._line_num)
        if c == LINE_FEED:
            if not self._after_cr:
                self._line_num += 1
        elif c == RETURN:
            self._line_num += 1
        self._after_cr = c == RETURN
        return c

    def _ungetc(self) -> None:
        self._line_num, self._after_cr = self._undo
        self.source.unread()

    def _fail(self, code: int) -> None:
        raise dh_error.ScriptError(code, self._line_num)

    def _skip_space(self) -> int | None:
        """Skip white space and comments; return the first other byte."""
        while True:
            c = self._getc()
            if c is None:
                return None
            if c == POUND:
                while c is not None and c != LINE_FEED and c != RETURN:
                    c = self._getc()
                continue
            if c not in white_space:
                return c

    # ------------------------------------------------------------------
    # entities
    # ------------------------------------------------------------------

    def read(self) -> dh.Entity:
        """
        Read the next entity.

        Returns:
            Entity: the next entity; kind E_EOF once "|;" has been read

        Raises:
            ScriptError: with a negative stream error code
        """
        if self._done:
            return dh.Entity(dh.E_EOF, line=self.line)

        c = self._skip_space()
        self.line = self._line_num

        if c is None:
            if self._in_meta:
                self._fail(dh_error.OPEN_METACOMMAND)
            # no line number: the marker is missing, not misplaced
            raise dh_error.ScriptError(dh_error.UNEXPECTED_EOF)

        if c == PERCENT:
            if self._in_meta:
                self._fail(dh_error.NESTED_METACOMMAND)
            self._in_meta = True
            return dh.Entity(dh.E_BEGIN_META, line=self.line)

        if c == SEMICOLON:
            if not self._in_meta:
                self._fail(dh_error.SEMICOLON)
            self._in_meta = False
            return dh.Entity(dh.E_END_META, line=self.line)

        if c in brackets:
            if self._in_meta:
                self._fail(dh_error.METACOMMAND_ENTITY)
            return self._bracket(c)

        if c == QUOTE or c == L_CRLY_BRACKET:
            return self._string("", c)

        if c not in token_chars:
            self._fail(dh_error.BAD_CHARACTER)

        token, term = self._token(c)

        if term == QUOTE or term == L_CRLY_BRACKET:
            return self._string(token, term)

        if not self._in_meta and token == "|" and term == SEMICOLON:
            if self._open:
                self._fail(dh_error.OPEN_GROUP)
            self._done = True
            return dh.Entity(dh.E_EOF, line=self.line)

        if term is not None:
            self._ungetc()

        if self._in_meta:
            return dh.Entity(dh.E_META_TOKEN, token, line=self.line)
        return self._classify(token)

    def _token(self, first: int) -> tuple[str, int | None]:
        """Read a token starting with first; return it and the byte after it."""
        buf = bytearray([first])
        while True:
            c = self._getc()
            if c is None or c not in token_chars:
                return buf.decode("ascii"), c
            if len(buf) >= dh.MAX_TOKEN_LENGTH:
                self._fail(dh_error.LONG_TOKEN)
            buf.append(c)

    def _classify(self, token: str) -> dh.Entity:
        first = token[0]
        if "0" <= first <= "9" or (
            first in "+-" and len(token) > 1 and "0" <= token[1] <= "9"
        ):
            return dh.Entity(dh.E_NUMERIC, token, line=self.line)

        kind = name_prefixes.get(first)
        if kind is not None:
            if len(token) < 2:
                self._fail(dh_error.EMPTY_NAME)
            return dh.Entity(kind, token[1:], line=self.line)

        return dh.Entity(dh.E_OPERATION, token, line=self.line)

    def _bracket(self, c: int) -> dh.Entity:
        kind, opener = brackets[c]
        if opener is None:
            if len(self._open) >= dh.MAX_NESTING:
                self._fail(dh_error.DEEP_NESTING)
            self._open.append(c)
        else:
            if not self._open or self._open[-1] != opener:
                self._fail(dh_error.UNPAIRED_CLOSE)
            self._open.pop()
        return dh.Entity(kind, line=self.line)

    def _string(self, prefix: str, opener: int) -> dh.Entity:
        """Read a string body; the opening quote or brace was already read."""
        buf = bytearray()
        depth = 1
        while True:
            c = self._getc()
            if c is None:
                self._fail(dh_error.OPEN_STRING)
            if c == BACKSLASH:
                # escaped byte is kept verbatim, including the backslash
                buf.append(c)
                c = self._getc()
                if c is None:
                    self._fail(dh_error.OPEN_STRING)
                buf.append(c)
                continue
            if opener == QUOTE:
                if c == QUOTE:
                    break
            elif c == L_CRLY_BRACKET:
                depth += 1
            elif c == R_CRLY_BRACKET:
                depth -= 1
                if depth == 0:
                    break
            buf.append(c)

        kind = dh.E_META_STRING if self._in_meta else dh.E_STRING
        str_type = dh.STR_QUOTED if opener == QUOTE else dh.STR_CURLY
        return dh.Entity(
            kind,
            prefix,
            buf.decode("utf-8", errors="surrogateescape"),
            str_type,
            line=self.line,
        )

    # ------------------------------------------------------------------
    # end of input
    # ------------------------------------------------------------------

    def consume_trailer(self) -> None:
        """
        Read the rest of the source after the "|;" marker.

        Only white space may follow the marker.

        Raises:
            ScriptError: TRAILER if anything else is present
        """
        assert self._done, "consume_trailer() before end of file marker"
        while True:
            c = self._getc()
            if c is None:
                return
            if c not in white_space:
                self._fail(dh_error.TRAILER)
