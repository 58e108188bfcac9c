# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
dhrender Types File Module

ScriptSource is the byte source the tokenizer reads from. The compiler reads
the same source twice, so it must be rewindable (multipass).
"""

from __future__ import annotations

import io
from typing import BinaryIO


class ScriptSource(object):
    """
    Rewindable byte source with one byte of pushback.

    Wraps a binary file object. Files opened by from_path() are owned by the
    source and closed by close(); caller-supplied streams are not.
    """

    def __init__(self, stream: BinaryIO, name: str = "<stream>", owner: bool = False) -> None:
        self.stream = stream
        self.name = name
        self.owner = owner
        self._last = None
        self._pushed = False

    @classmethod
    def from_path(cls, path: str) -> ScriptSource:
        """Open a script file for reading. OSError propagates to the caller."""
        return cls(open(path, "rb"), name=path, owner=True)

    @classmethod
    def from_bytes(cls, data: bytes, name: str = "<bytes>") -> ScriptSource:
        return cls(io.BytesIO(data), name=name, owner=True)

    @classmethod
    def from_text(cls, text: str, name: str = "<string>") -> ScriptSource:
        return cls.from_bytes(text.encode("utf-8"), name=name)

    @property
    def is_multipass(self) -> bool:
        try:
            return self.stream.seekable()
        except ValueError:
            # closed stream
            return False

    def read(self) -> int | None:
        """Return the next byte as an int, or None at end of input."""
        if self._pushed:
            self._pushed = False
            return self._last
        b = self.stream.read(1)
        if not b:
            self._last = None
            return None
        self._last = b[0]
        return self._last

    def unread(self) -> None:
        """Push back the byte most recently returned by read()."""
        assert not self._pushed, "only one byte of pushback"
        self._pushed = True

    def rewind(self) -> None:
        """Seek back to the start of the source."""
        self.stream.seek(0)
        self._last = None
        self._pushed = False

    def close(self) -> None:
        if self.owner:
            self.stream.close()

    def __enter__(self) -> ScriptSource:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __str__(self) -> str:
        return f"ScriptSource({self.name})"
