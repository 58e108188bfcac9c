# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
dhrender Types Package - Public API

Re-exports the compiler's constants and value types so the rest of the
package can use the single import pattern `from ..core import types as dh`.

**Internal Module Organization:**
- constants.py: limits, shading modes, entity kinds
- primitive.py: operand stack values (Int, RgbColor)
- context.py: ScriptConfig, ScriptCounts, Stack
- entity.py: tokenizer Entity
- file_types.py: rewindable ScriptSource
"""

from .constants import *
from .primitive import *
from .context import *
from .entity import *
from .file_types import *
