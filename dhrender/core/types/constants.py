# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
dhrender Types Constants Module

This module contains the constants, limits and type identifiers used
throughout the script compiler: geometry limits, shading modes, entity
kinds produced by the tokenizer and the renderer interface constants.
"""

# Script format signature (first metacommand of every script)
SIGNATURE = "dhrender"

# Geometry limits
MAX_VERTEX = 16384                          # Maximum vertices per script
MAX_TRIS = 16384                            # Maximum triangles per script
MAX_DIM = 16384                             # Maximum output image width/height

# Interpreter operand stack capacity
O_STACK_MAX = 32

# largest 32-bit signed integer
INT32_MAX = 2147483647

# shading modes
SHADE_FLAT = 1                              # One color per triangle
SHADE_INTER = 2                             # Per-vertex colors mixed across the face

SHADE_NAMES = {
    SHADE_FLAT: "flat",
    SHADE_INTER: "interpolated",
}

# Renderer per-triangle mode constants. "vertex" mode is interpolated
# shading and "triangle" mode is flat shading.
DHSCAN_MODE_VERTEX = 1
DHSCAN_MODE_TRIANGLE = 2

# Number of mixing registers a renderer client provides
DHSCAN_REGCOUNT = 8

# Entity kinds. E_EOF is zero so that "kind > 0" means a real entity.
E_EOF = 0
E_STRING = 1
E_BEGIN_META = 2
E_END_META = 3
E_META_TOKEN = 4
E_META_STRING = 5
E_NUMERIC = 6
E_VARIABLE = 7
E_CONSTANT = 8
E_ASSIGN = 9
E_GET = 10
E_BEGIN_GROUP = 11
E_END_GROUP = 12
E_BEGIN_ARRAY = 13
E_END_ARRAY = 14
E_OPERATION = 15

# Entities that are only legal inside the metacommand header
META_TYPES = frozenset({E_BEGIN_META, E_END_META, E_META_TOKEN, E_META_STRING})

# string entity quoting styles
STR_QUOTED = 1                              # "..."
STR_CURLY = 2                               # {...}

# Longest token the tokenizer accepts, in bytes
MAX_TOKEN_LENGTH = 1023

# Deepest group/array nesting the tokenizer accepts
MAX_NESTING = 1024
