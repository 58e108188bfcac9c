# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
dhrender - compiles Delilah Scanline Renderer scripts into validated
vertex and triangle buffers.
"""

__version__ = "0.1.0"
