#!/usr/bin/env python3
# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
dhrender - Delilah Scanline Renderer script compiler

Main entry point. Compiles a scene script into vertex and triangle buffers
and writes them to a numpy .npz archive.

Usage:
    dhrender out.npz scene.dhr
    dhrender -v --summary out.npz scene.dhr

Exit code is 0 on success and 1 on any failure, with a one-line diagnostic
on stderr:
    dhrender: [Line 12] Negative Z coordinate!
"""

from __future__ import annotations

import logging
import sys

from .cli_args import build_argument_parser, report
from .cli_runner import run


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for dhrender.

    Returns:
        Exit code: 0 for success, 1 for error
    """
    parser = build_argument_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # usage errors exit 1, --version and --help exit 0
        return e.code if isinstance(e.code, int) else 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    # exactly two paths: output, then script
    if len(args.paths) != 2:
        report("Wrong number of parameters")
        return 1

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
