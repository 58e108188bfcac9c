# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for dhrender.
"""

from __future__ import annotations

import argparse
import sys

from . import __version__

# Program name used as the prefix of every diagnostic line
PROG = "dhrender"


def report(message: str) -> None:
    """Write a diagnostic line: '<prog>: <message>!'"""
    sys.stderr.write(f"{PROG}: {message}!\n")


class DiagnosticArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors as one diagnostic line and exits 1."""

    def error(self, message: str) -> None:
        report(message)
        self.exit(1)


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the dhrender argument parser.

    The two positional paths are collected into one list so that a wrong
    count can be reported in the program's own diagnostic format.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = DiagnosticArgumentParser(
        prog=PROG,
        description="dhrender - Delilah Scanline Renderer script compiler",
        usage="%(prog)s [options] outputfile scriptfile",
    )

    parser.add_argument(
        "-V", "--version", action="version",
        version=f"dhrender {__version__}"
    )
    parser.add_argument(
        "paths", nargs="*", metavar="path",
        help="Output geometry file (.npz) followed by the script file to compile"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--summary", action="store_true",
        help="Print image size, shading mode and declaration counts"
    )
    parser.add_argument(
        "--profile", action="store_true",
        help="Enable cProfile profiling of the compile"
    )
    parser.add_argument(
        "--profile-output",
        help="Specify output file for profiling results (default: auto-generated)"
    )

    return parser
