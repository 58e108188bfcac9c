# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
dhrender execution logic.

Opens the script, runs the two-pass compiler, and writes the geometry
buffers. Every failure is reported as a single diagnostic line on stderr.
"""

import argparse
import logging
import sys

from .cli_args import report
from .core import error as dh_error
from .core import types as dh
from .core.compiler import compile_script
from .devices.npz.npz import write_geometry
from .utils.profiler import CompileProfiler, generate_default_output_path

logger = logging.getLogger(__name__)


def _print_summary(compiled) -> None:
    print(f"Width:  {compiled.config.width}")
    print(f"Height: {compiled.config.height}")
    print(f"Shade:  {compiled.config.shade}")
    print(f"Tcount: {compiled.counts.triangle_count}")
    print(f"Vcount: {compiled.counts.vertex_count}")


def run(args: argparse.Namespace) -> int:
    """
    Compile args.paths[1] and write the result to args.paths[0].

    Returns:
        Exit code: 0 for success, 1 for error
    """
    outputfile, scriptfile = args.paths

    profile_output = None
    if args.profile:
        profile_output = args.profile_output or generate_default_output_path()
    profiler = CompileProfiler(enabled=args.profile, output_path=profile_output)

    try:
        source = dh.ScriptSource.from_path(scriptfile)
    except OSError as e:
        logger.debug("Cannot open %s: %s", scriptfile, e)
        report("Failed to open script file")
        return 1

    with source:
        try:
            with profiler.profile_context():
                compiled = compile_script(source)
        except dh_error.ScriptError as e:
            report(str(e))
            return 1

    if args.summary:
        _print_summary(compiled)

    try:
        write_geometry(outputfile, compiled)
    except OSError as e:
        logger.debug("Cannot write %s: %s", outputfile, e)
        report("Failed to write output file")
        return 1

    if profiler.enabled:
        profiler.save_results()
        sys.stderr.write(profiler.generate_report())
        profiler.print_summary(sys.stderr)

    return 0
