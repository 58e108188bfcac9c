# dhrender - Delilah Scanline Renderer Script Compiler
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
dhrender Profiling Hook

Optional cProfile wrapper around a compile run, enabled from the command
line with --profile.

Usage:
    # Command line
    dhrender --profile out.npz scene.dhr
    dhrender --profile --profile-output=compile.prof out.npz scene.dhr

    # In code
    profiler = CompileProfiler(enabled=True, output_path="compile.prof")
    with profiler.profile_context():
        compile_file("scene.dhr")
    profiler.save_results()
"""

from __future__ import annotations

import cProfile
import io
import pstats
import time
from collections.abc import Generator
from contextlib import contextmanager
from typing import TextIO


class CompileProfiler:
    """cProfile session covering one or more compile runs"""

    def __init__(self, enabled: bool = False, output_path: str | None = None) -> None:
        self.enabled = enabled
        self.output_path = output_path
        self.profiler = cProfile.Profile() if enabled else None
        self.stats: pstats.Stats | None = None

    @contextmanager
    def profile_context(self) -> Generator[CompileProfiler, None, None]:
        """Context manager for profiling a code block"""
        if not self.enabled:
            yield self
            return
        self.profiler.enable()
        try:
            yield self
        finally:
            self.profiler.disable()
            self.stats = pstats.Stats(self.profiler)

    def generate_report(self, limit: int = 20) -> str:
        """Top functions by cumulative time"""
        if not self.stats:
            return "No profiling data available"
        s = io.StringIO()
        self.stats.stream = s
        self.stats.sort_stats("cumulative").print_stats(limit)
        return s.getvalue()

    def save_results(self) -> None:
        """Dump binary stats to output_path, if one was given"""
        if self.stats and self.output_path:
            self.stats.dump_stats(self.output_path)

    def print_summary(self, stream: TextIO) -> None:
        """Write a short summary to stream"""
        if not self.stats:
            stream.write("No profiling statistics available\n")
            return
        stream.write(f"Total function calls: {self.stats.total_calls:,}\n")
        stream.write(f"Total execution time: {self.stats.total_tt:.3f} seconds\n")
        if self.output_path:
            stream.write(f"Profiling results saved to: {self.output_path}\n")


def generate_default_output_path() -> str:
    """Generate default output path for profiling results"""
    timestamp = time.strftime("%Y%m%d_%H%M%S")
    return f"dhrender_profile_{timestamp}.prof"
