"""Human-readable scan report."""
import datetime
import sys
from pathlib import Path
from typing import TextIO

from ..scanner import ScanResult


def format_elapsed(elapsed: datetime.timedelta) -> str:
    """Format a duration as seconds with millisecond precision, e.g. '1.042 s'."""
    total_ms = elapsed // datetime.timedelta(milliseconds=1)
    return f"{total_ms // 1000}.{total_ms % 1000:03} s"


def render_report(result: ScanResult, output: TextIO | None = None):
    """Write the report for result to output (stdout by default).

    The report lists each duplicate group with its first member marked as
    the original, then the empty files, then the elapsed time. A scan that
    found no non-empty files prints only a notice and the empty files.
    """
    if output is None:
        output = sys.stdout

    if result.file_count == 0:
        print("No files to process.", file=output)
        if result.empty_files:
            print("\nEmpty files:", file=output)
            _print_paths(result.empty_files, output)
        return

    groups = result.duplicate_groups
    total_files = sum(len(group.paths) for group in groups)

    print("Report:", file=output)
    print(f"{len(groups)} duplicate group(s), {total_files} duplicate file(s) total", file=output)

    for i, group in enumerate(groups, start=1):
        print(f"\nGroup {i} ({len(group.paths)} files):", file=output)
        print(f"  original:  {group.original}", file=output)
        for path in group.duplicates:
            print(f"  duplicate: {path}", file=output)

    if result.empty_files:
        print("\nEmpty files:", file=output)
        _print_paths(result.empty_files, output)
    else:
        print("\nNo empty files found.", file=output)

    print(f"\nElapsed: {format_elapsed(result.elapsed)}", file=output)


def _print_paths(paths: list[Path], output: TextIO):
    for path in paths:
        print(f"  {path}", file=output)
