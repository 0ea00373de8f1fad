"""Locate the file that marks a build unit as a fraction."""

import os
from pathlib import Path

from fraction_bom.walk_result import WalkResult


def find_fraction_entry_point(
    source_directory: Path | None, suffix: str
) -> WalkResult[Path | None]:
    """Return the first file under ``source_directory`` whose name ends with ``suffix``.

    The path is relative to ``source_directory``. The walk stops at the first
    match and follows ``os.walk`` order, which depends on the filesystem; when
    several files match, which one is returned is not specified.
    """
    result: WalkResult[Path | None] = WalkResult(None)
    if source_directory is None or not source_directory.is_dir():
        return result

    for dirpath, _dirnames, filenames in os.walk(
        source_directory, onerror=result.errors.append
    ):
        for filename in filenames:
            if filename.endswith(suffix):
                result.value = Path(dirpath, filename).relative_to(source_directory)
                return result
    return result
