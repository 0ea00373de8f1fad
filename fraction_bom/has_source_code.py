"""Check whether a build unit ships any implementation source."""

import os
from pathlib import Path

from fraction_bom.walk_result import WalkResult


def has_source_code(
    source_directory: Path | None, source_suffix: str, detector_package: str
) -> WalkResult[bool]:
    """Return True once a source file outside the detector package is seen."""
    result = WalkResult(False)
    if source_directory is None or not source_directory.is_dir():
        return result

    for _dirpath, dirnames, filenames in os.walk(
        source_directory, onerror=result.errors.append
    ):
        # Detector sources are auxiliary and do not count.
        dirnames[:] = [d for d in dirnames if d != detector_package]
        if any(f.endswith(source_suffix) for f in filenames):
            result.value = True
            return result
    return result
