"""Collect auxiliary detector files from a build unit's sources."""

import os
from pathlib import Path

from fraction_bom.walk_result import WalkResult


def find_detector_files(
    source_directory: Path | None, detector_package: str
) -> WalkResult[list[tuple[Path, Path]]]:
    """Return (relative, absolute) pairs for every file in the detector package.

    Only the first directory named ``detector_package`` is collected; the walk
    ends as soon as that subtree has been read.
    """
    result: WalkResult[list[tuple[Path, Path]]] = WalkResult([])
    if source_directory is None or not source_directory.is_dir():
        return result

    for dirpath, dirnames, _filenames in os.walk(
        source_directory, onerror=result.errors.append
    ):
        if detector_package not in dirnames:
            continue
        detect_root = Path(dirpath, detector_package)
        for sub_dirpath, _sub_dirnames, sub_filenames in os.walk(
            detect_root, onerror=result.errors.append
        ):
            for filename in sub_filenames:
                path = Path(sub_dirpath, filename)
                result.value.append(
                    (path.relative_to(source_directory), path.absolute())
                )
        break
    return result
