"""Read the fraction manifest persisted by an earlier build phase."""

import logging
from pathlib import Path

import yaml

from fraction_bom.dependency_metadata import DependencyMetadata
from fraction_bom.errors import DependencyFormatError, ManifestError

logger = logging.getLogger(__name__)

TRANSITIVE_DEPENDENCIES = "transitive-dependencies"


def load_fraction_manifest(path: Path) -> list[DependencyMetadata]:
    """Return the transitive dependencies listed in a fraction manifest.

    Entries that do not parse are logged and skipped. A document whose shape
    is wrong raises ManifestError; I/O and YAML errors propagate unchanged.
    """
    doc = yaml.safe_load(path.read_text(encoding="utf-8"))
    if doc is None:
        return []
    if not isinstance(doc, dict):
        msg = f"{path}: expected a mapping, got {type(doc).__name__}"
        raise ManifestError(msg)

    entries = doc.get(TRANSITIVE_DEPENDENCIES)
    if entries is None:
        return []
    if not isinstance(entries, list):
        msg = f"{path}: '{TRANSITIVE_DEPENDENCIES}' must be a list"
        raise ManifestError(msg)

    deps: list[DependencyMetadata] = []
    for entry in entries:
        try:
            deps.append(DependencyMetadata.from_string(str(entry)))
        except DependencyFormatError as e:
            logger.warning("Skipping manifest entry in %s: %s", path, e)
    return deps
