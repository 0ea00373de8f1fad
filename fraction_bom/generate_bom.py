"""Generate a bill-of-materials document from a template."""

from collections.abc import Iterable
from typing import Any

from fraction_bom.dependency_metadata import DependencyMetadata
from fraction_bom.render_dependency_block import render_dependency_block


def generate_bom(
    root: Any, template: str, dependencies: Iterable[DependencyMetadata]
) -> str:
    """Substitute the BOM placeholders in ``template``.

    ``root`` is anything with ``artifact_id``, ``name`` and ``description``
    (a BuildUnit or FractionMetadata). Nothing is escaped, so the template and
    metadata must already be valid for the target document.
    """
    blocks = "\n".join(render_dependency_block(d) for d in dependencies)
    return (
        template.replace("#{dependencies}", blocks)
        .replace("#{bom-artifactId}", root.artifact_id)
        .replace("#{bom-name}", root.name or "")
        .replace("#{bom-description}", root.description or "")
    )
