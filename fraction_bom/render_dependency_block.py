"""Render a dependency as a BOM <dependency> block."""

from fraction_bom.dependency_metadata import DependencyMetadata

DEP_TEMPLATE = (
    "      <dependency>\n"
    "        <groupId>{group_id}</groupId>\n"
    "        <artifactId>{artifact_id}</artifactId>\n"
    "        <version>{version}</version>{scope}\n"
    "      </dependency>"
)


def render_dependency_block(dependency: DependencyMetadata) -> str:
    """Render one dependency; the scope element is omitted for compile scope."""
    scope = (
        ""
        if dependency.has_default_scope()
        else f"\n        <scope>{dependency.scope_value}</scope>"
    )
    return DEP_TEMPLATE.format(
        group_id=dependency.group_id,
        artifact_id=dependency.artifact_id,
        version=dependency.version,
        scope=scope,
    )
