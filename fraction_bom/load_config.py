"""Conventions used by the fraction registry, with optional YAML overrides."""

import copy
from pathlib import Path
from typing import Any

import yaml

from fraction_bom.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "properties": {
        "scope": "fraction-scope",
        "tags": "fraction-tags",
        "internal": "fraction-internal",
        "stability": "fraction-stability",
        "bootstrap": "fraction-bootstrap",
        "bom": "bom-inclusion",
    },
    "paths": {
        "module_conf": "module.conf",
        "fraction_manifest": [
            "target",
            "classes",
            "META-INF",
            "fraction-manifest.yaml",
        ],
    },
    "conventions": {
        "fraction_suffix": "Fraction.java",
        "source_suffix": ".java",
        "detector_package": "detect",
    },
    "reserved": {
        # Root of the module tree; resolving it would be self-referential.
        "bootstrap": {"group": "org.wildfly.swarm", "artifact": "bootstrap"},
        # Base SPI module; never a fraction even though it ships Fraction.java.
        "spi": {"group": "org.wildfly.swarm", "artifact": "spi"},
    },
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
