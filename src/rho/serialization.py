"""
Serialization helpers for resolved documents.

Used for debug output: the merged configuration is easier to review as
YAML than as a single line of JSON. Key order is kept as merged.
"""
from __future__ import annotations

from typing import Any, Dict

import yaml

from rho.model import ResolvedConfiguration


def document_to_yaml(d: Dict[str, Any] | None) -> str:
    return yaml.safe_dump(d, sort_keys=False, allow_unicode=True)


def configuration_to_dict(c: ResolvedConfiguration) -> Dict[str, Any]:
    return {
        "diagram": c.diagram,
        "style": c.style,
        "mjConfig": c.mj_config,
        "mjTypeset": c.mj_typeset,
    }


def configuration_to_yaml(c: ResolvedConfiguration) -> str:
    return document_to_yaml(configuration_to_dict(c))


__all__ = ["document_to_yaml", "configuration_to_dict", "configuration_to_yaml"]
