"""Design node → NCDS component mapping (rule engine, inference, validation)."""

from .ncds_component_mapper import (
    NCDS_COMPONENT_RULES,
    ComponentRule,
    build_component_rules,
    classify_node,
)
from .validator import SUPPORTED_COMPONENTS, validate_ncds_mapping

__all__ = [
    "NCDS_COMPONENT_RULES",
    "SUPPORTED_COMPONENTS",
    "ComponentRule",
    "build_component_rules",
    "classify_node",
    "validate_ncds_mapping",
]
