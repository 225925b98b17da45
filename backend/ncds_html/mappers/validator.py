"""Mapping validation, the gate between the rule engine and the generator."""

from __future__ import annotations

from typing import FrozenSet

from ncds_html.models import ComponentKind, ComponentMapping

SUPPORTED_COMPONENTS: FrozenSet[str] = frozenset(kind.value for kind in ComponentKind)


def validate_ncds_mapping(mapping: ComponentMapping) -> bool:
    """True if the mapping's component kind is a supported NCDS component."""
    return mapping.component in SUPPORTED_COMPONENTS
