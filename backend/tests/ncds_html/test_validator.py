"""Tests for ncds_html.mappers.validator."""

import pytest

from ncds_html.generators.templates import TEMPLATE_REGISTRY
from ncds_html.mappers.validator import SUPPORTED_COMPONENTS, validate_ncds_mapping
from ncds_html.models import ComponentKind, ComponentMapping


class TestValidateNcdsMapping:

    @pytest.mark.parametrize("kind", list(ComponentKind))
    def test_every_kind_is_supported(self, kind):
        mapping = ComponentMapping(kind.value, {}, "div", "ncua-x")
        assert validate_ncds_mapping(mapping) is True

    @pytest.mark.parametrize("component", ["Carousel", "button", "", "Accordion"])
    def test_unknown_kinds_rejected(self, component):
        mapping = ComponentMapping(component, {}, "div", "ncua-x")
        assert validate_ncds_mapping(mapping) is False

    def test_supported_set_size(self):
        assert len(SUPPORTED_COMPONENTS) == 23

    def test_every_supported_kind_has_a_template(self):
        assert set(TEMPLATE_REGISTRY) == set(SUPPORTED_COMPONENTS)
