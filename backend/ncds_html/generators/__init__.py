"""NCDS HTML generation: recursive renderer, widget templates, stylesheet."""

from .ncds_html_generator import (
    NcdsHtmlGenerationOptions,
    NcdsHtmlGenerator,
    RenderContext,
    to_php_naming,
)
from .templates import TEMPLATE_REGISTRY, TemplateContext

__all__ = [
    "NcdsHtmlGenerationOptions",
    "NcdsHtmlGenerator",
    "RenderContext",
    "TEMPLATE_REGISTRY",
    "TemplateContext",
    "to_php_naming",
]
