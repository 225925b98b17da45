"""NCDS HTML generation API endpoints.

- POST /api/v2/ncds/generate        generate from a simplified design payload
- POST /api/v2/ncds/generate-figma  fetch a Figma URL, then generate
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ncds_html import config
from ncds_html.generators.ncds_html_generator import NcdsHtmlGenerator
from ncds_html.integrations.figma_client import FigmaClient, FigmaClientError, parse_figma_url
from ncds_html.models import GeneratedNcdsHtml, SimplifiedDesign
from ncds_html.tools.generate_ncds_html import GenerationOptionsParams, format_generation_output

logger = logging.getLogger("ncds_html.routes.ncds")

router = APIRouter(prefix="/api/v2/ncds", tags=["ncds"])


# --- Schemas ---


class NcdsGenerateRequest(GenerationOptionsParams):
    """Request for POST /api/v2/ncds/generate."""

    design: SimplifiedDesign = Field(..., description="Simplified design tree + globalVars")


class FigmaGenerateRequest(GenerationOptionsParams):
    """Request for POST /api/v2/ncds/generate-figma."""

    figma_url: str = Field(
        ...,
        description=(
            "Figma URL, e.g. https://www.figma.com/design/{fileKey}/{name}?node-id={nodeId}"
        ),
    )
    depth: Optional[int] = Field(None, ge=1, description="Levels of the node tree to traverse")


class NcdsGenerateResponse(BaseModel):
    """Generation result plus the formatted text block."""

    html: str
    css: Optional[str] = None
    imports: Optional[List[str]] = None
    component_usage: Dict[str, int] = Field(default_factory=dict)
    output: str = Field(..., description="Text block formatted per output_format")


def _to_response(result: GeneratedNcdsHtml, options: GenerationOptionsParams) -> NcdsGenerateResponse:
    return NcdsGenerateResponse(
        html=result.html,
        css=result.css,
        imports=result.imports,
        component_usage=result.component_usage,
        output=format_generation_output(result, options.output_format, options.include_css),
    )


# --- Endpoints ---


@router.post("/generate", response_model=NcdsGenerateResponse)
async def generate_from_design(payload: NcdsGenerateRequest):
    """Generate NCDS HTML from an already-simplified design tree."""
    generator = NcdsHtmlGenerator(payload.design.global_vars, payload.to_generation_options())
    result = generator.generate_from_design(payload.design)
    return _to_response(result, payload)


@router.post("/generate-figma", response_model=NcdsGenerateResponse)
async def generate_from_figma(payload: FigmaGenerateRequest):
    """Fetch a Figma file/node and generate NCDS HTML from it.

    Requires FIGMA_TOKEN environment variable.
    """
    if not config.FIGMA_TOKEN:
        raise HTTPException(
            status_code=400,
            detail=(
                "Figma integration not configured. "
                "Set FIGMA_TOKEN environment variable with a valid Figma Personal Access Token."
            ),
        )

    try:
        file_key, node_id = parse_figma_url(payload.figma_url)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        client = FigmaClient(token=config.FIGMA_TOKEN)
    except FigmaClientError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        design = await client.get_simplified_design(file_key, node_id, payload.depth)
    except (FigmaClientError, ValueError) as e:
        logger.warning(f"generate-figma: Figma fetch failed for {file_key}: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    finally:
        await client.close()

    generator = NcdsHtmlGenerator(design.global_vars, payload.to_generation_options())
    result = generator.generate_from_design(design)
    logger.info(
        f"generate-figma: file={file_key}, node={node_id}, "
        f"components={sum(result.component_usage.values())}"
    )
    return _to_response(result, payload)
