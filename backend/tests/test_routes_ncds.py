"""Tests for NCDS generation API routes (app/routes/ncds.py).

Covers:
- GET /health
- POST /api/v2/ncds/generate (simplified design payload)
- POST /api/v2/ncds/generate-figma (Figma URL → fetch → generate)
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import AsyncClient

from ncds_html.integrations.figma_client import FigmaClientError
from ncds_html.models import DesignNode, SimplifiedDesign


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

VALID_FIGMA_URL = (
    "https://www.figma.com/design/6kGd851qaAX4TiL44vpIrO/"
    "AdminScreens?node-id=5574-3309"
)

DESIGN_PAYLOAD = {
    "name": "Order Screen",
    "nodes": [
        {"id": "1:1", "name": "Primary Button", "type": "FRAME", "text": "Submit"},
        {"id": "1:2", "name": "Caption", "type": "TEXT", "text": "Hello"},
        {"id": "1:3", "name": "Card", "type": "FRAME", "borderRadius": 8, "children": []},
    ],
    "globalVars": {"styles": {}},
}


def _mock_figma_client(design=None, error=None):
    client = MagicMock()
    if error is not None:
        client.get_simplified_design = AsyncMock(side_effect=error)
    else:
        client.get_simplified_design = AsyncMock(return_value=design)
    client.close = AsyncMock()
    return client


# ---------------------------------------------------------------------------
# GET /health
# ---------------------------------------------------------------------------


class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


# ---------------------------------------------------------------------------
# POST /api/v2/ncds/generate
# ---------------------------------------------------------------------------


class TestGenerate:
    """Tests for the design-payload endpoint."""

    @pytest.mark.asyncio
    async def test_generate_complete(self, client: AsyncClient):
        resp = await client.post("/api/v2/ncds/generate", json={"design": DESIGN_PAYLOAD})
        assert resp.status_code == 200, resp.text
        data = resp.json()
        assert data["component_usage"] == {"Button": 1}
        assert data["imports"] == ["Button"]
        assert data["html"].startswith('<div class="figma-container">')
        assert '<span class="ncua-btn__label">Submit</span>' in data["html"]
        assert 'style="border-radius: 8px"' in data["html"]
        assert data["css"]
        assert "import { Button } from '@ncds/ui-admin';" in data["output"]

    @pytest.mark.asyncio
    async def test_generate_html_only(self, client: AsyncClient):
        resp = await client.post("/api/v2/ncds/generate", json={
            "design": DESIGN_PAYLOAD,
            "output_format": "html",
            "include_css": False,
            "include_comments": False,
            "wrap_in_container": False,
            "generate_ncds_imports": False,
        })
        assert resp.status_code == 200, resp.text
        data = resp.json()
        assert data["css"] is None
        assert data["imports"] is None
        assert data["output"] == data["html"]
        assert data["html"].startswith("<button")
        assert "<!--" not in data["html"]

    @pytest.mark.asyncio
    async def test_generate_empty_design(self, client: AsyncClient):
        resp = await client.post("/api/v2/ncds/generate", json={
            "design": {"nodes": []},
            "wrap_in_container": False,
        })
        assert resp.status_code == 200
        assert resp.json()["html"] == ""
        assert resp.json()["component_usage"] == {}

    @pytest.mark.asyncio
    async def test_generate_requires_design(self, client: AsyncClient):
        resp = await client.post("/api/v2/ncds/generate", json={})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_generate_invalid_output_format(self, client: AsyncClient):
        resp = await client.post("/api/v2/ncds/generate", json={
            "design": DESIGN_PAYLOAD, "output_format": "pdf",
        })
        assert resp.status_code == 422


# ---------------------------------------------------------------------------
# POST /api/v2/ncds/generate-figma
# ---------------------------------------------------------------------------


class TestGenerateFigma:
    """Tests for the Figma URL endpoint."""

    @pytest.mark.asyncio
    async def test_requires_figma_token(self, client: AsyncClient):
        with patch("ncds_html.config.FIGMA_TOKEN", ""):
            resp = await client.post("/api/v2/ncds/generate-figma", json={"figma_url": VALID_FIGMA_URL})
        assert resp.status_code == 400
        assert "FIGMA_TOKEN" in resp.json()["detail"]

    @pytest.mark.asyncio
    async def test_invalid_figma_url(self, client: AsyncClient):
        with patch("ncds_html.config.FIGMA_TOKEN", "fake-token"):
            resp = await client.post("/api/v2/ncds/generate-figma", json={
                "figma_url": "https://example.com/not-figma",
            })
        assert resp.status_code == 400
        assert "Not a Figma URL" in resp.json()["detail"]

    @pytest.mark.asyncio
    async def test_generates_from_figma(self, client: AsyncClient):
        design = SimplifiedDesign(name="Admin", nodes=[
            DesignNode(id="5574:3309", name="Save Button", type="FRAME", text="Save"),
        ])
        mock_client = _mock_figma_client(design)
        with patch("ncds_html.config.FIGMA_TOKEN", "fake-token"):
            with patch("app.routes.ncds.FigmaClient", return_value=mock_client) as mock_cls:
                resp = await client.post("/api/v2/ncds/generate-figma", json={
                    "figma_url": VALID_FIGMA_URL, "depth": 4,
                })

        assert resp.status_code == 200, resp.text
        data = resp.json()
        assert data["component_usage"] == {"Button": 1}
        assert ">Save</span>" in data["html"]
        mock_cls.assert_called_once_with(token="fake-token")
        mock_client.get_simplified_design.assert_awaited_once_with(
            "6kGd851qaAX4TiL44vpIrO", "5574:3309", 4,
        )
        mock_client.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_figma_error_returns_502(self, client: AsyncClient):
        mock_client = _mock_figma_client(error=FigmaClientError("Figma API returned 403 Forbidden."))
        with patch("ncds_html.config.FIGMA_TOKEN", "fake-token"):
            with patch("app.routes.ncds.FigmaClient", return_value=mock_client):
                resp = await client.post("/api/v2/ncds/generate-figma", json={"figma_url": VALID_FIGMA_URL})

        assert resp.status_code == 502
        assert "403" in resp.json()["detail"]
        mock_client.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_malformed_figma_response_returns_502(self, client: AsyncClient):
        """A body with neither document nor nodes is an upstream error, not a 500."""
        with patch("ncds_html.config.FIGMA_TOKEN", "fake-token"):
            with patch(
                "ncds_html.integrations.figma_client.FigmaClient._get",
                AsyncMock(return_value={"err": "x"}),
            ):
                resp = await client.post("/api/v2/ncds/generate-figma", json={
                    "figma_url": "https://www.figma.com/design/abc123/AdminScreens",
                })

        assert resp.status_code == 502
        assert "neither" in resp.json()["detail"]

    @pytest.mark.asyncio
    async def test_value_error_from_fetch_returns_502(self, client: AsyncClient):
        mock_client = _mock_figma_client(error=ValueError("Expecting value: line 1 column 1"))
        with patch("ncds_html.config.FIGMA_TOKEN", "fake-token"):
            with patch("app.routes.ncds.FigmaClient", return_value=mock_client):
                resp = await client.post("/api/v2/ncds/generate-figma", json={"figma_url": VALID_FIGMA_URL})

        assert resp.status_code == 502
        assert "Expecting value" in resp.json()["detail"]
        mock_client.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_depth_must_be_positive(self, client: AsyncClient):
        resp = await client.post("/api/v2/ncds/generate-figma", json={
            "figma_url": VALID_FIGMA_URL, "depth": 0,
        })
        assert resp.status_code == 422
