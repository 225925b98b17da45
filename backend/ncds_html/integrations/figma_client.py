"""Figma REST API client for the NCDS HTML generator.

Fetches file and node trees using Personal Access Token (PAT)
authentication and hands them to the simplifier.

Environment:
    FIGMA_TOKEN: Figma Personal Access Token (required)

Usage:
    client = FigmaClient()
    design = await client.get_simplified_design("6kGd851qaAX4TiL44vpIrO", "16650:538")
    await client.close()
"""

import logging
import re
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import parse_qs, unquote, urlparse

import httpx

from ncds_html import config, settings
from ncds_html.integrations.figma_simplifier import simplify_raw_figma_response
from ncds_html.models import SimplifiedDesign

logger = logging.getLogger("ncds_html.integrations.figma")

_FIGMA_PATH_RE = re.compile(r"^/(?:file|design|proto)/([A-Za-z0-9]+)")


class FigmaClientError(Exception):
    """Raised when a Figma API call fails."""


def parse_figma_url(url: str) -> Tuple[str, Optional[str]]:
    """Extract (file_key, node_id) from a Figma file/design URL.

    'https://www.figma.com/design/6kGd851/Name?node-id=16650-538'
    → ('6kGd851', '16650:538')

    Raises:
        ValueError: Not a figma.com file/design URL.
    """
    parsed = urlparse(url.strip())
    host = parsed.netloc.lower()
    if not (host == "figma.com" or host.endswith(".figma.com")):
        raise ValueError(f"Not a Figma URL: {url}")

    match = _FIGMA_PATH_RE.match(parsed.path)
    if not match:
        raise ValueError(f"Figma URL has no file key: {url}")

    node_ids = parse_qs(parsed.query).get("node-id")
    node_id = unquote(node_ids[0]).replace("-", ":") if node_ids else None
    return match.group(1), node_id


class FigmaClient:
    """Async Figma REST API client.

    Args:
        token: Figma PAT. Falls back to FIGMA_TOKEN env var.
        timeout: HTTP request timeout in seconds.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self._token = token or config.FIGMA_TOKEN
        if not self._token:
            raise FigmaClientError(
                "Figma token not configured. Set FIGMA_TOKEN environment variable "
                "or pass token= to FigmaClient()."
            )
        self._client: Optional[httpx.AsyncClient] = None
        self._timeout = timeout if timeout is not None else settings.FIGMA_HTTP_TIMEOUT

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=config.FIGMA_API_BASE,
                headers={"X-FIGMA-TOKEN": self._token},
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=5, max_keepalive_connections=3),
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _get(self, path: str, params: Optional[Dict] = None) -> Dict[str, Any]:
        """Make a GET request to the Figma API."""
        client = await self._get_client()
        try:
            resp = await client.get(path, params=params)
        except httpx.TimeoutException as e:
            raise FigmaClientError(f"Figma API timeout: {path}") from e
        except httpx.ConnectError as e:
            raise FigmaClientError(f"Figma API connection error: {path}") from e

        if resp.status_code == 403:
            raise FigmaClientError(
                "Figma API returned 403 Forbidden. Check that FIGMA_TOKEN is valid "
                "and has file_content:read scope."
            )
        if resp.status_code == 404:
            raise FigmaClientError(f"Figma resource not found: {path}")
        if resp.status_code == 429:
            raise FigmaClientError("Figma API rate limit exceeded. Retry later.")
        if resp.status_code != 200:
            raise FigmaClientError(
                f"Figma API error {resp.status_code}: {resp.text[:200]}"
            )

        try:
            return resp.json()
        except ValueError as e:
            raise FigmaClientError(f"Figma API returned a non-JSON body: {path}") from e

    # ------------------------------------------------------------------
    # Core API methods
    # ------------------------------------------------------------------

    async def get_file(
        self,
        file_key: str,
        depth: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Fetch a whole Figma file.

        GET /v1/files/:key?depth=...
        """
        params = {"depth": str(depth)} if depth else None
        data = await self._get(f"/v1/files/{file_key}", params=params)
        logger.info(f"get_file: file={file_key}, depth={depth or 'all'}")
        return data

    async def get_file_nodes(
        self,
        file_key: str,
        node_ids: List[str],
        depth: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Fetch specific nodes from a Figma file.

        GET /v1/files/:key/nodes?ids=...&depth=...
        """
        params: Dict[str, str] = {"ids": ",".join(node_ids)}
        if depth:
            params["depth"] = str(depth)
        data = await self._get(f"/v1/files/{file_key}/nodes", params=params)
        logger.info(
            f"get_file_nodes: file={file_key}, requested={len(node_ids)}, "
            f"returned={len(data.get('nodes', {}))}"
        )
        return data

    async def get_simplified_design(
        self,
        file_key: str,
        node_id: Optional[str] = None,
        depth: Optional[int] = None,
    ) -> SimplifiedDesign:
        """Fetch a file (or one node of it) and simplify it for generation."""
        if node_id:
            raw = await self.get_file_nodes(file_key, [node_id], depth=depth)
            if not (raw.get("nodes") or {}).get(node_id):
                raise FigmaClientError(f"Node '{node_id}' not found in file {file_key}")
        else:
            raw = await self.get_file(file_key, depth=depth)
        try:
            return simplify_raw_figma_response(raw, max_depth=depth)
        except ValueError as e:
            raise FigmaClientError(f"Unexpected Figma response for file {file_key}: {e}") from e
