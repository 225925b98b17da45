"""Root conftest for generator, integration and API tests.

Provides:
- ``make_node`` factory for building DesignNode trees tersely
- FastAPI AsyncClient over ASGITransport (no network, no server)
"""

from __future__ import annotations

from typing import AsyncGenerator, List, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from ncds_html.models import DesignNode, LayoutBox, NodeType


# ---------------------------------------------------------------------------
# Design tree factory
# ---------------------------------------------------------------------------


def build_node(
    name: str = "",
    type: NodeType = NodeType.FRAME,
    text: Optional[str] = None,
    children: Optional[List[DesignNode]] = None,
    node_id: Optional[str] = None,
    width: Optional[float] = None,
    height: Optional[float] = None,
    **extra,
) -> DesignNode:
    """Build a DesignNode; id defaults to a slug of the name."""
    layout = None
    if width is not None or height is not None:
        layout = LayoutBox(x=0, y=0, width=width, height=height)
    return DesignNode(
        id=node_id if node_id is not None else (name.replace(" ", "-").lower() or "n"),
        name=name,
        type=type,
        text=text,
        layout=layout,
        children=children,
        **extra,
    )


@pytest.fixture
def make_node():
    """Factory fixture wrapping build_node."""
    return build_node


# ---------------------------------------------------------------------------
# FastAPI test client
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing FastAPI routes."""
    from app.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
