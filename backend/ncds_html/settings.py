"""Generation runtime settings: tunable parameters for the HTML pipeline.

All values read from environment variables with defaults matching the
tool's documented defaults. Import from here instead of hardcoding.

Infrastructure config (Figma token, API base, log dir) stays in
ncds_html/config.py.
"""

from __future__ import annotations

import os


def _float(key: str, default: float) -> float:
    return float(os.getenv(key, str(default)))


def _str(key: str, default: str) -> str:
    return os.getenv(key, default)


def _bool(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None:
        return default
    return raw.strip().lower() in ("true", "1", "yes", "on")


# =====================================================================
# Figma API
# =====================================================================

FIGMA_HTTP_TIMEOUT = _float("FIGMA_HTTP_TIMEOUT", 60.0)


# =====================================================================
# Classification
# =====================================================================

# INSTANCE nodes are treated as pre-instantiated Button references.
# Turn off for design files that use instances for arbitrary components.
NCDS_INSTANCE_AS_BUTTON = _bool("NCDS_INSTANCE_AS_BUTTON", True)


# =====================================================================
# Generation defaults
# =====================================================================

NCDS_INCLUDE_CSS = _bool("NCDS_INCLUDE_CSS", True)
NCDS_INCLUDE_COMMENTS = _bool("NCDS_INCLUDE_COMMENTS", True)
NCDS_PHP_NAMING = _bool("NCDS_PHP_NAMING", True)
NCDS_GENERATE_IMPORTS = _bool("NCDS_GENERATE_IMPORTS", True)
NCDS_WRAP_IN_CONTAINER = _bool("NCDS_WRAP_IN_CONTAINER", True)

# NCDS UI Admin CDN; stylesheet and script are linked from here
NCDS_CDN_BASE = _str(
    "NCDS_CDN_BASE", "https://fe-sdk.cdn-nhncommerce.com/@ncds/ui-admin/1.0"
)


# =====================================================================
# Logging
# =====================================================================

# Level name for the API and MCP server loggers (DEBUG shows per-node decisions)
NCDS_LOG_LEVEL = _str("NCDS_LOG_LEVEL", "INFO")
# Off for read-only installs; stderr logging stays on
NCDS_LOG_TO_FILE = _bool("NCDS_LOG_TO_FILE", True)
