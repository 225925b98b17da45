"""Logging setup for the two NCDS HTML entrypoints.

The HTTP API and the MCP stdio server each get a named logger that writes
to its own file under LOG_DIR and to stderr. stdout is never used: the
MCP server speaks JSON-RPC over it.

Library modules (generators, mappers, integrations) only call
logging.getLogger("ncds_html.<area>") and leave handler setup to the
entrypoint.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from ncds_html import settings
from ncds_html.config import LOG_DIR as _LOG_DIR_ENV

# LOG_DIR env var overrides the repo-local default
LOG_DIR = Path(_LOG_DIR_ENV) if _LOG_DIR_ENV else Path(__file__).parent.parent / "logs"

FILE_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
STDERR_FORMAT = "%(asctime)s [%(name)s] %(message)s"

API_LOGGER = "ncds_html.api"
MCP_LOGGER = "ncds_html.mcp"

_configured_loggers: set[str] = set()


def resolve_level(level: Optional[str] = None) -> int:
    """'debug' / 'INFO' / '20' → logging level; unknown names fall back to INFO."""
    raw = (level or settings.NCDS_LOG_LEVEL).strip().upper()
    if raw.isdigit():
        return int(raw)
    resolved = logging.getLevelName(raw)
    return resolved if isinstance(resolved, int) else logging.INFO


def _file_handler(filename: str, level: int) -> logging.Handler:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(LOG_DIR / filename, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def _stderr_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(STDERR_FORMAT))
    return handler


def setup_logger(name: str, filename: str, level: Optional[str] = None) -> logging.Logger:
    """Configure `name` once with a stderr handler and, unless disabled, a file handler.

    Args:
        name: Logger name (e.g. 'ncds_html.api')
        filename: Log file name under LOG_DIR (e.g. 'api.log')
        level: Level name; defaults to the NCDS_LOG_LEVEL setting

    Returns:
        Configured logger instance. Repeated calls return it unchanged.
    """
    logger = logging.getLogger(name)
    if name in _configured_loggers:
        return logger

    resolved = resolve_level(level)
    logger.setLevel(resolved)
    logger.propagate = False

    if settings.NCDS_LOG_TO_FILE:
        logger.addHandler(_file_handler(filename, resolved))
    logger.addHandler(_stderr_handler(resolved))

    _configured_loggers.add(name)
    return logger


def get_api_logger() -> logging.Logger:
    """Logger for the FastAPI app."""
    return setup_logger(API_LOGGER, "api.log")


def get_mcp_logger() -> logging.Logger:
    """Logger for the MCP stdio server."""
    return setup_logger(MCP_LOGGER, "mcp.log")
