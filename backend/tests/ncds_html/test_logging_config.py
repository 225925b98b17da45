"""Tests for ncds_html.logging_config."""

import logging
import sys

import pytest

from ncds_html import logging_config


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    """Point LOG_DIR at a temp dir and start with no configured loggers."""
    monkeypatch.setattr(logging_config, "LOG_DIR", tmp_path / "logs")
    monkeypatch.setattr(logging_config, "_configured_loggers", set())
    return tmp_path / "logs"


@pytest.fixture
def fresh_logger(request):
    """Unique logger name; handlers are closed and removed afterwards."""
    name = f"ncds_html.test.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


# ---------------------------------------------------------------------------
# Level resolution
# ---------------------------------------------------------------------------


class TestResolveLevel:

    @pytest.mark.parametrize("raw,expected", [
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        (" info ", logging.INFO),
        ("30", 30),
        ("chatty", logging.INFO),
    ])
    def test_names(self, raw, expected):
        assert logging_config.resolve_level(raw) == expected

    def test_defaults_to_setting(self, monkeypatch):
        monkeypatch.setattr("ncds_html.settings.NCDS_LOG_LEVEL", "ERROR")
        assert logging_config.resolve_level() == logging.ERROR


# ---------------------------------------------------------------------------
# setup_logger
# ---------------------------------------------------------------------------


class TestSetupLogger:

    def test_file_and_stderr_handlers(self, log_dir, fresh_logger):
        logger = logging_config.setup_logger(fresh_logger, "svc.log")

        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        stream_handlers = [h for h in logger.handlers if not isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(log_dir / "svc.log")
        assert len(stream_handlers) == 1
        assert stream_handlers[0].stream is sys.stderr
        assert logger.propagate is False

    def test_never_writes_to_stdout(self, log_dir, fresh_logger):
        logger = logging_config.setup_logger(fresh_logger, "svc.log")
        assert all(getattr(h, "stream", None) is not sys.stdout for h in logger.handlers)

    def test_messages_reach_the_file(self, log_dir, fresh_logger):
        logger = logging_config.setup_logger(fresh_logger, "svc.log")
        logger.info("generate_from_design: components=3")
        for handler in logger.handlers:
            handler.flush()

        content = (log_dir / "svc.log").read_text(encoding="utf-8")
        assert f"[{fresh_logger}] [INFO] generate_from_design: components=3" in content

    def test_configured_once(self, log_dir, fresh_logger):
        first = logging_config.setup_logger(fresh_logger, "svc.log")
        second = logging_config.setup_logger(fresh_logger, "other.log")
        assert first is second
        assert len(second.handlers) == 2
        assert not (log_dir / "other.log").exists()

    def test_explicit_level(self, log_dir, fresh_logger):
        logger = logging_config.setup_logger(fresh_logger, "svc.log", level="debug")
        assert logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.handlers)

    def test_file_logging_disabled(self, log_dir, fresh_logger, monkeypatch):
        monkeypatch.setattr("ncds_html.settings.NCDS_LOG_TO_FILE", False)
        logger = logging_config.setup_logger(fresh_logger, "svc.log")
        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        assert len(logger.handlers) == 1
        assert not log_dir.exists()


class TestServiceLoggers:

    def test_api_and_mcp_loggers_are_separate(self):
        assert logging_config.get_api_logger().name == "ncds_html.api"
        assert logging_config.get_mcp_logger().name == "ncds_html.mcp"
