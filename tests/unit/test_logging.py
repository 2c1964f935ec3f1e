"""Unit tests for devis.core.logging module."""

import logging
import logging.handlers

import structlog

from devis.core.logging import _build_handlers, _build_processors, get_logger


class TestHandlers:
    """Tests for handler selection."""

    def test_no_log_file_under_pytest(self, tmp_path):
        handlers = _build_handlers(str(tmp_path / "devis.log"))
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert not (tmp_path / "devis.log").exists()

    def test_file_logging_disabled(self, monkeypatch):
        monkeypatch.delenv("PYTEST_CURRENT_TEST", raising=False)
        assert len(_build_handlers("")) == 1

    def test_rotating_file(self, monkeypatch, tmp_path):
        monkeypatch.delenv("PYTEST_CURRENT_TEST", raising=False)
        handlers = _build_handlers(str(tmp_path / "logs" / "devis.log"))
        try:
            assert isinstance(handlers[-1], logging.handlers.RotatingFileHandler)
            assert (tmp_path / "logs").is_dir()
        finally:
            for handler in handlers[1:]:
                handler.close()


class TestProcessors:
    """Tests for the renderer choice."""

    def test_json_renderer(self):
        assert isinstance(_build_processors(True)[-1], structlog.processors.JSONRenderer)
        assert isinstance(_build_processors(False)[-1], structlog.dev.ConsoleRenderer)


def test_get_logger_binds_name():
    log = get_logger("devis.test")
    log.info("logger_ready")
