"""Unit tests for rrdescribe.utils.logger."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import patch

import pytest

from rrdescribe.utils import logger as logger_mod


@pytest.fixture()
def fresh_logger(tmp_path):
    """Build the real logger into *tmp_path* on a logger with no handlers."""
    app_logger = logging.getLogger("rrdescribe")
    saved = list(app_logger.handlers)
    for handler in saved:
        app_logger.removeHandler(handler)
    with patch.object(logger_mod, "_logger", None):
        with patch.object(logger_mod, "user_log_dir", return_value=str(tmp_path / "logs")):
            yield logger_mod.get_logger()
    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)
    for handler in saved:
        app_logger.addHandler(handler)


class TestGetLogger:
    def test_singleton(self, fresh_logger):
        assert logger_mod.get_logger() is fresh_logger

    def test_writes_to_log_file(self, fresh_logger, tmp_path):
        files = [h for h in fresh_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(files) == 1
        fresh_logger.info("hello from tests")
        for handler in fresh_logger.handlers:
            handler.flush()
        content = (tmp_path / "logs" / "rrdescribe.log").read_text(encoding="utf-8")
        assert "hello from tests" in content

    def test_does_not_propagate(self, fresh_logger):
        assert fresh_logger.name == "rrdescribe"
        assert fresh_logger.propagate is False
