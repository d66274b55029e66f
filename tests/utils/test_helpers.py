# tests/utils/test_helpers.py
"""Tests for inkwell/utils/helpers.py module."""

import re
from logging import getLogger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi import APIRouter, FastAPI

from inkwell.configs import settings
from inkwell.utils import helpers
from inkwell.utils.helpers import file_logger, host, static_route_segments, today_str


class TestTodayStr:
    def test_format_matches_expected_pattern(self) -> None:
        """Test that the date format matches YYYY-MM-DD HH:MM:SS."""
        assert re.match(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$", today_str())


class TestHost:
    def test_client_host(self) -> None:
        request = MagicMock()
        request.client.host = "10.0.0.7"
        assert host(request) == "10.0.0.7"

    def test_missing_client(self) -> None:
        request = MagicMock()
        request.client = None
        assert host(request) == "unknown"


class TestStaticRouteSegments:
    def test_collects_literal_segments(self) -> None:
        router = APIRouter(prefix="/page")

        @router.get("/{slug}")
        async def read() -> None: ...

        @router.get("/manage/edit/{page_id}")
        async def edit() -> None: ...

        @router.get("/Preview/{page_id}")
        async def preview() -> None: ...

        app = FastAPI()
        app.include_router(router)

        @app.get("/pages/other")
        async def other() -> None: ...

        assert static_route_segments(app.routes, "/page") == frozenset({"manage", "edit", "preview"})


class TestFileLogger:
    def test_noop_when_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "LOG_TO_FILE", False)
        logger = getLogger("tests.file_logger.disabled")
        assert file_logger(logger) is logger
        assert not logger.handlers

    def test_attaches_single_handler(
        self,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
    ) -> None:
        monkeypatch.setattr(settings, "LOG_TO_FILE", True)
        monkeypatch.setattr(helpers, "LOG_DIR", tmp_path / "logs")
        logger = getLogger("tests.file_logger.enabled")

        file_logger(logger)
        file_logger(logger)

        handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(handlers) == 1
        assert (tmp_path / "logs").is_dir()
        for handler in handlers:
            logger.removeHandler(handler)
            handler.close()
