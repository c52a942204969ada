"""Unit tests for the logging context helpers."""

from __future__ import annotations

import pytest

from recipebox.observability.logging import (
    bind_context,
    clear_context,
    get_context,
    setup_logging,
)


pytestmark = pytest.mark.unit


class TestLogContext:
    """Tests for bind_context and clear_context."""

    def test_bind_accumulates(self) -> None:
        clear_context()

        bind_context(request_id="r1")
        bind_context(user_id="u1")

        assert get_context() == {"request_id": "r1", "user_id": "u1"}

    def test_clear(self) -> None:
        bind_context(request_id="r1")

        clear_context()

        assert get_context() == {}


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.mark.parametrize("log_format", ["json", "text"])
    def test_configures_without_error(self, log_format: str) -> None:
        setup_logging(log_level="DEBUG", log_format=log_format, is_development=False)
