"""
Tests for logging setup.
"""

import logging

import pytest

from account_service.shared.logging import configure_logging


class TestConfigureLogging:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("bogus", logging.INFO)],
    )
    def test_root_level_follows_name(self, name: str, expected: int) -> None:
        configure_logging(name)
        assert logging.getLogger().level == expected

    def test_server_and_driver_loggers_are_quieted(self) -> None:
        configure_logging("DEBUG")

        for name in ("uvicorn.access", "uvicorn.error", "pymongo"):
            assert logging.getLogger(name).level == logging.WARNING
