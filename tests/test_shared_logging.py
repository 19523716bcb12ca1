"""Unit tests for shared logging configuration."""

from __future__ import annotations

import logging
from unittest.mock import patch

from iteration_bench.shared.logging import configure_logging


def test_configure_logging_calls_structlog_and_basicconfig() -> None:
    with (
        patch("iteration_bench.shared.logging.logging.basicConfig") as basic_config,
        patch("iteration_bench.shared.logging.structlog.configure") as configure,
    ):
        configure_logging(level=logging.DEBUG)

    basic_config.assert_called_once()
    assert basic_config.call_args.kwargs["level"] == logging.DEBUG
    assert basic_config.call_args.kwargs["force"] is True
    configure.assert_called_once()
