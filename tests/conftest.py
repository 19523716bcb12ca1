"""Shared pytest fixtures."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _quiet_root_logger():
    """Drops the root level back to WARNING after tests that run the CLI.

    `configure_logging` binds its handler to the stderr captured for that
    test; later tests must not write debug records into it.
    """

    yield
    logging.getLogger().setLevel(logging.WARNING)
