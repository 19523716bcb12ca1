"""Moduły współdzielone: konfiguracja i logowanie."""

from .config import (
    BenchConfig,
    NonPositiveRunCountError,
    RunCountError,
    RunCountFormatError,
    parse_run_count,
)
from .logging import configure_logging

__all__ = [
	"BenchConfig",
	"configure_logging",
	"NonPositiveRunCountError",
	"parse_run_count",
	"RunCountError",
	"RunCountFormatError",
]
