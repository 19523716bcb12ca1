"""iteration-bench package initialisation."""

__all__ = [
    "benchmarks",
    "shared",
]
