"""Iteration benchmarks.

This package provides:
- the shared random input sequence,
- the three fill strategies (indexed loop, element loop, parallel lambda),
- the timing runner and its text summary.
"""

from .dataset import generate_numbers
from .runner import BenchmarkReport, VariantTiming, run_benchmarks, time_variant
from .striped import StripedDict
from .variants import DEFAULT_VARIANTS, Variant, parallel_for_each

__all__ = [
    "BenchmarkReport",
    "DEFAULT_VARIANTS",
    "StripedDict",
    "Variant",
    "VariantTiming",
    "generate_numbers",
    "parallel_for_each",
    "run_benchmarks",
    "time_variant",
]
