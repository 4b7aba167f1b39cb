# microbench/__init__.py

# Expose the user-facing pieces of the suite at the top-level package
# namespace.

from .checks import (BenchmarkAssertionError, MicrobenchError, UnavailableBenchmarkError,
                     UnknownBenchmarkError, check)
from .compiler import jit
from .profiler import profile
from .registry import Benchmark, SuiteConfig, default_benchmarks, run_suite
from .runner import BenchmarkResult, run_benchmark, time_minimum

__version__ = "0.1.0"
