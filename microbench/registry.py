# microbench/registry.py
#
# The benchmark registry and the driver that walks it. Each benchmark is an
# immutable descriptor: a name, a zero-argument operation, and an optional
# predicate over that operation's result. The driver checks each benchmark
# once, then times it, strictly one after another in registration order.

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from . import kernels
from .checks import UnavailableBenchmarkError, UnknownBenchmarkError, check
from .compiler import jit_hint
from .runner import DEFAULT_REPETITIONS, HARNESS_NAME, run_benchmark
from .runtime import detect_capabilities

logger = logging.getLogger(__name__)

QUICKSORT_SIZE = 5000
RAND_MAT_STAT_TRIALS = 1000
RAND_MAT_MUL_SIZE = 1000
PRINTFD_LINES = 100000
PI_SUM_TOLERANCE = 1e-12


@dataclass(frozen=True)
class Benchmark:
    name: str
    operation: Callable[[], object]
    expect: Optional[Callable[[object], bool]] = None
    requires: Tuple[str, ...] = ()
    description: str = ""
    kernel: Optional[Callable] = field(default=None, compare=False, repr=False)


@dataclass
class SuiteConfig:
    """Options for one suite run. Passed explicitly; there is no global state."""
    verbose: bool = True
    repetitions: int = DEFAULT_REPETITIONS
    harness_name: str = HARNESS_NAME
    only: Sequence[str] = ()


def _close_to_pi_sum(value):
    return abs(value - kernels.PI_SUM_EXPECTED) < PI_SUM_TOLERANCE


def _cv_in_range(stats):
    s1, s2 = stats
    return 0.5 < s1 < 1.0 and 0.5 < s2 < 1.0


def _random_floats(n):
    # plain floats, so the sort times list indexing rather than numpy scalar boxing
    return np.random.default_rng().random(n).tolist()


def default_benchmarks() -> List[Benchmark]:
    """Returns the full suite in reporting order."""
    return [
        Benchmark("fib", lambda: kernels.fib(20),
                  expect=lambda r: r == 6765,
                  description="naive recursive Fibonacci of 20",
                  kernel=kernels.fib),
        Benchmark("parse_int", lambda: kernels.parse_int(1000),
                  description="1000 random u32 hexadecimal round trips",
                  kernel=kernels.parse_int),
        Benchmark("mandelOld", kernels.mandel_perf,
                  expect=lambda r: sum(r) == kernels.MANDEL_EXPECTED,
                  description="Mandelbrot escape counts, scalar",
                  kernel=kernels.mandel),
        Benchmark("mandel", kernels.mandel_perf_vec,
                  expect=lambda r: int(r.sum()) == kernels.MANDEL_EXPECTED,
                  description="Mandelbrot escape counts, vectorized"),
        Benchmark("quicksortOld",
                  lambda: kernels.qsort_recursive(_random_floats(QUICKSORT_SIZE)),
                  expect=kernels.is_sorted,
                  description="recursive quicksort of 5000 floats",
                  kernel=kernels.qsort_recursive),
        Benchmark("quicksort",
                  lambda: kernels.qsort_iterative(_random_floats(QUICKSORT_SIZE)),
                  expect=kernels.is_sorted,
                  description="explicit-stack quicksort of 5000 floats",
                  kernel=kernels.qsort_iterative),
        Benchmark("pi_sumOld", kernels.pi_sum_old, expect=_close_to_pi_sum,
                  description="sum of 1/k^2, while loops",
                  kernel=kernels.pi_sum_old),
        Benchmark("pi_sum", kernels.pi_sum, expect=_close_to_pi_sum,
                  description="sum of 1/k^2, for loops",
                  kernel=kernels.pi_sum),
        Benchmark("pi_sum_vec", kernels.pi_sum_vec, expect=_close_to_pi_sum,
                  description="sum of 1/k^2, vectorized"),
        Benchmark("rand_mat_stat",
                  lambda: kernels.rand_mat_stat(RAND_MAT_STAT_TRIALS),
                  expect=_cv_in_range,
                  description="trace statistics of random block matrices"),
        Benchmark("rand_mat_mul",
                  lambda: kernels.rand_mat_mul(RAND_MAT_MUL_SIZE),
                  description="1000x1000 random matrix product"),
        Benchmark("printfd", lambda: kernels.printfd(PRINTFD_LINES),
                  expect=lambda r: r == PRINTFD_LINES,
                  requires=("unix_like",),
                  description="100000 buffered lines to the null device"),
    ]


def eligible_benchmarks(benchmarks, capabilities):
    """Drops benchmarks whose requirements the host doesn't meet."""
    eligible = []
    for bench in benchmarks:
        missing = [req for req in bench.requires if not capabilities.supports(req)]
        if missing:
            logger.debug("skipping %s on %s: requires %s",
                         bench.name, capabilities.platform, ", ".join(missing))
            continue
        eligible.append(bench)
    return eligible


def select_benchmarks(benchmarks, names):
    """
    Keeps only the benchmarks named in `names`, in registration order.
    An empty `names` keeps everything.

    Raises:
        UnknownBenchmarkError: If a name isn't among `benchmarks`.
    """
    if not names:
        return list(benchmarks)
    known = {bench.name for bench in benchmarks}
    unknown = [name for name in names if name not in known]
    if unknown:
        raise UnknownBenchmarkError(
            f"unknown benchmark(s): {', '.join(unknown)} "
            f"(available: {', '.join(sorted(known))})"
        )
    wanted = set(names)
    return [bench for bench in benchmarks if bench.name in wanted]


def run_suite(config=None, benchmarks=None, capabilities=None, stream=None, recorder=None):
    """
    Checks and times every eligible benchmark in order.

    Args:
        config (SuiteConfig): Run options; defaults to `SuiteConfig()`.
        benchmarks (list): Descriptors to run; defaults to `default_benchmarks()`.
        capabilities (HostCapabilities): Host description; detected if omitted.
        stream: Where result lines go when `config.verbose` is set.
        recorder: Optional object whose `record(result)` receives each result.

    Returns:
        list[BenchmarkResult]: One result per benchmark run.

    Raises:
        BenchmarkAssertionError: On the first failed correctness check.
        UnknownBenchmarkError: If `config.only` names an unregistered benchmark.
        UnavailableBenchmarkError: If `config.only` names one this host can't run.
    """
    config = config if config is not None else SuiteConfig()
    benchmarks = benchmarks if benchmarks is not None else default_benchmarks()
    capabilities = capabilities if capabilities is not None else detect_capabilities()

    logger.debug("host %s, jit backend: %s", capabilities.platform, capabilities.jit_backend)
    selected = select_benchmarks(benchmarks, config.only)
    eligible = eligible_benchmarks(selected, capabilities)
    if config.only and len(eligible) < len(selected):
        kept = {bench.name for bench in eligible}
        dropped = [bench.name for bench in selected if bench.name not in kept]
        raise UnavailableBenchmarkError(
            f"not available on this host ({capabilities.platform}): {', '.join(dropped)}"
        )

    results = []
    for bench in eligible:
        hint = jit_hint(bench.kernel) if bench.kernel is not None else None
        if hint is not None:
            logger.debug("%s requested jit (target=%s, backend=%s)",
                         bench.name, hint.target, capabilities.jit_backend or "none")

        result = bench.operation()
        if bench.expect is not None:
            check(bench.expect(result), bench.name)

        timed = run_benchmark(bench.name, bench.operation,
                              repetitions=config.repetitions,
                              verbose=config.verbose,
                              harness=config.harness_name,
                              stream=stream)
        if recorder is not None:
            recorder.record(timed)
        results.append(timed)

    return results
