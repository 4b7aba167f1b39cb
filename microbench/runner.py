# microbench/runner.py
#
# The timing helper shared by every benchmark. Each operation is executed a
# fixed number of times and only the fastest run is reported, which damps
# scheduler and cache noise at the cost of hiding variance. There is no
# warm-up phase: the correctness check run by the driver already executes
# the operation once before timing starts.

import sys
import time
from dataclasses import dataclass

DEFAULT_REPETITIONS = 20
HARNESS_NAME = "python"


@dataclass(frozen=True)
class BenchmarkResult:
    harness: str
    name: str
    duration_ms: float

    def __str__(self):
        return format_result(self.harness, self.name, self.duration_ms)


def format_result(harness: str, name: str, duration_ms: float) -> str:
    """Renders one `harness,name,milliseconds` output line (no newline)."""
    return f"{harness},{name},{duration_ms:.6f}"


def time_minimum(operation, repetitions: int = DEFAULT_REPETITIONS, clock=time.perf_counter) -> float:
    """
    Runs `operation` repeatedly and returns its fastest wall-clock time.

    Args:
        operation: A zero-argument callable. It must be safe to call
            `repetitions` times in a row.
        repetitions (int): Number of timed calls, at least 1.
        clock: Returns the current time in seconds. Swappable for tests.

    Returns:
        The minimum elapsed time across all calls, in milliseconds.

    Exceptions raised by `operation` are not caught.
    """
    if repetitions < 1:
        raise ValueError(f"repetitions must be at least 1, got {repetitions}")

    best = None
    for _ in range(repetitions):
        start_time = clock()
        operation()
        elapsed = clock() - start_time
        if best is None or elapsed < best:
            best = elapsed

    return best * 1000


def run_benchmark(name, operation, repetitions=DEFAULT_REPETITIONS, verbose=True,
                  harness=HARNESS_NAME, stream=None):
    """
    Times `operation` and, if `verbose`, writes its result line to `stream`
    (standard output by default).

    Returns:
        BenchmarkResult: The benchmark's minimum duration.
    """
    duration_ms = time_minimum(operation, repetitions)
    result = BenchmarkResult(harness, name, duration_ms)

    if verbose:
        out = stream if stream is not None else sys.stdout
        out.write(f"{result}\n")
        out.flush()

    return result
