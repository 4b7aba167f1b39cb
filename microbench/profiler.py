# microbench/profiler.py
#
# Defines a context manager that collects benchmark results during a suite
# run and prints a summary table afterwards.

import sys


class profile:
    """
    Collects results handed to it by the suite driver.

    Example:
        with microbench.profile() as p:
            run_suite(recorder=p)
        p.print_report()
    """
    def __init__(self):
        self.results = []

    def __enter__(self):
        self.results = []
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Keep whatever completed before a failure; never suppress it.
        return False

    def record(self, result):
        self.results.append(result)

    @property
    def total_ms(self):
        return sum(r.duration_ms for r in self.results)

    def print_report(self, stream=None):
        out = stream if stream is not None else sys.stderr
        print("--- Benchmark Report ---", file=out)
        if not self.results:
            print("No results captured.", file=out)
            return

        total_time = self.total_ms
        print(f"Total (sum of minimums): {total_time:.4f} ms", file=out)
        print("-----------------------------", file=out)

        for r in self.results:
            percentage = (r.duration_ms / total_time * 100) if total_time > 0 else 0
            print(f"{r.name:<25} | {r.duration_ms:>10.4f} ms | ({percentage:5.1f}%)", file=out)
        print("-----------------------------", file=out)
