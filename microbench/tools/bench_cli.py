# microbench/tools/bench_cli.py
#
# Implements the `microbench` command. With no arguments it runs the whole
# suite and prints one `harness,benchmark,milliseconds` line per benchmark
# to stdout; diagnostics go to stderr through logging.

import argparse
import logging
import sys

from .. import profiler
from ..checks import BenchmarkAssertionError, UnknownBenchmarkError
from ..registry import SuiteConfig, default_benchmarks, eligible_benchmarks, run_suite
from ..runner import DEFAULT_REPETITIONS, HARNESS_NAME
from ..runtime import detect_capabilities

logger = logging.getLogger("microbench")


def _positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog="microbench",
        description="Run the numeric micro-benchmark suite and print the best time of each kernel."
    )
    parser.add_argument("--quiet", action="store_true",
                        help="Don't print result lines.")
    parser.add_argument("--repetitions", type=_positive_int, default=DEFAULT_REPETITIONS,
                        help="Timed runs per benchmark; the minimum is reported (default: %(default)s).")
    parser.add_argument("--only", nargs="+", default=(), metavar="NAME",
                        help="Run only these benchmarks.")
    parser.add_argument("--list", action="store_true",
                        help="List the benchmarks eligible on this host and exit.")
    parser.add_argument("--report", action="store_true",
                        help="Print a summary table to stderr after the run.")
    parser.add_argument("--harness-name", default=HARNESS_NAME,
                        help="First column of each result line (default: %(default)s).")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Diagnostic verbosity on stderr.")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")

    capabilities = detect_capabilities()
    benchmarks = default_benchmarks()

    if args.list:
        for bench in eligible_benchmarks(benchmarks, capabilities):
            print(f"{bench.name:<15} {bench.description}")
        return 0

    config = SuiteConfig(verbose=not args.quiet,
                         repetitions=args.repetitions,
                         harness_name=args.harness_name,
                         only=tuple(args.only))

    with profiler.profile() as p:
        try:
            run_suite(config, benchmarks=benchmarks, capabilities=capabilities, recorder=p)
        except (BenchmarkAssertionError, UnknownBenchmarkError) as exc:
            logger.error("%s", exc)
            return 1

    if args.report:
        p.print_report()
    return 0


if __name__ == "__main__":
    sys.exit(main())
