# microbench/checks.py
#
# Error types and the one-shot correctness check run before a benchmark is
# timed. A failed check is fatal: nothing downstream catches it except the
# command-line entry point, which reports it and exits non-zero.


class MicrobenchError(Exception):
    """Base class for all errors raised by the suite itself."""


class BenchmarkAssertionError(MicrobenchError, AssertionError):
    """Raised when a benchmark's correctness check evaluates false."""

    def __init__(self, name=None, detail=None):
        self.name = name
        self.detail = detail
        message = f"correctness check failed for '{name}'" if name else "correctness check failed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class UnknownBenchmarkError(MicrobenchError, KeyError):
    """Raised when a benchmark is selected by a name that isn't registered."""

    def __str__(self):
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


def check(condition, name=None, detail=None):
    """
    Fails the run immediately if `condition` is falsy.

    Args:
        condition: The value to test for truthiness.
        name (str): The benchmark the check belongs to, used in the message.
        detail (str): Optional extra context, e.g. the offending value.

    Raises:
        BenchmarkAssertionError: If `condition` is falsy.
    """
    if not condition:
        raise BenchmarkAssertionError(name, detail)


class UnavailableBenchmarkError(UnknownBenchmarkError):
    """Raised when a registered benchmark is selected on a host that can't run it."""
