# microbench/kernels/scalar.py
#
# Pure-Python kernels. Each one is a deliberately plain textbook
# implementation; the point is to measure interpreter cost on scalar
# loops, recursion and indexing, not to be fast.

import random

from ..checks import check
from ..compiler import jit

PI_SUM_EXPECTED = 1.644834071848065
MANDEL_EXPECTED = 14791

_U32_MAX = 2**32 - 1


@jit
def fib(n):
    if n < 2:
        return n
    return fib(n - 1) + fib(n - 2)


def to_hex(n):
    """Lowercase hexadecimal digits of `n`, no prefix."""
    return format(n, "x")


def hex_round_trip(n):
    """Renders `n` as hexadecimal text and parses it back."""
    return int(to_hex(n), 16)


def parse_int(t, rng=None):
    """
    Round-trips `t` random unsigned 32-bit integers through hexadecimal
    text, checking each one. Returns the last integer drawn.
    """
    rng = rng if rng is not None else random
    n = 0
    for _ in range(t):
        n = rng.randint(0, _U32_MAX)
        m = hex_round_trip(n)
        check(m == n, "parse_int", f"{n} parsed back as {m}")
    return n


@jit
def mandel(z, maxiter=80):
    """Escape iteration count of the point `z`, capped at `maxiter`."""
    c = z
    for n in range(maxiter):
        if abs(z) > 2:
            return n
        z = z * z + c
    return maxiter


def mandel_perf():
    """Escape counts over the fixed grid, real axis outer."""
    r1 = [-2.0 + 0.1 * i for i in range(26)]
    r2 = [-1.0 + 0.1 * i for i in range(21)]
    return [mandel(complex(r, i)) for r in r1 for i in r2]


@jit
def qsort_recursive(a, lo=0, hi=None):
    """
    Sorts `a[lo:hi+1]` in place with Hoare partitioning around the middle
    element, recursing on the left part and looping on the right.
    """
    if hi is None:
        hi = len(a) - 1
    i = lo
    j = hi
    while i < hi:
        pivot = a[(lo + hi) // 2]
        while i <= j:
            while a[i] < pivot:
                i += 1
            while a[j] > pivot:
                j -= 1
            if i <= j:
                a[i], a[j] = a[j], a[i]
                i += 1
                j -= 1
        if lo < j:
            qsort_recursive(a, lo, j)
        lo = i
        j = hi
    return a


@jit
def qsort_iterative(a):
    """Same partitioning as `qsort_recursive`, driven by an explicit stack."""
    stack = [(0, len(a) - 1)]
    while stack:
        lo, hi = stack.pop()
        if lo >= hi:
            continue
        i = lo
        j = hi
        pivot = a[(lo + hi) // 2]
        while i <= j:
            while a[i] < pivot:
                i += 1
            while a[j] > pivot:
                j -= 1
            if i <= j:
                a[i], a[j] = a[j], a[i]
                i += 1
                j -= 1
        if lo < j:
            stack.append((lo, j))
        if i < hi:
            stack.append((i, hi))
    return a


def is_sorted(a):
    """True if `a` is non-decreasing."""
    return all(a[i] <= a[i + 1] for i in range(len(a) - 1))


@jit
def pi_sum_old(reps=500, terms=10000):
    # index-variable loops, the way the first version was written
    total = 0.0
    j = 0
    while j < reps:
        total = 0.0
        k = 1
        while k <= terms:
            total += 1.0 / (k * k)
            k += 1
        j += 1
    return total


@jit
def pi_sum(reps=500, terms=10000):
    total = 0.0
    for _ in range(reps):
        total = 0.0
        for k in range(1, terms + 1):
            total += 1.0 / (k * k)
    return total
