# microbench/compiler/jit.py
#
# The `@jit` decorator marks a kernel as a candidate for native compilation.
# It is a hint only: the decorated function is returned unchanged, so the
# kernels always run as plain Python and every correctness check and
# output line is identical whether or not a compiler backend is installed.
# The driver reads the hint back to log which kernels asked for it.

from dataclasses import dataclass

_HINT_ATTR = "__jit_hint__"


@dataclass(frozen=True)
class JitHint:
    """Describes the compiled execution strategy a kernel asked for."""
    target: str = "cpu"


def jit(func=None, *, target: str = "cpu"):
    """
    Marks a function as JIT-compilable.

    Usable bare (`@jit`) or with options (`@jit(target='cpu')`).
    """
    def decorate(f):
        setattr(f, _HINT_ATTR, JitHint(target))
        return f

    if func is None:
        return decorate
    return decorate(func)


def jit_hint(func):
    """Returns the `JitHint` attached to `func`, or None."""
    return getattr(func, _HINT_ATTR, None)
