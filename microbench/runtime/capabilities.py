# microbench/runtime/capabilities.py
#
# Queries the host once at startup and reports what the suite can use.
# The driver filters the benchmark list against this instead of branching
# on the platform inline.

import importlib.util
import os
import sys
from dataclasses import dataclass
from typing import Optional

# Probed without importing, so a broken install can't affect the run.
_JIT_BACKENDS = ("numba",)


@dataclass(frozen=True)
class HostCapabilities:
    platform: str
    unix_like: bool
    jit_backend: Optional[str] = None

    def supports(self, requirement: str) -> bool:
        """
        Answers a benchmark requirement by name, e.g. 'unix_like'.
        Unknown requirements are unsupported.
        """
        if requirement == "unix_like":
            return self.unix_like
        return False


def _find_jit_backend():
    for name in _JIT_BACKENDS:
        if importlib.util.find_spec(name) is not None:
            return name
    return None


def detect_capabilities() -> HostCapabilities:
    return HostCapabilities(
        platform=sys.platform,
        unix_like=os.name == "posix",
        jit_backend=_find_jit_backend(),
    )
