import os
import sys

# Make the 'microbench' package in this directory importable without installing it.
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from microbench.compiler import JitHint, jit, jit_hint
from microbench.runtime import HostCapabilities, detect_capabilities
from microbench.runtime import capabilities as capabilities_module


def test_detect_capabilities_matches_host():
    caps = detect_capabilities()
    assert caps.platform == sys.platform
    assert caps.unix_like == (os.name == "posix")


def test_jit_backend_probe(monkeypatch):
    monkeypatch.setattr(capabilities_module.importlib.util, "find_spec",
                        lambda name: object() if name == "numba" else None)
    assert detect_capabilities().jit_backend == "numba"

    monkeypatch.setattr(capabilities_module.importlib.util, "find_spec", lambda name: None)
    assert detect_capabilities().jit_backend is None


def test_supports():
    caps = HostCapabilities(platform="linux", unix_like=True, jit_backend=None)
    assert caps.supports("unix_like")
    assert not caps.supports("jit")
    assert not caps.supports("gpu")

    other = HostCapabilities(platform="win32", unix_like=False, jit_backend="numba")
    assert not other.supports("unix_like")
    assert not other.supports("jit")


def test_jit_bare_returns_same_function():
    def kernel(x):
        return x * 2

    assert jit(kernel) is kernel
    assert kernel(21) == 42
    assert jit_hint(kernel) == JitHint("cpu")


def test_jit_with_target():
    @jit(target="gpu")
    def kernel():
        return 1

    assert kernel() == 1
    assert jit_hint(kernel).target == "gpu"


def test_jit_hint_absent():
    assert jit_hint(len) is None
