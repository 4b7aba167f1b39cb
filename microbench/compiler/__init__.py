from .jit import JitHint, jit, jit_hint
