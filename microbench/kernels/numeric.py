# microbench/kernels/numeric.py
#
# NumPy kernels: the vectorized counterparts of the scalar kernels plus the
# random-matrix workloads. Random inputs come from a numpy Generator; pass
# a seeded one for reproducible results, otherwise a fresh unseeded
# generator is used on every call.

import numpy as np

_MANDEL_REAL = -2.0 + 0.1 * np.arange(26)
_MANDEL_IMAG = -1.0 + 0.1 * np.arange(21)


def _default_rng(rng):
    return rng if rng is not None else np.random.default_rng()


def mandel_perf_vec(maxiter=80):
    """
    Escape counts over the same grid as `mandel_perf`, computed for every
    point at once. Returned flattened in the same real-axis-outer order.
    """
    c = _MANDEL_REAL[:, None] + 1j * _MANDEL_IMAG[None, :]
    z = c.copy()
    counts = np.full(c.shape, maxiter, dtype=np.int64)
    active = np.ones(c.shape, dtype=bool)

    for n in range(maxiter):
        escaped = active & (np.abs(z) > 2)
        counts[escaped] = n
        active &= ~escaped
        if not active.any():
            break
        z[active] = z[active] * z[active] + c[active]

    return counts.ravel()


def pi_sum_vec(reps=500, terms=10000):
    k = np.arange(1, terms + 1, dtype=np.float64)
    total = 0.0
    for _ in range(reps):
        total = np.sum(1.0 / (k * k))
    return float(total)


def rand_mat_stat(t, rng=None):
    """
    For `t` trials, joins four random 5x5 normal blocks two ways (side by
    side into 5x20, and as a 2x2 block matrix into 10x10) and takes
    trace((M'M)^4) of each.

    Returns:
        tuple: The coefficient of variation (sample std / mean) of each
            construction.
    """
    rng = _default_rng(rng)
    n = 5
    v = np.zeros(t)
    w = np.zeros(t)
    for i in range(t):
        a, b, c, d = (rng.standard_normal((n, n)) for _ in range(4))
        P = np.concatenate((a, b, c, d), axis=1)
        Q = np.concatenate((np.concatenate((a, b), axis=1),
                            np.concatenate((c, d), axis=1)), axis=0)
        v[i] = np.trace(np.linalg.matrix_power(P.T @ P, 4))
        w[i] = np.trace(np.linalg.matrix_power(Q.T @ Q, 4))
    return float(np.std(v, ddof=1) / np.mean(v)), float(np.std(w, ddof=1) / np.mean(w))


def rand_mat_mul(n, rng=None):
    rng = _default_rng(rng)
    a = rng.random((n, n))
    b = rng.random((n, n))
    return a @ b
