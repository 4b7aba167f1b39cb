# microbench/kernels/__init__.py
#
# Expose every benchmarked kernel at the subpackage namespace.

from .scalar import (MANDEL_EXPECTED, PI_SUM_EXPECTED, fib, hex_round_trip,
                     is_sorted, mandel, mandel_perf, parse_int, pi_sum,
                     pi_sum_old, qsort_iterative, qsort_recursive, to_hex)
from .numeric import mandel_perf_vec, pi_sum_vec, rand_mat_mul, rand_mat_stat
from .io import printfd
