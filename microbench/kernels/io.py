# microbench/kernels/io.py
#
# Buffered text output. Lines go to the null device by default so the
# benchmark measures formatting and buffering, not the disk.

import os


def _open_null():
    return open(os.devnull, "w")


def printfd(n, opener=None):
    """
    Writes `n` lines of the form "i i+1" (i from 1 to n) to the stream
    returned by `opener`, then flushes and closes it.

    Returns:
        int: The number of lines written.
    """
    opener = opener if opener is not None else _open_null
    with opener() as f:
        for i in range(1, n + 1):
            f.write("{:d} {:d}\n".format(i, i + 1))
        f.flush()
    return n
