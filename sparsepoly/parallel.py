"""This module multiplies sparse polynomials using worker threads.

The terms of both polynomials are given as sequences of (exponent, coefficient)
pairs. The terms of the left operand are split into contiguous chunks, and each
chunk is multiplied with all terms of the right operand by a separate worker
thread. Every worker accumulates its products in a private dict, mapping
exponents to coefficients, such that the workers share no mutable state.
Once all workers are done, their dicts are summed in the calling thread.

Since integer addition is associative and commutative, the result does not
depend on the number of workers or the order in which these complete.

The maximum number of workers and the minimum number of coefficient products
before workers are used at all are set by the environment variables
SPARSEPOLY_MAXWORKERS and SPARSEPOLY_THRESHOLD (see --workers and
--parallel-threshold).
"""

import os
import logging
import concurrent.futures


def chunks(n, w):
    """Split range(n) into at most w contiguous chunks, returned as (start, stop) pairs.

    All chunks have size ceil(n/w), except possibly for the last chunk, which may be shorter.
    """
    if n <= 0:
        return []

    k = -(-n // max(w, 1))  # ceil(n/w)
    return [(i, min(i + k, n)) for i in range(0, n, k)]


def convolve(a, b, start=0, stop=None):
    """Multiply terms a[start:stop] with all terms of b.

    Return dict mapping exponents to (summed) coefficients, possibly zero.
    """
    if stop is None:
        stop = len(a)
    c = {}
    for i in range(start, stop):
        e_i, a_i = a[i]
        for e_j, b_j in b:
            e = e_i + e_j
            c[e] = c.get(e, 0) + a_i * b_j
    return c


def merge(partials):
    """Sum the dicts in partials exponent-wise into a new dict."""
    c = {}
    for d in partials:
        for e, c_e in d.items():
            c[e] = c.get(e, 0) + c_e
    return c


def multiply(a, b, max_workers=None, threshold=None):
    """Multiply terms a with terms b, using up to max_workers threads.

    Worker threads are used only if the number of coefficient products is at
    least threshold. Defaults for max_workers and threshold are taken from the
    environment.

    Return dict mapping exponents to coefficients, possibly including zeros.
    """
    if max_workers is None:
        max_workers = int(os.getenv('SPARSEPOLY_MAXWORKERS', '1'))
    if threshold is None:
        threshold = int(os.getenv('SPARSEPOLY_THRESHOLD', '1024'))
    a = list(a)
    b = list(b)
    W = min(max_workers, len(a))
    if W <= 1 or len(a) * len(b) < threshold:
        return convolve(a, b)

    ranges = chunks(len(a), W)
    logging.debug(f'Multiply {len(a)} by {len(b)} terms using {len(ranges)} workers')
    with concurrent.futures.ThreadPoolExecutor(max_workers=W) as executor:
        tasks = [executor.submit(convolve, a, b, i, j) for i, j in ranges]
    # NB: leaving the with-block waits for all tasks; result() reraises worker exceptions
    return merge(task.result() for task in tasks)
