"""This module defines the coefficient domain for sparse polynomials.

Coefficients are Python integers modelling fixed-width signed integers.
Integer-like values such as NumPy integer scalars are converted to int.

The bit length of the coefficients is set by the environment variable
SPARSEPOLY_COEFFBITS (see --coeff-bits). As Python integers do not wrap
around, coefficients out of range for this bit length are kept exact, but
a warning is logged for each operation producing them. Bit length 0 means
unbounded coefficients, without any warnings.
"""

import os
import logging
import functools
import numpy as np
import gmpy2


def is_coefficient(a):
    """Test if a can be used as a polynomial coefficient."""
    return isinstance(a, (int, np.integer))


def to_coefficient(a):
    """Convert integer-like a to a Python int."""
    if not is_coefficient(a):
        raise TypeError(f'integer coefficient expected, got {type(a).__name__}')

    return int(a)


def tdiv(a, b):
    """Return quotient of a divided by b, rounded toward zero.

    Unlike a // b, which rounds toward minus infinity, for instance,
    tdiv(-7, 2) == -3 and tdiv(7, -2) == -3.
    """
    return int(gmpy2.t_div(a, b))


def bit_length():
    """Return bit length of coefficients currently in effect (0 if unbounded)."""
    return int(os.getenv('SPARSEPOLY_COEFFBITS', '64'))


@functools.cache
def bounds(l):
    """Return least and greatest signed integers of bit length l."""
    if l not in (8, 16, 32, 64):
        raise ValueError('coefficient bit length must be 8, 16, 32, or 64')

    info = np.iinfo(f'int{l}')
    return int(info.min), int(info.max)


def check_range(coefficients, op):
    """Log a warning if any of the given coefficients exceeds the bit length.

    Returns True if all coefficients are within range.
    """
    l = bit_length()
    if not l:
        return True

    lo, hi = bounds(l)
    for c in coefficients:
        if not lo <= c <= hi:
            logging.warning(f'Coefficient {c} in {op} exceeds {l}-bit range [{lo}, {hi}]')
            return False

    return True
