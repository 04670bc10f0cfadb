"""This module supports arithmetic with sparse polynomials over the integers.

Polynomials are represented as dicts mapping exponents to coefficients.
The polynomial a_n X^n + ... + a_1 X + a_0 corresponds to the dict
{n: a_n, ..., 1: a_1, 0: a_0} with all zero coefficients left out.
The keys are in descending order, hence the leading term comes first.
The zero polynomial is represented by {0: 0}, the only dict with a zero
coefficient. All operations return dicts of this form, for which
the function _clean() is applied to any intermediate result.

The operators +,-,*,% are overloaded, where * and + also accept integers as
either operand. Multiplication of polynomials is done by the function
multiply() of module sparsepoly.parallel, using worker threads for
larger polynomials.

The remainder a % b is computed by long division, dividing the leading
coefficients using integer division rounded toward zero. Hence, the result
is only the true remainder if these divisions are exact, e.g., if b is monic.
Once the leading coefficient of the remainder is smaller in absolute value
than the leading coefficient of b, the division stops.
"""

import logging
import operator
import collections.abc
from sparsepoly import coefficients
from sparsepoly import parallel

X = 'x'  # symbol for indeterminate in polynomials


class Polynomial:
    """Sparse polynomials with integer coefficients.

    Invariant: attribute 'value' is a dict with exponents in descending order
    and nonzero coefficients, or 'value' is {0: 0} for the zero polynomial.
    """

    __slots__ = 'value'

    __array_ufunc__ = None  # NB: NumPy scalars defer to reflected operators, e.g., np.int64(3) * p

    def __init__(self, value=0, check=True):
        """Initialize polynomial to given value (zero polynomial, by default).

        The value can be a polynomial, an integer, a dict mapping exponents to
        coefficients, or an iterable of (exponent, coefficient) pairs in any order.
        Coefficients for the same exponent are added up.
        """
        if check:
            value = self._intern(value)
        self.value = value

    @classmethod
    def _intern(cls, a):
        # convert a to cls internal format, if possible
        a = cls._coerce(a)
        if a is NotImplemented:
            raise TypeError('polynomial with integer coefficients expected')

        return a

    @classmethod
    def _coerce(cls, a):
        if isinstance(a, Polynomial):
            return a.value  # NB: values are never modified in-place

        if coefficients.is_coefficient(a):
            return cls._clean({0: int(a)})

        if isinstance(a, dict):
            return cls._from_terms(a.items())

        if isinstance(a, (str, bytes)):
            return NotImplemented

        if isinstance(a, collections.abc.Iterable):
            return cls._from_terms(a)

        return NotImplemented

    @classmethod
    def _from_terms(cls, terms):
        d = {}
        for t in terms:
            try:
                e, c = t
            except (TypeError, ValueError) as exc:
                raise TypeError('(exponent, coefficient) pairs expected') from exc

            e = operator.index(e)
            if e < 0:
                raise ValueError('negative exponent not allowed')

            d[e] = d.get(e, 0) + coefficients.to_coefficient(c)
        return cls._clean(d)

    @staticmethod
    def _clean(a, op='construction'):
        c = {e: a[e] for e in sorted(a, reverse=True) if a[e]}
        if not c:
            return {0: 0}

        coefficients.check_range(c.values(), op)
        return c

    @staticmethod
    def _is_zero(a):
        return a == {0: 0}

    @staticmethod
    def _deg(a):
        return next(iter(a))

    @staticmethod
    def _lc(a):
        return next(iter(a.values()))

    @staticmethod
    def _canonical(a):
        return [(e, c) for e, c in a.items() if c] or [(0, 0)]

    @staticmethod
    def _to_terms(a, x=X):
        if a == {0: 0}:
            return '0'

        s = ''
        for e, c in a.items():
            s += '-' if c < 0 else '+'
            c = abs(c)
            if e == 0:
                s += f'{c}'  # x^0 = 1
            else:
                if c != 1:
                    s += f'{c}'
                s += x if e == 1 else f'{x}^{e}'  # x^1 = x
        return s[1:] if s[0] == '+' else s

    def __getitem__(self, key):  # NB: no set_item to prevent mutability
        if not isinstance(key, int):
            raise IndexError('use int for indexing polynomials')

        if key < 0:
            raise IndexError('negative index not allowed for polynomials')

        return self.value.get(key, 0)

    def __iter__(self):
        yield from self._canonical(self.value)

    def __len__(self):
        return len(self.value)

    def __call__(self, x):
        """Evaluate polynomial at given integer x."""
        x = coefficients.to_coefficient(x)
        y = 0
        d = None
        for e, c in self.value.items():
            if d is not None:
                y *= x**(d - e)
            y += c
            d = e
        return y * x**d

    @classmethod
    def _neg(cls, a):
        return cls._clean({e: -c for e, c in a.items()}, 'negation')

    @classmethod
    def _add(cls, a, b):
        c = dict(a)
        for e, b_e in b.items():
            c[e] = c.get(e, 0) + b_e
        return cls._clean(c, 'addition')

    @classmethod
    def _sub(cls, a, b):
        c = dict(a)
        for e, b_e in b.items():
            c[e] = c.get(e, 0) - b_e
        return cls._clean(c, 'subtraction')

    @classmethod
    def _scalar_mul(cls, a, n):
        return cls._clean({e: c * n for e, c in a.items()}, 'scalar multiplication')

    @classmethod
    def _mul(cls, a, b):
        if cls._is_zero(a) or cls._is_zero(b):
            return {0: 0}

        return cls._clean(parallel.multiply(a.items(), b.items()), 'multiplication')

    @classmethod
    def _mod(cls, a, b):
        if cls._is_zero(b):
            raise ZeroDivisionError('division by zero polynomial')

        n = cls._deg(b)
        b1 = cls._lc(b)
        r = a
        while not cls._is_zero(r) and cls._deg(r) >= n:
            m = cls._deg(r)
            q = coefficients.tdiv(cls._lc(r), b1)
            if not q:
                break  # |lc(r)| < |lc(b)|, leading term cannot be reduced

            logging.debug(f'Reduce degree {m} remainder by {q}{X}^{m - n} times divisor')
            r = cls._sub(r, cls._mul({m - n: q}, b))
        return r

    @classmethod
    def to_terms(cls, a, x=X):
        """Convert polynomial a to a string with sum of powers of x."""
        a = cls._intern(a)
        return cls._to_terms(a, x)

    @classmethod
    def deg(cls, a):
        """Degree of polynomial a (0 if a is zero polynomial)."""
        a = cls._intern(a)
        return cls._deg(a)

    def degree(self):
        """Degree of polynomial (0 for zero polynomial)."""
        return self._deg(self.value)

    def leading_coefficient(self):
        """Coefficient of the leading term (0 for zero polynomial)."""
        return self._lc(self.value)

    def is_zero(self):
        return self._is_zero(self.value)

    def canonical_form(self):
        """List of (exponent, coefficient) pairs in descending order of exponents.

        Zero coefficients are left out, except for the zero polynomial, which gives [(0, 0)].
        """
        return self._canonical(self.value)

    def __neg__(self):
        cls = type(self)
        return cls(cls._neg(self.value), check=False)

    def __pos__(self):
        return self

    @classmethod
    def add(cls, a, b):
        """Add polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._add(a, b), check=False)

    def __add__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._add(self.value, other), check=False)

    __radd__ = __add__

    @classmethod
    def sub(cls, a, b):
        """Subtract polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._sub(a, b), check=False)

    def __sub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(self.value, other), check=False)

    def __rsub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(other, self.value), check=False)

    @classmethod
    def mul(cls, a, b):
        """Multiply polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._mul(a, b), check=False)

    def __mul__(self, other):
        cls = type(self)
        if coefficients.is_coefficient(other):
            return cls(cls._scalar_mul(self.value, int(other)), check=False)

        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mul(self.value, other), check=False)

    __rmul__ = __mul__

    @classmethod
    def mod(cls, a, b):
        """Reduce polynomial a modulo polynomial b, for nonzero b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._mod(a, b), check=False)

    def __mod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mod(self.value, other), check=False)

    def __rmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mod(other, self.value), check=False)

    def __repr__(self):
        return self._to_terms(self.value)

    def __eq__(self, other):
        """Equality test."""
        try:
            other = self._coerce(other)
        except (TypeError, ValueError):
            other = NotImplemented  # e.g., list of integers
        if other is NotImplemented:
            return False

        return self.value == other

    def __ne__(self, other):
        """Negated equality test."""
        return not self == other

    def __hash__(self):
        """Make polynomials hashable (e.g., for use as dict keys)."""
        return hash((type(self).__name__, tuple(self.value.items())))

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return not self._is_zero(self.value)
