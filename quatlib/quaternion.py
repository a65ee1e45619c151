# -*- coding: utf-8 -*-
"""
author: John Bass
email: john.bobzwik@gmail.com
license: MIT
Please feel free to use and modify this, but keep the above information. Thanks!
"""

import logging
import math
from numbers import Real

import numpy as np

from quatlib import config

logger = logging.getLogger(__name__)


class DegenerateQuaternionError(ZeroDivisionError):
    """Raised in strict mode when dividing by the all-zero quaternion."""


def checkDegenerate(components, operation):
    # All-zero quaternion: either raise (strict) or let IEEE inf/nan through
    if any(c != 0.0 for c in components):
        return
    if config.strictDegenerate:
        raise DegenerateQuaternionError("{} of a zero quaternion".format(operation))
    logger.debug("%s of a zero quaternion, result is not finite", operation)


def ieeeDivide(num, den):
    # Python floats raise on x/0, numpy float64 gives inf/nan
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return float(np.float64(num) / np.float64(den))


def roundHalfAway(x):
    if not math.isfinite(x):
        return x
    t = math.trunc(x)
    if abs(x - t) >= 0.5:
        t += 1 if x > 0 else -1
    return math.copysign(float(t), x)


def formatComponent(x, sign=False):
    # Shortest positional form, no exponent, no trailing ".0"
    if math.isnan(x):
        return "NaN"
    return np.format_float_positional(x, trim='-', sign=sign)


class Quaternion:
    """
    Quaternion qr + qi*i + qj*j + qk*k with i^2 = j^2 = k^2 = ijk = -1.

    Values are immutable, every operation returns a new Quaternion.
    """
    __slots__ = ('_qr', '_qi', '_qj', '_qk')
    # numpy scalars defer to __rmul__ / __rtruediv__
    __array_ufunc__ = None

    def __init__(self, qr, qi, qj, qk):
        for c in (qr, qi, qj, qk):
            if not isinstance(c, Real):
                raise TypeError("Quaternion components must be real numbers, got {!r}".format(c))
        object.__setattr__(self, '_qr', float(qr))
        object.__setattr__(self, '_qi', float(qi))
        object.__setattr__(self, '_qj', float(qj))
        object.__setattr__(self, '_qk', float(qk))

    def __setattr__(self, name, value):
        raise AttributeError("Quaternion is immutable")

    def __delattr__(self, name):
        raise AttributeError("Quaternion is immutable")

    def __reduce__(self):
        return (Quaternion, (self._qr, self._qi, self._qj, self._qk))

    @classmethod
    def identity(cls):
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, value):
        value = np.asarray(value, dtype=np.float64).ravel()
        if value.shape != (4,):
            raise ValueError("Expected 4 components, got {}".format(value.size))
        return cls(*value)

    @property
    def qr(self):
        return self._qr

    @property
    def qi(self):
        return self._qi

    @property
    def qj(self):
        return self._qj

    @property
    def qk(self):
        return self._qk

    @property
    def q(self):
        return np.array([self._qr, self._qi, self._qj, self._qk])

    def real(self):
        return self._qr

    def imaginary(self):
        return (self._qi, self._qj, self._qk)

    def square_norm(self):
        return self._qr * self._qr + self._qi * self._qi + self._qj * self._qj + self._qk * self._qk

    def norm(self):
        return float(np.sqrt(self.square_norm()))

    def normalized(self):
        """
        Divide every component by the norm.

        A zero quaternion gives NaN components, or raises
        DegenerateQuaternionError when config.strictDegenerate is set.
        """
        checkDegenerate(self, "normalization")
        norm = self.norm()
        return Quaternion(
            ieeeDivide(self._qr, norm),
            ieeeDivide(self._qi, norm),
            ieeeDivide(self._qj, norm),
            ieeeDivide(self._qk, norm),
        )

    def conjugate(self):
        return Quaternion(self._qr, -self._qi, -self._qj, -self._qk)

    def inverse(self):
        """
        Conjugate scaled by 1/square_norm, so that q * q.inverse() ~ (1, 0, 0, 0).

        For a zero quaternion the scale is inf and every component is 0*inf = NaN.
        """
        square_norm = self.square_norm()
        checkDegenerate(self, "inverse")
        q_conjugate = self.conjugate()
        inverse_scalar = ieeeDivide(1.0, square_norm)
        return q_conjugate * inverse_scalar

    def round(self, decimals):
        # Half away from zero, unlike the builtin round()
        with np.errstate(over='ignore'):
            factor = float(np.power(10.0, decimals))
        return Quaternion(*(roundHalfAway(c * factor) / factor for c in self))

    def __round__(self, ndigits=None):
        return self.round(0 if ndigits is None else ndigits)

    def isclose(self, other, tol=None):
        if tol is None:
            tol = config.DEFAULT_TOLERANCE
        return all(abs(a - b) <= tol for a, b in zip(self, other))

    def __iter__(self):
        return iter((self._qr, self._qi, self._qj, self._qk))

    def __add__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(
            self._qr + other._qr,
            self._qi + other._qi,
            self._qj + other._qj,
            self._qk + other._qk,
        )

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            # Hamilton product, self on the left
            qr = self._qr * other._qr - self._qi * other._qi - self._qj * other._qj - self._qk * other._qk
            qi = self._qr * other._qi + self._qi * other._qr + self._qj * other._qk - self._qk * other._qj
            qj = self._qr * other._qj - self._qi * other._qk + self._qj * other._qr + self._qk * other._qi
            qk = self._qr * other._qk + self._qi * other._qj - self._qj * other._qi + self._qk * other._qr
            return Quaternion(qr, qi, qj, qk)
        if isinstance(other, Real):
            p = float(other)
            return Quaternion(self._qr * p, self._qi * p, self._qj * p, self._qk * p)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __rtruediv__(self, other):
        """
        scalar / q, taken component by component:
        (p/qr, -p/qi, -p/qj, -p/qk).

        This is not p * q.inverse(). A zero component gives inf or nan in its slot.
        """
        if not isinstance(other, Real):
            return NotImplemented
        checkDegenerate(self, "division")
        p = float(other)
        return Quaternion(
            ieeeDivide(p, self._qr),
            ieeeDivide(-p, self._qi),
            ieeeDivide(-p, self._qj),
            ieeeDivide(-p, self._qk),
        )

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return (self._qr == other._qr and self._qi == other._qi
                and self._qj == other._qj and self._qk == other._qk)

    def __hash__(self):
        return hash((self._qr, self._qi, self._qj, self._qk))

    def __str__(self):
        return "{}{}i{}j{}k".format(
            formatComponent(self._qr),
            formatComponent(self._qi, sign=True),
            formatComponent(self._qj, sign=True),
            formatComponent(self._qk, sign=True),
        )

    def __repr__(self):
        return "Quaternion({!r}, {!r}, {!r}, {!r})".format(self._qr, self._qi, self._qj, self._qk)
