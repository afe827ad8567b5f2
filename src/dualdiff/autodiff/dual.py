import dataclasses
import math
import numbers
import operator
from collections.abc import Callable
from typing import Any, Self, final

import numpy as np

from dualdiff.typing import Real, Scalar


def _ieee(ufunc: np.ufunc, *args: float) -> float:
    # Python floats raise on 1/0, log(0) and overflowing powers; NumPy does not.
    with np.errstate(all="ignore"):
        return float(ufunc(*args))


def _isreal(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _tofloat(value: Any) -> float:
    try:
        return float(value)
    except OverflowError:
        # Integers and fractions beyond the double range saturate to infinity.
        return math.inf if value > 0 else -math.inf


@final
@dataclasses.dataclass(frozen=True, slots=True)
class Dual(Scalar):
    r"""Dual number carrying a value and its derivative.

    Parameters
    ----------
    value : float
    derivative : float, default=0.0

    Attributes
    ----------
    value : float
        Primal value.
    derivative : float
        Derivative of `value` with respect to the seeded variable.

    Warnings
    --------
    Users cannot define classes derived from this.

    Notes
    -----
    Instances of this class behave like elements of the ring
    :math:`\mathbb{R}[\varepsilon]/(\varepsilon^2)`. Every binary operator accepts
    real numbers on either side; they are treated as constants, i.e. lifted to duals
    whose derivative is zero.

    Degenerate inputs never raise. Division by zero, logarithms of non-positive
    numbers, and overflows yield infinities or NaN as IEEE 754 prescribes.

    Examples
    --------
    >>> x = Dual.variable(3.0)
    >>> 2 * x + 1
    Dual(value=7.0, derivative=2.0)
    >>> print(x * x)
    9.0 + 6.0ε
    >>> Dual.variable(0.0).ln()
    Dual(value=-inf, derivative=inf)
    """

    value: float
    derivative: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "value", _tofloat(self.value))
        object.__setattr__(self, "derivative", _tofloat(self.derivative))

    @classmethod
    def constant(cls, value: Real) -> Self:
        """Return a dual whose derivative is zero."""
        return cls(value, 0.0)

    @classmethod
    def variable(cls, value: Real) -> Self:
        """Return a dual seeded as the independent variable, i.e. with derivative one."""
        return cls(value, 1.0)

    @classmethod
    def _lift(cls, value: object) -> Self | None:
        if isinstance(value, cls):
            return value

        if _isreal(value):
            return cls(_tofloat(value), 0.0)  # type: ignore

        return None

    def __str__(self) -> str:
        return f"{self.value} + {self.derivative}ε"

    def __add__(self, rhs: Self | Real) -> Self:
        if (rhs := self._lift(rhs)) is None:  # type: ignore
            return NotImplemented

        return self.__class__(self.value + rhs.value, self.derivative + rhs.derivative)

    def __sub__(self, rhs: Self | Real) -> Self:
        if (rhs := self._lift(rhs)) is None:  # type: ignore
            return NotImplemented

        return self.__class__(self.value - rhs.value, self.derivative - rhs.derivative)

    def __mul__(self, rhs: Self | Real) -> Self:
        if (rhs := self._lift(rhs)) is None:  # type: ignore
            return NotImplemented

        derivative = self.derivative * rhs.value + self.value * rhs.derivative
        return self.__class__(self.value * rhs.value, derivative)

    def __truediv__(self, rhs: Self | Real) -> Self:
        if (rhs := self._lift(rhs)) is None:  # type: ignore
            return NotImplemented

        s = rhs.value * rhs.value
        numer = self.derivative * rhs.value - self.value * rhs.derivative
        value = _ieee(np.divide, self.value, rhs.value)
        return self.__class__(value, _ieee(np.divide, numer, s))

    def __pow__(self, rhs: Self | Real) -> Self:
        if isinstance(rhs, Dual):
            if rhs.derivative == 0.0:
                return self.__pow__(rhs.value)

            if self.derivative == 0.0:
                return rhs.__rpow__(self.value)

            value = _ieee(np.power, self.value, rhs.value)
            head = rhs.value * _ieee(np.power, self.value, rhs.value - 1)
            tail = _ieee(np.log, self.value) * value
            derivative = head * self.derivative + tail * rhs.derivative
            return self.__class__(value, derivative)

        if not _isreal(rhs):
            return NotImplemented

        if rhs == 0:
            return self.__class__(1.0, 0.0)

        exponent = _tofloat(rhs)
        value = _ieee(np.power, self.value, exponent)

        if self.derivative == 0.0:
            return self.__class__(value, 0.0)

        slope = exponent * _ieee(np.power, self.value, exponent - 1)
        return self.__class__(value, slope * self.derivative)

    def __neg__(self) -> Self:
        return self.__class__(-self.value, -self.derivative)

    def __pos__(self) -> Self:
        return self.__class__(self.value, self.derivative)

    def __abs__(self) -> Self:
        sign = float(np.sign(self.value))
        return self.__class__(abs(self.value), sign * self.derivative)

    def __radd__(self, lhs: Real) -> Self:
        if (lhs := self._lift(lhs)) is None:  # type: ignore
            return NotImplemented

        return lhs.__add__(self)

    def __rsub__(self, lhs: Real) -> Self:
        if (lhs := self._lift(lhs)) is None:  # type: ignore
            return NotImplemented

        return lhs.__sub__(self)

    def __rmul__(self, lhs: Real) -> Self:
        if (lhs := self._lift(lhs)) is None:  # type: ignore
            return NotImplemented

        return lhs.__mul__(self)

    def __rtruediv__(self, lhs: Real) -> Self:
        if (lhs := self._lift(lhs)) is None:  # type: ignore
            return NotImplemented

        return lhs.__truediv__(self)

    def __rpow__(self, lhs: Real) -> Self:
        if not _isreal(lhs):
            return NotImplemented

        base = _tofloat(lhs)
        value = _ieee(np.power, base, self.value)

        if self.derivative == 0.0:
            return self.__class__(value, 0.0)

        slope = _ieee(np.log, base) * value
        return self.__class__(value, slope * self.derivative)

    def sin(self) -> Self:
        """Sine."""
        value = _ieee(np.sin, self.value)
        return self.__class__(value, _ieee(np.cos, self.value) * self.derivative)

    def cos(self) -> Self:
        """Cosine."""
        value = _ieee(np.cos, self.value)
        return self.__class__(value, -_ieee(np.sin, self.value) * self.derivative)

    def tan(self) -> Self:
        """Tangent."""
        c = _ieee(np.cos, self.value)
        value = _ieee(np.tan, self.value)
        return self.__class__(value, _ieee(np.divide, self.derivative, c * c))

    def exp(self) -> Self:
        """Exponential."""
        value = _ieee(np.exp, self.value)
        return self.__class__(value, value * self.derivative)

    def ln(self) -> Self:
        """Natural logarithm."""
        value = _ieee(np.log, self.value)
        return self.__class__(value, _ieee(np.divide, self.derivative, self.value))

    def sqrt(self) -> Self:
        """Square root."""
        value = _ieee(np.sqrt, self.value)
        return self.__class__(value, _ieee(np.divide, self.derivative, 2 * value))

    log = ln

    def __array_ufunc__(self, ufunc: np.ufunc, method: str, *inputs, **kwargs) -> Any:
        if method != "__call__" or kwargs:
            return NotImplemented

        if (unary := _UNARY.get(ufunc)) is not None:
            return unary(inputs[0])

        if (binary := _BINARY.get(ufunc)) is None:
            return NotImplemented

        lhs, rhs = (self._lift(x) for x in inputs)

        if lhs is None or rhs is None:
            return NotImplemented

        return binary(lhs, rhs)

    def __init_subclass__(cls, **kwargs):
        raise RuntimeError("subclassing is forbidden")


_UNARY: dict[np.ufunc, Callable[[Dual], Dual]] = {
    np.negative: Dual.__neg__,
    np.positive: Dual.__pos__,
    np.absolute: Dual.__abs__,
    np.sin: Dual.sin,
    np.cos: Dual.cos,
    np.tan: Dual.tan,
    np.exp: Dual.exp,
    np.log: Dual.ln,
    np.sqrt: Dual.sqrt,
}

_BINARY: dict[np.ufunc, Callable[[Dual, Dual], Dual]] = {
    np.add: operator.add,
    np.subtract: operator.sub,
    np.multiply: operator.mul,
    np.true_divide: operator.truediv,
    np.power: operator.pow,
}
