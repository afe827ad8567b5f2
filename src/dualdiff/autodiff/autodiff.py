import functools
import logging
from collections.abc import Callable
from typing import Any

from dualdiff.autodiff.dual import Dual, _isreal, _tofloat
from dualdiff.typing import Real

logger = logging.getLogger(__name__)


def diff(fun: Callable[[Dual], Dual | Real], point: Real) -> tuple[float, float]:
    """Evaluate the univariate scalar-valued function and its derivative at a point.

    Parameters
    ----------
    fun : Callable
        Differentiated function. It takes one :class:`Dual` and returns a
        :class:`Dual`, built from the operators and functions that duals support. A
        plain real number is also accepted as a return value and is regarded as a
        constant.
    point : Real
        Point at which `fun` is differentiated.

    Returns
    -------
    value : float
        ``fun(point)``.
    derivative : float
        Derivative of `fun` at `point`.

    Raises
    ------
    TypeError
        If `point` is not a real number, or `fun` returns neither a dual nor a real
        number.

    Warnings
    --------
    `fun` must not contain conditional branches depending on its argument, and must
    not introduce other seeded variables.

    Notes
    -----
    Numerical exceptions are never raised; infinities and NaN propagate through the
    result instead.

    Examples
    --------
    >>> diff(lambda x: 2.0 * x + 1.0, 3.0)
    (7.0, 2.0)
    >>> diff(lambda x: x * x, -1.5)
    (2.25, -3.0)
    >>> diff(lambda x: x.ln(), 0.0)
    (-inf, inf)
    """
    if not _isreal(point):
        raise TypeError(f"cannot differentiate at {type(point).__name__}")

    result = fun(Dual.variable(point))

    if isinstance(result, Dual):
        value, derivative = result.value, result.derivative
    elif _isreal(result):
        value, derivative = _tofloat(result), 0.0
    else:
        raise TypeError(f"function returned {type(result).__name__}")

    logger.debug("diff at %r: value=%r, derivative=%r", point, value, derivative)
    return value, derivative


def deriv(fun: Callable[[Dual], Dual | Real]) -> Callable[[Real], float]:
    """Return a function that evaluates the derivative of the univariate scalar-valued
    function.

    Parameters
    ----------
    fun : Callable
        Differentiated function.

    Returns
    -------
    Callable
        Derivative of `fun`.

    See Also
    --------
    diff

    Examples
    --------
    >>> from dualdiff import function as ddf
    >>> df = deriv(lambda x: ddf.exp(2 * x))
    >>> df(0.0)
    2.0
    """

    @functools.wraps(fun)
    def result(point: Real) -> float:
        return diff(fun, point)[1]

    return result


def primitive(
    derivative: Callable[[float], Any],
) -> Callable[[Callable[[float], Any]], Callable[[Any], Any]]:
    """Return a decorator that makes a real function accept duals.

    Parameters
    ----------
    derivative : Callable
        Derivative of the decorated function, evaluated on real numbers.

    Returns
    -------
    Callable
        Decorator. The decorated function still works on real numbers; given a dual
        ``a``, it returns ``Dual(fun(a.value), derivative(a.value) * a.derivative)``.

    Examples
    --------
    >>> @primitive(lambda x: 3 * x**2)
    ... def cube(x):
    ...     return x**3
    >>> diff(lambda x: cube(x) + 1, 2.0)
    (9.0, 12.0)
    """

    def decorator(fun: Callable[[float], Any]) -> Callable[[Any], Any]:
        @functools.wraps(fun)
        def wrapper(x, /):
            if not isinstance(x, Dual):
                return fun(x)

            return Dual(fun(x.value), derivative(x.value) * x.derivative)

        return wrapper

    return decorator
