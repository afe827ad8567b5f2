"""
#################################################
Mathematical functions (:mod:`dualdiff.function`)
#################################################

.. currentmodule:: dualdiff.function

This module provides elementary functions accepting both real numbers and
:class:`~dualdiff.autodiff.Dual`. For real numbers, they follow IEEE 754 rather than
raising exceptions, e.g. ``log(0.0)`` is ``-inf``.

Trigonometric functions
=======================

.. autosummary::
    :toctree: generated/

    cos
    sin
    tan

Exponents and logarithmic functions
===================================

.. autosummary::
    :toctree: generated/

    exp
    ln
    log
    sqrt

"""

import numbers
from typing import Any, overload

import numpy as np

from dualdiff.autodiff.dual import Dual, _tofloat


def _ufunc(ufunc: np.ufunc, x: Any) -> Any:
    with np.errstate(all="ignore"):
        return ufunc(x)


@overload
def cos(x: Dual, /) -> Dual: ...


@overload
def cos(x: float | int, /) -> float: ...


@overload
def cos(x: Any, /) -> Any: ...


def cos(x, /):
    """Cosine.

    Examples
    --------
    >>> cos(0.0)
    1.0
    >>> cos(Dual.variable(0.0))
    Dual(value=1.0, derivative=-0.0)
    """
    match x:
        case Dual():
            return x.cos()

        case np.generic() | np.ndarray():
            return _ufunc(np.cos, x)

        case numbers.Real() if not isinstance(x, bool):
            return float(_ufunc(np.cos, _tofloat(x)))

        case _:
            raise TypeError


@overload
def sin(x: Dual, /) -> Dual: ...


@overload
def sin(x: float | int, /) -> float: ...


@overload
def sin(x: Any, /) -> Any: ...


def sin(x, /):
    """Sine.

    Examples
    --------
    >>> sin(Dual.variable(0.0))
    Dual(value=0.0, derivative=1.0)
    """
    match x:
        case Dual():
            return x.sin()

        case np.generic() | np.ndarray():
            return _ufunc(np.sin, x)

        case numbers.Real() if not isinstance(x, bool):
            return float(_ufunc(np.sin, _tofloat(x)))

        case _:
            raise TypeError


@overload
def tan(x: Dual, /) -> Dual: ...


@overload
def tan(x: float | int, /) -> float: ...


@overload
def tan(x: Any, /) -> Any: ...


def tan(x, /):
    """Tangent.

    Examples
    --------
    >>> tan(Dual.variable(0.0))
    Dual(value=0.0, derivative=1.0)
    """
    match x:
        case Dual():
            return x.tan()

        case np.generic() | np.ndarray():
            return _ufunc(np.tan, x)

        case numbers.Real() if not isinstance(x, bool):
            return float(_ufunc(np.tan, _tofloat(x)))

        case _:
            raise TypeError


@overload
def exp(x: Dual, /) -> Dual: ...


@overload
def exp(x: float | int, /) -> float: ...


@overload
def exp(x: Any, /) -> Any: ...


def exp(x, /):
    """Exponential.

    Examples
    --------
    >>> exp(0)
    1.0
    >>> exp(1000.0)
    inf
    """
    match x:
        case Dual():
            return x.exp()

        case np.generic() | np.ndarray():
            return _ufunc(np.exp, x)

        case numbers.Real() if not isinstance(x, bool):
            return float(_ufunc(np.exp, _tofloat(x)))

        case _:
            raise TypeError


@overload
def log(x: Dual, /) -> Dual: ...


@overload
def log(x: float | int, /) -> float: ...


@overload
def log(x: Any, /) -> Any: ...


def log(x, /):
    """Natural logarithm.

    Examples
    --------
    >>> log(1)
    0.0
    >>> log(0.0)
    -inf
    >>> log(Dual.variable(2.0)).derivative
    0.5
    """
    match x:
        case Dual():
            return x.ln()

        case np.generic() | np.ndarray():
            return _ufunc(np.log, x)

        case numbers.Real() if not isinstance(x, bool):
            return float(_ufunc(np.log, _tofloat(x)))

        case _:
            raise TypeError


@overload
def sqrt(x: Dual, /) -> Dual: ...


@overload
def sqrt(x: float | int, /) -> float: ...


@overload
def sqrt(x: Any, /) -> Any: ...


def sqrt(x, /):
    """Square root.

    Examples
    --------
    >>> sqrt(Dual.variable(4.0))
    Dual(value=2.0, derivative=0.25)
    """
    match x:
        case Dual():
            return x.sqrt()

        case np.generic() | np.ndarray():
            return _ufunc(np.sqrt, x)

        case numbers.Real() if not isinstance(x, bool):
            return float(_ufunc(np.sqrt, _tofloat(x)))

        case _:
            raise TypeError


ln = log
