"""
###############################
Typing (:mod:`dualdiff.typing`)
###############################

This module provides type definitions commonly used between modules.

.. autoclass:: Scalar
    :show-inheritance:
    :no-members:

.. data:: Real

    Plain real numbers accepted wherever a constant operand is allowed.

"""

from abc import abstractmethod
from numbers import Real as _RealABC
from typing import Protocol, Self

import numpy as np

type Real = int | float | np.floating | _RealABC


class Scalar(Protocol):
    """Protocol that ensures scalar-like behavior.

    Objects implementing this protocol must have four arithmetic operations, powers,
    and the elementary functions defined, and four arithmetic operations must be
    compatible with real numbers.
    """

    __slots__ = ()

    @abstractmethod
    def __add__(self, rhs: Self | Real) -> Self: ...

    @abstractmethod
    def __sub__(self, rhs: Self | Real) -> Self: ...

    @abstractmethod
    def __mul__(self, rhs: Self | Real) -> Self: ...

    @abstractmethod
    def __truediv__(self, rhs: Self | Real) -> Self: ...

    @abstractmethod
    def __pow__(self, rhs: Self | Real) -> Self: ...

    @abstractmethod
    def __radd__(self, lhs: Real) -> Self: ...

    @abstractmethod
    def __rsub__(self, lhs: Real) -> Self: ...

    @abstractmethod
    def __rmul__(self, lhs: Real) -> Self: ...

    @abstractmethod
    def __rtruediv__(self, lhs: Real) -> Self: ...

    @abstractmethod
    def __neg__(self) -> Self: ...

    @abstractmethod
    def __pos__(self) -> Self: ...

    @abstractmethod
    def sin(self) -> Self: ...

    @abstractmethod
    def cos(self) -> Self: ...

    @abstractmethod
    def tan(self) -> Self: ...

    @abstractmethod
    def exp(self) -> Self: ...

    @abstractmethod
    def ln(self) -> Self: ...
