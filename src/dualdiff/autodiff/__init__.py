"""
####################################################
Automatic differentiation (:mod:`dualdiff.autodiff`)
####################################################

.. currentmodule:: dualdiff.autodiff

This module provides forward-mode automatic differentiation.

Differential operators
----------------------

.. autosummary::
    :toctree: generated/

    diff
    deriv
    primitive

Number systems containing infinitesimals
----------------------------------------

.. autosummary::
    :toctree: generated/

    Dual

"""

from .autodiff import deriv, diff, primitive
from .dual import Dual

__all__ = ["deriv", "diff", "primitive", "Dual"]
