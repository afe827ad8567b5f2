import logging

from . import function
from .autodiff import Dual, deriv, diff, primitive

__all__ = [
    "Dual",
    "deriv",
    "diff",
    "primitive",
    "function",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
