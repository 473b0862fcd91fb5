# ad/ops/__init__.py

from . import arithmetic
from . import transcendental

# Convenience re-exports so users can do: from scalar_autodiff.ad.ops import mul, exp, ...
from .arithmetic import add, sub, mul, div, neg, pow, sum_vars
from .transcendental import exp, log, sqrt

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow", "sum_vars",
    "exp", "log", "sqrt",
]
