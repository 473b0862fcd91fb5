# ad/ops/transcendental.py
import numpy as np
from ..core.var import Var
from .arithmetic import _as_var


@np.errstate(all="ignore")
def exp(x):
    x = _as_var(x)
    ex = np.exp(x.node.value)
    return Var.from_op(ex, [(ex, x)], "exp")


@np.errstate(all="ignore")
def log(x):
    x = _as_var(x)
    v = x.node.value
    return Var.from_op(np.log(v), [(1.0 / v, x)], "log")


@np.errstate(all="ignore")
def sqrt(x):
    x = _as_var(x)
    s = np.sqrt(x.node.value)
    return Var.from_op(s, [(0.5 / s, x)], "sqrt")
