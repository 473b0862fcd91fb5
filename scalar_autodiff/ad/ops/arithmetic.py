# ad/ops/arithmetic.py
import builtins
import numpy as np
from ..core.var import Var


def _as_var(x):
    """Ensure x is a Var; otherwise wrap it as a constant leaf."""
    return x if isinstance(x, Var) else Var(x)


@np.errstate(all="ignore")
def _binary(x, y, f, dfdx, dfdy, tag):
    """
    Generic binary primitive:
      - computes out.value = f(x.value, y.value)
      - records the local partials (d out/d x, d out/d y) at current values
    IEEE inf/nan results are kept as they are.
    """
    x = _as_var(x)
    y = _as_var(y)
    a, b = x.node.value, y.node.value
    return Var.from_op(f(a, b), [(dfdx(a, b), x), (dfdy(a, b), y)], tag)


def add(x, y): return _binary(x, y, lambda a,b:a+b, lambda a,b:1.0, lambda a,b:1.0,           "add")
def sub(x, y): return _binary(x, y, lambda a,b:a-b, lambda a,b:1.0, lambda a,b:-1.0,          "sub")
def mul(x, y): return _binary(x, y, lambda a,b:a*b, lambda a,b:b,   lambda a,b:a,             "mul")
def div(x, y): return _binary(x, y, lambda a,b:a/b, lambda a,b:1.0/b, lambda a,b:-a/np.square(b), "div")


def pow(x, y):
    """
    Power:
      out.value = x ** y

    Local partials:
      d out/d x = y * x^(y-1)
      d out/d y = x^y * log(x)   (nan / -inf for x <= 0; not guarded)
    """
    return _binary(
        x, y,
        lambda a, b: np.power(a, b),
        lambda a, b: b * np.power(a, b - 1.0),
        lambda a, b: np.power(a, b) * np.log(a),
        "pow",
    )


@np.errstate(all="ignore")
def neg(x):
    """Unary negation: out.value = -x.value, local partial -1."""
    x = _as_var(x)
    return Var.from_op(-x.node.value, [(-1.0, x)], "neg")


def sum_vars(xs, start=0.0):
    """Left fold of `add` over xs, starting from a constant leaf."""
    return builtins.sum(xs, _as_var(start))
