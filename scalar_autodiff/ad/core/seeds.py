# ad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph. Every driver below builds fresh leaves, so no
# adjoint from an earlier call can leak into the result.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

from .var import Var
from .engine import reverse


def value(x: Any) -> Any:
    """Return the numeric value of a Var; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Var) else x


def _ensure_var(v: Any, *, name: str) -> Var:
    """Wrap a plain value as a Var leaf if needed; otherwise return the Var itself."""
    return v if isinstance(v, Var) else Var(v, name=name)


def _run(y: Any, strategy: str) -> None:
    # constant output: nothing depends on the inputs
    if isinstance(y, Var):
        reverse(y, seed=1.0, strategy=strategy)


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Var], Var], x0: float, *, strategy: str = "paths") -> float:
    """
    Derivative of a scalar function y=f(x) at x0 (single input).
    """
    x = _ensure_var(x0, name="x")
    _run(f(x), strategy)
    return x.grad


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Var]], Var],
          inputs: Dict[str, float], *, strategy: str = "paths") -> Dict[str, float]:
    """
    Gradient of y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all dy/dvar simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Var} and returning a scalar Var
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`
    """
    vars_ad: Dict[str, Var] = {k: _ensure_var(v, name=k) for k, v in inputs.items()}
    _run(f(vars_ad), strategy)
    return {k: vars_ad[k].grad for k in inputs.keys()}


def grads_list(f: Callable[[List[Var]], Var],
               x0_list: Iterable[float], *, strategy: str = "paths") -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Var] = [_ensure_var(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    _run(f(xs), strategy)
    return [x.grad for x in xs]
