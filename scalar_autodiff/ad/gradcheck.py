# ad/gradcheck.py
"""
Finite-difference gradient checks.

Compares the adjoints produced by a reverse pass against a forward-difference
approximation from `scipy.optimize.approx_fprime`:

    g_i  ~  (f(x + eps*e_i) - f(x)) / eps

A component passes when |g_analytic - g_numeric| <= tol * max(1, |g_numeric|).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Sequence

import numpy as np
from scipy.optimize import approx_fprime

from .core.var import Var
from .core.seeds import grads_list, value

DEFAULT_EPSILON = float(np.sqrt(np.finfo(float).eps))


@dataclass
class GradCheckResult:
    """Outcome of `check_grads`."""
    analytic: np.ndarray
    numerical: np.ndarray
    max_abs_error: float
    passed: bool


def _scalar_fn(f: Callable[[List[Var]], Var]) -> Callable[[np.ndarray], float]:
    """Turn a Var-level function into a plain float function of a numpy vector."""
    def fn(x: np.ndarray) -> float:
        return float(value(f([Var(float(xi)) for xi in x])))
    return fn


def numerical_grads(f: Callable[[List[Var]], Var],
                    x0: Sequence[float],
                    epsilon: float = DEFAULT_EPSILON) -> np.ndarray:
    """Forward-difference gradient of f at x0."""
    xk = np.asarray(x0, dtype=np.float64)
    return approx_fprime(xk, _scalar_fn(f), epsilon)


def check_grads(f: Callable[[List[Var]], Var],
                x0: Sequence[float],
                epsilon: float = DEFAULT_EPSILON,
                tol: float = 1e-4,
                strategy: str = "paths") -> GradCheckResult:
    """
    Run one reverse pass of f at x0 and compare it with `numerical_grads`.

    Args:
        f: function taking a list of Vars and returning a scalar Var
        x0: point of evaluation
        epsilon: finite-difference step
        tol: tolerance, absolute below 1 and relative above
        strategy: reverse pass used for the analytic side

    Returns:
        GradCheckResult
    """
    analytic = np.asarray(grads_list(f, x0, strategy=strategy), dtype=np.float64)
    numerical = numerical_grads(f, x0, epsilon)
    abs_err = np.abs(analytic - numerical)
    scale = np.maximum(1.0, np.abs(numerical))
    return GradCheckResult(
        analytic=analytic,
        numerical=numerical,
        max_abs_error=float(np.max(abs_err)) if abs_err.size else 0.0,
        passed=bool(np.all(abs_err <= tol * scale)),
    )
