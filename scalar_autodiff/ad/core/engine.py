# ad/core/engine.py
from __future__ import annotations
import numpy as np
from typing import Dict, Iterable, List

from .node import Node
from .var import Var

STRATEGIES = ("paths", "topological")


def zero_grad(handles: Iterable[Var]):
    """Set the adjoint of every given handle's node to zero."""
    for v in handles:
        v.set_grad(0.0)


def zero_graph(output: Var):
    """
    Set all adjoints reachable from `output` (itself included) to zero.
    Shared nodes are zeroed once.
    """
    for node in topological_nodes(output):
        node.grad = np.float64(0.0)


@np.errstate(all="ignore")
def backward(output: Var, seed: float = 1.0):
    """
    Run the reverse pass from `output`, one visit per root-to-node path.

    For each visit:  node.grad += contribution, then every
    (local_partial, parent) receives contribution * local_partial.

    Notes:
        - Not memoized. A node reached along k paths is visited k times and its
          adjoint is the sum of the k contributions, so cost grows with the
          number of paths, not the number of nodes.
        - Adjoints are never cleared here; a second call accumulates on top of
          the first. See `zero_grad` / `zero_graph`.
        - Explicit stack in the same pre-order as the recursive definition.
    """
    stack = [(output.node, np.float64(seed))]
    while stack:
        node, contribution = stack.pop()
        node.grad = node.grad + contribution
        for local_partial, parent in reversed(node.parents):
            stack.append((parent.node, contribution * local_partial))


@np.errstate(all="ignore")
def backward_topological(output: Var, seed: float = 1.0):
    """
    Single-pass reverse mode: sweep the reachable nodes in reverse topological
    order, propagate:  p.adj += y.adj * (d y/d p)  once per edge, then add each
    node's total adjoint to its `grad`.

    On a zeroed graph this gives the same gradients as `backward` in time
    linear in the graph size.
    """
    order = topological_nodes(output)
    adj: Dict[int, np.float64] = {id(output.node): np.float64(seed)}
    for node in reversed(order):
        y_adj = adj.get(id(node))
        if y_adj is None:
            continue  # nothing to propagate
        for local_partial, parent in node.parents:
            key = id(parent.node)
            adj[key] = adj.get(key, np.float64(0.0)) + y_adj * local_partial
    for node in order:
        if id(node) in adj:
            node.grad = node.grad + adj[id(node)]


def reverse(output: Var, seed: float = 1.0, strategy: str = "paths"):
    """Dispatch to `backward` ("paths") or `backward_topological` ("topological")."""
    if strategy == "paths":
        backward(output, seed)
    elif strategy == "topological":
        backward_topological(output, seed)
    else:
        raise ValueError(f"Unknown backward strategy: {strategy!r} (expected one of {STRATEGIES})")


def topological_nodes(output: Var) -> List[Node]:
    """
    Distinct nodes reachable from `output`, operands before results
    (so `output.node` is last).
    """
    order: List[Node] = []
    seen = set()
    stack = [(output.node, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            order.append(node)
            continue
        if id(node) in seen:
            continue
        seen.add(id(node))
        stack.append((node, True))
        for _, parent in reversed(node.parents):
            if id(parent.node) not in seen:
                stack.append((parent.node, False))
    return order
