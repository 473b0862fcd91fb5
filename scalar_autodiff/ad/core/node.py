# ad/core/node.py
from dataclasses import dataclass, field
from typing import Any, Tuple   # typing gives us generic container types for annotations

import numpy as np

_STRUCTURAL = ("parents", "op_tag")

@dataclass(eq=False)
class Node:
    """
    One scalar node of the computation graph.

    Attributes
    ----------
    value  : np.float64
        Forward (primal) value. Overwritten in place only for parameter leaves.
    grad   : np.float64
        Accumulated adjoint d(output)/d(this node). Starts at 0.
    parents: Tuple[Tuple[np.float64, Any], ...]
        (local_partial, parent_var) pairs:
          - local_partial : d(value)/d(parent value), evaluated when the node
            was built and never re-evaluated afterwards.
          - parent_var    : the Var handle of the operand.
        Empty for leaves.
    op_tag : str
        Debug tag (e.g. "add", "mul", "leaf").
    """
    value: np.float64
    grad: np.float64 = field(default_factory=lambda: np.float64(0.0))
    parents: Tuple[Tuple[np.float64, Any], ...] = ()
    op_tag: str = "leaf"

    def __post_init__(self):
        # a list handed in by a caller must not stay aliased
        object.__setattr__(self, "parents", tuple(self.parents))
        object.__setattr__(self, "_sealed", True)

    def __setattr__(self, name, val):
        # graph structure is fixed once built; only value/grad change
        if (name in _STRUCTURAL or name == "_sealed") and self.__dict__.get("_sealed", False):
            raise AttributeError(f"Node.{name} cannot be changed after construction")
        object.__setattr__(self, name, val)

    def __delattr__(self, name):
        if name in _STRUCTURAL or name == "_sealed":
            raise AttributeError(f"Node.{name} cannot be deleted")
        object.__delattr__(self, name)

    @property
    def is_leaf(self) -> bool:
        return not self.parents
