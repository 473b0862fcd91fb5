# ad/core/var.py
from __future__ import annotations
import numbers
import numpy as np
from typing import Any, Optional, Sequence, Tuple

from .node import Node


class Var:
    """
    Handle to a scalar node for reverse-mode Automatic Differentiation (AD).

    A Var is the only way user code touches a Node. Several handles may share
    one node (see `clone`); reads and writes through any of them go to the
    same `value`/`grad`. Equality and hashing follow the node, not the value.

    Attributes
    ----------
    value : float
        Forward (primal) value of the underlying node.
    grad  : float
        Reverse-mode adjoint accumulated on the underlying node.
    name  : Optional[str]
        Optional debug/pretty-print name (per handle, not per node).
    """

    __slots__ = ("_node", "name")

    def __init__(self, val: Any, *, name: Optional[str] = None):
        # Type check: only allow real numeric scalars
        if isinstance(val, (bool, np.bool_)) or not isinstance(val, numbers.Real):
            raise TypeError(
                f"Var only accepts real numeric scalars (int, float, numpy real), "
                f"but got {type(val)}"
            )
        self._node = Node(value=np.float64(val))
        self.name = name

    @classmethod
    def from_node(cls, node: Node, *, name: Optional[str] = None) -> "Var":
        """Wrap an existing node in a new handle (no copy of the node)."""
        var = cls.__new__(cls)
        var._node = node
        var.name = name
        return var

    @classmethod
    def from_op(cls, value, parents: Sequence[Tuple[Any, "Var"]], op_tag: str) -> "Var":
        """Build the handle of an internal node; `parents` is a list of (local_partial, operand)."""
        node = Node(
            value=np.float64(value),
            parents=tuple((np.float64(c), p) for c, p in parents),
            op_tag=op_tag,
        )
        return cls.from_node(node)

    # ------------------------------------------------------------------ #
    # Node access
    # ------------------------------------------------------------------ #
    @property
    def node(self) -> Node:
        return self._node

    @property
    def value(self) -> float:
        return float(self._node.value)

    @value.setter
    def value(self, v: float):
        self.set_value(v)

    @property
    def grad(self) -> float:
        return float(self._node.grad)

    @grad.setter
    def grad(self, g: float):
        self.set_grad(g)

    def set_value(self, v: float) -> None:
        self._node.value = np.float64(v)

    def set_grad(self, g: float) -> None:
        self._node.grad = np.float64(g)

    @property
    def parents(self) -> Tuple[Tuple[np.float64, "Var"], ...]:
        return self._node.parents

    @property
    def op_tag(self) -> str:
        return self._node.op_tag

    @property
    def is_leaf(self) -> bool:
        return self._node.is_leaf

    def clone(self) -> "Var":
        """New handle onto the same node."""
        return Var.from_node(self._node, name=self.name)

    def backward(self, seed: float = 1.0) -> None:
        from .engine import backward
        backward(self, seed)

    # ------------------------------------------------------------------ #
    # Identity
    # ------------------------------------------------------------------ #
    def __eq__(self, other):
        if not isinstance(other, Var):
            return NotImplemented
        return self._node is other._node

    def __ne__(self, other):
        if not isinstance(other, Var):
            return NotImplemented
        return self._node is not other._node

    def __hash__(self):
        return id(self._node)

    def __repr__(self):
        # Short label: "leaf" for inputs/parameters, op tag otherwise
        return (f"Var({self.value!r}, grad={self.grad!r}, "
                f"{self.op_tag}, name={self.name!r})")

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import pow
        return pow(other, self)


def leaf(val: Any, *, name: Optional[str] = None) -> Var:
    """Create a leaf handle (input, parameter or literal constant)."""
    return Var(val, name=name)


def value_of(v: Var) -> float:
    return v.value


def grad_of(v: Var) -> float:
    return v.grad


def set_value(v: Var, val: float) -> None:
    v.set_value(val)


def set_grad(v: Var, g: float) -> None:
    v.set_grad(g)
