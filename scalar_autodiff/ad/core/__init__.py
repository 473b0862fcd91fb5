# ad/core/__init__.py

"""
Core public API for the autodiff engine.

Exports:
    Var                  : Handle to a shared scalar node; builds the graph via operators.
    Node                 : The scalar node itself (value, grad, frozen parents).
    leaf                 : Create a leaf handle (input, parameter, literal).
    backward             : Reverse pass, one visit per root-to-node path.
    backward_topological : Reverse pass, one visit per node (topological sweep).
    reverse              : Dispatch between the two strategies by name.
    zero_grad            : Reset the adjoints of the given handles.
    zero_graph           : Reset every adjoint reachable from an output.
    grad / grads / grads_list / value : convenience drivers.
"""

from .node import Node
from .var import Var, leaf, value_of, grad_of, set_value, set_grad
from .engine import backward, backward_topological, reverse, zero_grad, zero_graph
from .seeds import grad, grads, grads_list, value

__all__ = [
    "Node",
    "Var",
    "leaf",
    "value_of",
    "grad_of",
    "set_value",
    "set_grad",
    "backward",
    "backward_topological",
    "reverse",
    "zero_grad",
    "zero_graph",
    "grad",
    "grads",
    "grads_list",
    "value",
]
