# ad/__init__.py
# Scalar reverse-mode automatic differentiation

from .core.node import Node
from .core.var import Var, leaf, value_of, grad_of, set_value, set_grad
from .core.engine import (
    backward,
    backward_topological,
    reverse,
    zero_grad,
    zero_graph,
)
from .core.seeds import grad, grads, grads_list, value
from .core.graph_utils import (
    reachable_nodes,
    count_paths,
    get_graph_stats,
    print_graph_summary,
)
from .ops import add, sub, mul, div, neg, pow, sum_vars, exp, log, sqrt
from .gradcheck import GradCheckResult, numerical_grads, check_grads

__all__ = [
    # Core
    'Node',
    'Var',
    'leaf',
    'value_of',
    'grad_of',
    'set_value',
    'set_grad',
    # Engine
    'backward',
    'backward_topological',
    'reverse',
    'zero_grad',
    'zero_graph',
    # Drivers
    'grad',
    'grads',
    'grads_list',
    'value',
    # Graph inspection
    'reachable_nodes',
    'count_paths',
    'get_graph_stats',
    'print_graph_summary',
    # Operators
    'add', 'sub', 'mul', 'div', 'neg', 'pow', 'sum_vars',
    'exp', 'log', 'sqrt',
    # Finite differences
    'GradCheckResult',
    'numerical_grads',
    'check_grads',
]
