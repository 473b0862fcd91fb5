# scalar_autodiff/__init__.py
# Scalar reverse-mode autodiff engine and a small feedforward network on top of it

from .ad import (
    Node,
    Var,
    leaf,
    value_of,
    grad_of,
    set_value,
    set_grad,
    backward,
    backward_topological,
    reverse,
    zero_grad,
    zero_graph,
    add, sub, mul, div, neg, pow, sum_vars,
    exp, log, sqrt,
)
from .nn import NeuralNetwork, TrainConfig, sigmoid

__version__ = "0.1.0"

__all__ = [
    'Node',
    'Var',
    'leaf',
    'value_of',
    'grad_of',
    'set_value',
    'set_grad',
    'backward',
    'backward_topological',
    'reverse',
    'zero_grad',
    'zero_graph',
    'add', 'sub', 'mul', 'div', 'neg', 'pow', 'sum_vars',
    'exp', 'log', 'sqrt',
    'NeuralNetwork',
    'TrainConfig',
    'sigmoid',
]
