"""
Feedforward Neural Network on scalar Vars

Every weight and bias is a leaf Var. A forward pass wires fresh input leaves
through the layers with the graph-building operators, so the loss is an
ordinary Var whose reverse pass reaches every parameter:

    a_j = sigmoid( sum_i w_ji * x_i + b_j ),   sigmoid(z) = 1 / (1 + e^(0 - z))

    loss = sum_rows sum_outputs (prediction - target)^2

Training is plain gradient descent: value <- value - lr * grad, then grad <- 0.

Usage:
    >>> data = [([0., 0.], [1.]), ([0., 1.], [1.]), ([1., 0.], [1.]), ([1., 1.], [0.])]
    >>> net = NeuralNetwork(2, [3], 1, rng=0)
    >>> losses = net.train(data, iterations=5000, learning_rate=1.0)
    >>> net.predict([1., 1.])
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from ..ad.core.var import Var
from ..ad.core.engine import reverse, STRATEGIES
from ..ad.ops.arithmetic import pow, sum_vars
from .config import TrainConfig

Row = Tuple[Sequence[float], Sequence[float]]
RngLike = Union[None, int, np.random.Generator]


def sigmoid(x: Var) -> Var:
    """Logistic function expressed with the graph operators only."""
    return Var(1.0) / (Var(1.0) + pow(Var(np.e), Var(0.0) - x))


@dataclass
class Neuron:
    """One unit: a weight per input plus a bias, all leaf Vars."""
    weights: List[Var]
    bias: Var

    def __call__(self, inputs: Sequence[Var]) -> Var:
        z = sum_vars(w * x for w, x in zip(self.weights, inputs)) + self.bias
        return sigmoid(z)

    def parameters(self) -> List[Var]:
        return self.weights + [self.bias]


@dataclass
class Layer:
    """A fully connected (non-input) layer."""
    neurons: List[Neuron]

    def __call__(self, inputs: Sequence[Var]) -> List[Var]:
        return [neuron(inputs) for neuron in self.neurons]

    def parameters(self) -> List[Var]:
        return [p for neuron in self.neurons for p in neuron.parameters()]


class NeuralNetwork:
    """
    Multilayer perceptron of shape [n_inputs, *hidden, n_outputs].

    Attributes:
        n_inputs (int): Width of the input vector
        n_outputs (int): Width of the output vector
        layers (List[Layer]): Hidden layers followed by the output layer
    """

    def __init__(self, n_inputs: int, hidden: Sequence[int], n_outputs: int,
                 rng: RngLike = None):
        """
        Initialize weights and biases uniformly in [0, 1).

        Args:
            n_inputs: Number of inputs per row
            hidden: Sizes of the hidden layers (may be empty)
            n_outputs: Number of outputs per row
            rng: numpy Generator, integer seed, or None for fresh entropy
        """
        shape = [n_inputs, *hidden, n_outputs]
        if any(int(n) < 1 for n in shape):
            raise ValueError(f"Layer sizes must be >= 1, got {shape}")

        self.n_inputs = int(n_inputs)
        self.n_outputs = int(n_outputs)
        self.shape = [int(n) for n in shape]
        self.rng = np.random.default_rng(rng)

        self.layers: List[Layer] = []
        for fan_in, width in zip(self.shape[:-1], self.shape[1:]):
            neurons = [
                Neuron(
                    weights=[Var(float(w)) for w in self.rng.random(fan_in)],
                    bias=Var(float(self.rng.random())),
                )
                for _ in range(width)
            ]
            self.layers.append(Layer(neurons))

    def __repr__(self):
        return f"NeuralNetwork(shape={self.shape})"

    def parameters(self) -> List[Var]:
        """All weight and bias leaves, layer by layer."""
        return [p for layer in self.layers for p in layer.parameters()]

    # ------------------------------------------------------------------ #
    # Forward / loss
    # ------------------------------------------------------------------ #
    def forward(self, inputs: Sequence[float]) -> List[Var]:
        """Build the graph for one row and return the output Vars."""
        if len(inputs) != self.n_inputs:
            raise ValueError(
                f"Expected {self.n_inputs} inputs, got {len(inputs)}"
            )
        activations = [Var(float(x)) for x in inputs]
        for layer in self.layers:
            activations = layer(activations)
        return activations

    def predict(self, inputs: Sequence[float]) -> List[float]:
        return [out.value for out in self.forward(inputs)]

    def calc_loss(self, dataset: Sequence[Row]) -> Var:
        """Sum of squared errors over every row and every output."""
        loss = Var(0.0)
        for inputs, targets in dataset:
            if len(targets) != self.n_outputs:
                raise ValueError(
                    f"Expected {self.n_outputs} targets, got {len(targets)}"
                )
            outputs = self.forward(inputs)
            distance = sum_vars(
                pow(pred - Var(float(real)), Var(2.0))
                for pred, real in zip(outputs, targets)
            )
            loss = loss + distance
        return loss

    def score(self, dataset: Sequence[Row]) -> float:
        """1 - sqrt(total squared error); 1.0 is a perfect fit."""
        return 1.0 - float(np.sqrt(self.calc_loss(dataset).value))

    # ------------------------------------------------------------------ #
    # Training
    # ------------------------------------------------------------------ #
    def step(self, learning_rate: float) -> None:
        """Gradient-descent update of every parameter, then reset its adjoint."""
        for p in self.parameters():
            p.set_value(p.value - learning_rate * p.grad)
            p.set_grad(0.0)

    def train(self, dataset: Sequence[Row], iterations: int, learning_rate: float,
              config: Optional[TrainConfig] = None) -> List[float]:
        """
        Run `iterations` steps of full-batch gradient descent.

        Args:
            dataset: Sequence of (inputs, targets) rows
            iterations: Number of updates
            learning_rate: Step size
            config: Training options (uses defaults if None)

        Returns:
            Loss value of every iteration, measured before its update
        """
        config = config or TrainConfig()
        if iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}")
        if config.strategy not in STRATEGIES:
            raise ValueError(f"Unknown backward strategy: {config.strategy!r}")

        if config.verbose:
            print(f"  Network: shape={self.shape}, {len(self.parameters())} parameters")
            print(f"  Training: {iterations} iterations, lr={learning_rate}, "
                  f"strategy={config.strategy}")

        history: List[float] = []
        for i in range(iterations):
            loss = self.calc_loss(dataset)
            reverse(loss, seed=1.0, strategy=config.strategy)
            self.step(learning_rate)
            history.append(loss.value)

            if config.verbose and (i % max(1, config.log_every) == 0 or i == iterations - 1):
                print(f"  iter {i:6d}  loss={loss.value:.6e}")

        return history
