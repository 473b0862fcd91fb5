"""
Feedforward network built on the scalar autodiff engine.

- NeuralNetwork: fully connected sigmoid MLP trained by gradient descent
- TrainConfig: training options (backward strategy, progress printing)
"""

from .config import TrainConfig
from .network import Neuron, Layer, NeuralNetwork, sigmoid

__all__ = [
    'TrainConfig',
    'Neuron',
    'Layer',
    'NeuralNetwork',
    'sigmoid',
]
