"""
Training configuration for the feedforward network.
"""

from dataclasses import dataclass


@dataclass
class TrainConfig:
    """Configuration for NeuralNetwork.train."""
    # Reverse pass
    strategy: str = 'paths'  # 'paths' (one visit per path), 'topological'

    # Logging
    verbose: bool = False
    log_every: int = 1000  # iterations between progress lines when verbose
