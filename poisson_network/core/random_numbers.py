"""
Random number source injected into networks.

Wraps a seeded numpy Generator so that every draw made while building a
network can be reproduced from a single seed.
"""

import numpy as np
from typing import Optional, Union


class RandomNumbers:
    """
    Random source exposing normal, Poisson and uniform draws.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize the random source.

        Args:
            seed: Random seed for reproducible draws (None seeds from OS entropy)
        """
        self.seed = seed
        self.generator = np.random.default_rng(seed)

    def normal(self, mean: float = 0.0, sd: float = 1.0,
               size: Optional[int] = None) -> Union[float, np.ndarray]:
        """
        Draw from a normal distribution.

        Args:
            mean: Mean of the distribution
            sd: Standard deviation of the distribution
            size: Number of samples, or None for a single float

        Returns:
            A float, or an array of `size` samples
        """
        if size is None:
            return float(self.generator.normal(mean, sd))
        return self.generator.normal(mean, sd, size)

    def poisson(self, mean: float = 1.0,
                size: Optional[int] = None) -> Union[int, np.ndarray]:
        """
        Draw from a Poisson distribution.

        Args:
            mean: Expected value (must be non-negative)
            size: Number of samples, or None for a single int

        Returns:
            A non-negative int, or an array of `size` samples
        """
        if size is None:
            return int(self.generator.poisson(mean))
        return self.generator.poisson(mean, size)

    def uniform_double(self, lower: float = 0.0, upper: float = 1.0,
                       size: Optional[int] = None) -> Union[float, np.ndarray]:
        """Draw uniformly from [lower, upper)."""
        if size is None:
            return float(self.generator.uniform(lower, upper))
        return self.generator.uniform(lower, upper, size)

    def __repr__(self) -> str:
        return f"RandomNumbers(seed={self.seed})"
