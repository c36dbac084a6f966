"""
Network generator for Poisson random networks.
"""

from typing import Dict, Any, Optional, Sequence
from ..core.random_numbers import RandomNumbers
from .graph_model import Network

def create_network(n_nodes: int, mean_degree: float, random_seed: Optional[int] = None,
                   values: Optional[Sequence[float]] = None) -> Network:
    """
    Create a randomly connected Network.

    Args:
        n_nodes: Number of nodes
        mean_degree: Mean of the Poisson degree distribution
        random_seed: Random seed for reproducibility
        values: Node values replacing the normal-distributed ones

    Returns:
        Network instance with its links already drawn
    """
    if n_nodes < 0:
        raise ValueError(f"n_nodes must be non-negative, got {n_nodes}")
    if mean_degree < 0:
        raise ValueError(f"mean_degree must be non-negative, got {mean_degree}")

    network = Network(RandomNumbers(random_seed))
    network.resize(n_nodes)
    if values is not None:
        network.set_values(values)
    network.random_connect(mean_degree)
    return network

def get_network_params(n_nodes: int = 100) -> Dict[str, Any]:
    """Get default parameters for a network of `n_nodes` nodes"""
    return {"n_nodes": n_nodes, "mean_degree": 4.0, "random_seed": None}
