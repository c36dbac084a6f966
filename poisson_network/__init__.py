"""
Poisson random networks: real-valued nodes joined by undirected links.
"""

from .core.random_numbers import RandomNumbers
from .network.graph_model import Network
from .network.generator import create_network
from .runner import Runner, run, run_from_file

__version__ = "0.1.0"

__all__ = [
    "RandomNumbers",
    "Network",
    "create_network",
    "Runner",
    "run",
    "run_from_file"
]
