"""Network model and generator."""

from .graph_model import Network
from .generator import create_network, get_network_params

__all__ = ["Network", "create_network", "get_network_params"]
