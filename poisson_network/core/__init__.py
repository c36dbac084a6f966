"""
Random source and analysis functions for Poisson networks.
"""

from .random_numbers import RandomNumbers
from .mathematics import (
    degree_sequence,
    degree_distribution,
    get_network_info
)

__all__ = [
    "RandomNumbers",
    "degree_sequence",
    "degree_distribution",
    "get_network_info"
]
