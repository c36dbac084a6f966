"""
Network analysis functions.

Summary statistics over a Network, computed with numpy on the degree
sequence and with networkx for the structural measures.
"""

import numpy as np
import networkx as nx
from typing import Any, Dict

# ============================================================================
# DEGREES
# ============================================================================

def degree_sequence(network) -> np.ndarray:
    """Degree of every node, in index order"""
    return np.array([network.degree(i) for i in range(network.size())], dtype=int)

def degree_distribution(network) -> np.ndarray:
    """Number of nodes having each degree: result[k] = #nodes of degree k"""
    return np.bincount(degree_sequence(network))

# ============================================================================
# NETWORK ANALYSIS
# ============================================================================

def get_network_info(network) -> Dict[str, Any]:
    """
    Get information about a network.

    Edge and degree statistics cover links between current nodes only;
    links left over from a shrinking `set_values` or `resize` are ignored.
    """
    n_nodes = network.size()
    if n_nodes == 0:
        return {
            "n_nodes": 0,
            "total_edges": 0,
            "density": 0.0,
            "average_degree": 0.0,
            "max_degree": 0,
            "min_degree": 0,
            "mean_value": 0.0,
            "std_value": 0.0,
            "n_components": 0,
            "average_clustering": 0.0,
        }

    G = network.to_networkx()
    degrees = np.array([d for _, d in G.degree()], dtype=int)
    total_edges = G.number_of_edges()
    max_possible_edges = n_nodes * (n_nodes - 1) / 2
    density = total_edges / max_possible_edges if max_possible_edges > 0 else 0.0

    return {
        "n_nodes": n_nodes,
        "total_edges": total_edges,
        "density": density,
        "average_degree": float(np.mean(degrees)),
        "max_degree": int(np.max(degrees)),
        "min_degree": int(np.min(degrees)),
        "mean_value": float(np.mean(network.values)),
        "std_value": float(np.std(network.values)),
        "n_components": nx.number_connected_components(G),
        "average_clustering": nx.average_clustering(G),
    }
