"""
Network model: node values plus an undirected link relation.
"""

import logging
import numpy as np
import networkx as nx
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.random_numbers import RandomNumbers

logger = logging.getLogger(__name__)


class Network:
    """
    Undirected network of real-valued nodes.

    Nodes are identified by their index in `values`. Each link {a, b} is
    stored in both directions, so `neighbors(a)` contains b exactly when
    `neighbors(b)` contains a.
    """

    def __init__(self, rng: Optional[RandomNumbers] = None):
        """
        Initialize an empty network.

        Args:
            rng: Random source used by `resize` and `random_connect`
        """
        self.rng = rng if rng is not None else RandomNumbers()
        self.values = np.zeros(0)
        self._links: Dict[int, List[int]] = {}
        self._n_links = 0

    def resize(self, n: int):
        """
        Replace all node values with `n` normal-distributed samples.

        Links are left as they are, including links to nodes that no
        longer exist.
        """
        self.values = np.fromiter((self.rng.normal() for _ in range(n)), dtype=float, count=n)

    def set_values(self, new_values: Sequence[float]) -> int:
        """
        Reset all node values.

        Args:
            new_values: New node values (the network takes their length)

        Returns:
            Number of nodes after the reset
        """
        self.values = np.array(new_values, dtype=float)
        return self.size()

    def add_link(self, a: int, b: int) -> bool:
        """
        Add a bidirectional link between two nodes.

        Args:
            a, b: Indexes of the two nodes

        Returns:
            True if the link was inserted; False for an out-of-range index,
            a self-link or an existing link (nothing is changed then)
        """
        n = self.size()
        if not (0 <= a < n and 0 <= b < n) or a == b:
            return False
        if b in self.neighbors(a):
            return False
        self._links.setdefault(a, []).append(b)
        self._links.setdefault(b, []).append(a)
        self._n_links += 2
        return True

    def random_connect(self, mean_degree: float) -> int:
        """
        Create random links between nodes.

        All previous links are cleared first. Each node in turn draws a
        Poisson-distributed number of new links and attaches them to
        uniformly chosen partners, redrawing a partner until `add_link`
        accepts it.

        Args:
            mean_degree: Mean of the Poisson distribution

        Returns:
            Number of undirected links created
        """
        self._links = {}
        self._n_links = 0
        n = self.size()

        for node in range(n):
            n_new = self.rng.poisson(mean_degree)
            # Poisson draws are non-negative
            n_new = max(n_new, 0)
            if n_new > n - 1:
                n_new = n - 1
            # Links made by earlier nodes use up some of the possible partners
            available = n - 1 - self.degree(node)
            if n_new > available:
                logger.debug(f"Node {node}: drew {n_new} links, only {available} partners left")
                n_new = available

            for _ in range(n_new):
                partner = int(self.rng.uniform_double(0, n))
                while not self.add_link(node, partner):
                    partner = int(self.rng.uniform_double(0, n))

        logger.debug(f"Connected {n} nodes with {self.edge_count} links (mean degree {mean_degree})")
        return self.edge_count

    def size(self) -> int:
        """Number of nodes."""
        return len(self.values)

    def degree(self, n: int) -> int:
        """Number of links of node `n` (0 for a node without links)."""
        return len(self._links.get(n, ()))

    def value(self, n: int) -> float:
        """Value of node `n`; the caller must ensure `n < size()`."""
        return float(self.values[n])

    def sorted_values(self) -> np.ndarray:
        """All node values in descending order."""
        return np.sort(self.values)[::-1].copy()

    def neighbors(self, n: int) -> List[int]:
        """All nodes linked to node `n`, in the order the links were made."""
        return list(self._links.get(n, ()))

    @property
    def links(self) -> List[Tuple[int, int]]:
        """Every link as (a, b) pairs, both directions included."""
        return [(a, b) for a in sorted(self._links) for b in self._links[a]]

    @property
    def edge_count(self) -> int:
        """Number of undirected links."""
        return self._n_links // 2

    def get_adjacency_matrix(self) -> np.ndarray:
        """
        Get the adjacency matrix of the current nodes.

        Returns:
            Symmetric 0/1 matrix of shape (size, size); links to nodes
            beyond the current size are left out
        """
        n = self.size()
        A = np.zeros((n, n))
        for a, b in self.links:
            if a < n and b < n:
                A[a, b] = 1
            else:
                logger.warning(f"Skipping link ({a}, {b}) outside a network of {n} nodes")
        return A

    def to_networkx(self) -> nx.Graph:
        """Build a networkx Graph with node values stored as the `value` attribute."""
        G = nx.Graph()
        G.add_nodes_from((i, {"value": float(v)}) for i, v in enumerate(self.values))
        n = self.size()
        G.add_edges_from((a, b) for a, b in self.links if a < b < n)
        return G

    def __repr__(self) -> str:
        return f"Network(nodes={self.size()}, edges={self.edge_count})"
