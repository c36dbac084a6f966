"""
Runner for building Poisson random networks from a configuration.
"""

import logging
import numpy as np
from typing import Dict, Any, List, Optional
from tqdm import tqdm

from .config.config_manager import ConfigManager
from .core.mathematics import get_network_info, degree_distribution
from .network.generator import create_network, get_network_params

logger = logging.getLogger(__name__)

def _resolve_logging_level(level_str: Optional[str]) -> int:
    if not level_str:
        return logging.WARNING
    mapping = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL,
    }
    return mapping.get(level_str.upper(), logging.WARNING)

def configure_logging(logging_params: Dict[str, Any]) -> None:
    """Configure global logging from the `logging` config section."""
    level = _resolve_logging_level(logging_params.get("level"))
    logging.basicConfig(level=level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    # basicConfig leaves an already configured root logger alone
    logging.getLogger().setLevel(level)

class Runner:
    """Runner that builds networks and summarizes them."""

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        network_params = get_network_params()
        network_params.update(config.get("network", {}))
        self.n_nodes = int(network_params["n_nodes"])
        self.mean_degree = float(network_params["mean_degree"])
        self.random_seed = network_params["random_seed"]

        if self.n_nodes < 0:
            raise ValueError(f"network.n_nodes must be non-negative, got {self.n_nodes}")
        if self.mean_degree < 0:
            raise ValueError(f"network.mean_degree must be non-negative, got {self.mean_degree}")

    def run_experiment(self, random_seed: Optional[int] = None) -> Dict[str, Any]:
        """Build one network and return its summary"""
        seed = self.random_seed if random_seed is None else random_seed
        logger.info(f"Building network: {self.n_nodes} nodes, mean degree {self.mean_degree}, seed {seed}")

        network = create_network(self.n_nodes, self.mean_degree, random_seed=seed)
        info = get_network_info(network)
        logger.info(f"Built {network}")

        return self._make_json_serializable({
            "random_seed": seed,
            "mean_degree": self.mean_degree,
            "network_info": info,
            "degree_distribution": degree_distribution(network),
            "sorted_values": network.sorted_values(),
        })

    def run_batch(self, seeds: List[int], progress_bar: bool = False) -> List[Dict[str, Any]]:
        """Build one network per seed; failed runs are recorded as error entries"""
        results = []
        for seed in tqdm(seeds, desc="Networks", disable=not progress_bar):
            try:
                results.append(self.run_experiment(seed))
            except Exception as e:
                logger.error(f"Network with seed {seed} failed: {e}")
                results.append({"error": str(e), "config": {"random_seed": seed}})

        logger.info(f"Completed {len(results)} networks")
        return results

    def _make_json_serializable(self, obj):
        """Convert numpy types to Python types for JSON serialization"""
        if isinstance(obj, dict):
            return {key: self._make_json_serializable(value) for key, value in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [self._make_json_serializable(item) for item in obj]
        elif isinstance(obj, np.ndarray):
            return obj.tolist()
        elif isinstance(obj, (np.integer, np.floating, np.bool_)):
            return obj.item()
        else:
            return obj

def run(config: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Run every configured network: one per seed in `runs.seeds`, else a single one."""
    runner = Runner(config)
    runs = config.get("runs", {})
    seeds = runs.get("seeds") or [runner.random_seed]
    return runner.run_batch(seeds, progress_bar=runs.get("progress_bar", False))

def run_from_file(config_path: str = "config.json") -> List[Dict[str, Any]]:
    """Load, validate and run a JSON configuration file."""
    config_manager = ConfigManager(config_path)
    if not config_manager.validate_config():
        raise ValueError(f"Invalid configuration: {config_path}")

    config = {
        "network": config_manager.get_network_params(),
        "runs": config_manager.get_run_params(),
        "logging": config_manager.get_logging_params(),
    }
    configure_logging(config["logging"])
    return run(config)
