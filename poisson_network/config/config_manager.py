"""
Configuration manager for Poisson network runs.
"""

import json
import logging
from typing import Dict, Any, Optional
from pathlib import Path

from ..network.generator import get_network_params

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Manages the JSON configuration of network runs.

    The file holds three sections: `network` (n_nodes, mean_degree,
    random_seed), `runs` (seeds, progress_bar) and `logging` (level).
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Args:
            config_path: Path to the JSON configuration (default "config.json")
        """
        self.config_path = Path(config_path or "config.json")
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Read the configuration file; its top level must be a JSON object."""
        if not self.config_path.is_file():
            raise FileNotFoundError(f"Network configuration not found: {self.config_path}")

        try:
            with open(self.config_path, 'r') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{self.config_path} is not valid JSON: {e}") from e

        if not isinstance(config, dict):
            raise ValueError(f"{self.config_path} must hold a JSON object, got {type(config).__name__}")
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a value by dotted path, e.g. "network.mean_degree".

        Returns `default` as soon as a section is missing or is not an object.
        """
        section, _, rest = key.partition('.')
        value = self.config.get(section, default)
        while rest:
            if not isinstance(value, dict):
                return default
            section, _, rest = rest.partition('.')
            value = value.get(section, default)
        return value

    def get_network_params(self) -> Dict[str, Any]:
        """
        Get network parameters, filling gaps with the generator defaults.

        Returns:
            Dictionary with n_nodes, mean_degree and random_seed
        """
        defaults = get_network_params()
        return {
            'n_nodes': int(self.get('network.n_nodes', defaults['n_nodes'])),
            'mean_degree': float(self.get('network.mean_degree', defaults['mean_degree'])),
            'random_seed': self.get('network.random_seed', defaults['random_seed']),
        }

    def get_run_params(self) -> Dict[str, Any]:
        """Get batch run parameters."""
        return {
            'seeds': list(self.get('runs.seeds', [])),
            'progress_bar': bool(self.get('runs.progress_bar', False)),
        }

    def get_logging_params(self) -> Dict[str, Any]:
        """Get logging parameters."""
        return {
            'level': str(self.get('logging.level', 'WARNING')),
        }

    def validate_config(self) -> bool:
        """
        Validate configuration.

        Returns:
            True if configuration is valid
        """
        try:
            params = self.get_network_params()
        except (TypeError, ValueError) as e:
            logger.error(f"Invalid network parameters in {self.config_path}: {e}")
            return False

        if params['n_nodes'] < 0:
            logger.error(f"network.n_nodes must be non-negative, got {params['n_nodes']}")
            return False

        if params['mean_degree'] < 0:
            logger.error(f"network.mean_degree must be non-negative, got {params['mean_degree']}")
            return False

        return True
