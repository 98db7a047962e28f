"""
Configuration handling for the video trimmer
"""
import os
import yaml
from typing import Dict, Any, Optional


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or parsed."""


class Config:
    """Application configuration: defaults < YAML file < CLI arguments"""

    DEFAULT_CONFIG = {
        'output_dir': None,          # None = next to the input file
        'notes': None,
        'dry_run': False,
        'show_milliseconds': False,
        'export': {
            'size_buffer': 0.1,      # extra share on the estimated output size
            'space_margin': 0.2,     # free space required beyond the estimate
        },
    }

    # Nested sections merged key by key instead of being replaced
    NESTED_KEYS = ('export',)

    def __init__(self, config_file: Optional[str] = None):
        """
        Build the configuration

        Args:
            config_file: Path to a YAML configuration file (optional)
        """
        import copy
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str) -> None:
        """
        Load values from a YAML file

        Args:
            config_file: Path to the configuration file
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Error loading configuration file: {e}")

        if not file_config:
            return
        if not isinstance(file_config, dict):
            raise ConfigError(f"Configuration file must contain a mapping: {config_file}")

        for key, value in file_config.items():
            if key in self.NESTED_KEYS and isinstance(value, dict):
                self.config.setdefault(key, {})
                self._deep_merge(self.config[key], value)
            else:
                self.config[key] = value

    def _deep_merge(self, base: dict, update: dict) -> None:
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Override values with CLI arguments; ``None`` leaves a value untouched

        Args:
            args: Dictionary of CLI arguments
        """
        for key, value in args.items():
            if value is not None:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        return self.config.copy()

    @staticmethod
    def find_default_file(directory: Optional[str] = None) -> Optional[str]:
        """Return ``config.yml`` or ``config.yaml`` from ``directory`` if present"""
        directory = directory or os.getcwd()
        for name in ('config.yml', 'config.yaml'):
            candidate = os.path.join(directory, name)
            if os.path.exists(candidate):
                return candidate
        return None
