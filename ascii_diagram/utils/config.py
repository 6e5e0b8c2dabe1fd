import os
import yaml
from typing import Dict, Any
from pathlib import Path


class Config:
    """Diagram configuration loaded from YAML, with environment variable support."""

    def __init__(self, config_path: str):
        self.config_path = Path(config_path)
        self.config = self._load_config()
        self._resolve_paths()

    def _load_config(self) -> Dict[str, Any]:
        """Load YAML configuration file."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, 'r') as f:
            config = yaml.safe_load(f)

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ValueError(f"Config file must contain a mapping at the top level: {self.config_path}")
        return config

    def _resolve_paths(self):
        """Expand environment variables in output and logging paths."""
        for section in ['output', 'logging']:
            values = self.config.get(section)
            if not isinstance(values, dict):
                continue
            for key, value in values.items():
                if isinstance(value, str):
                    values[key] = os.path.expandvars(value)

    def get(self, key: str, default=None):
        """Get configuration value by dot-notation key."""
        keys = key.split('.')
        value = self.config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
            if value is None:
                return default
        return value

    def set(self, key: str, value: Any):
        """Set configuration value by dot-notation key."""
        keys = key.split('.')
        config = self.config
        for k in keys[:-1]:
            config = config.setdefault(k, {})
        config[keys[-1]] = value

    def __repr__(self):
        return f"Config({self.config_path})"
