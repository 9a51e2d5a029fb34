"""
load the config from config.yaml and .env
"""

import copy
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from dotenv import load_dotenv


DEFAULTS: Dict[str, Any] = {
    'environment': 'production',
    'api': {
        'base_url': None,
        'origin': 'http://localhost:8000',
        'development_url': None,
        'neos_path': '/api/neos/',
        'timeout_ms': 30000,
    },
    'logging': {
        'level': 'INFO',
        'json': True,
    },
}

# Environment variable mapping
ENV_MAPPINGS = {
    'NEO_API_BASE_URL': ('api', 'base_url'),
    'NEO_APP_ORIGIN': ('api', 'origin'),
    'NEO_DEV_API_URL': ('api', 'development_url'),
    'NEO_API_NEOS_PATH': ('api', 'neos_path'),
    'NEO_API_TIMEOUT_MS': ('api', 'timeout_ms'),
    'APP_ENV': ('environment',),
    'LOG_LEVEL': ('logging', 'level'),
    'LOG_JSON': ('logging', 'json'),
}

# Keys that must stay strings even when they look like numbers or booleans
STRING_KEYS = {
    ('api', 'base_url'),
    ('api', 'origin'),
    ('api', 'development_url'),
    ('api', 'neos_path'),
    ('environment',),
    ('logging', 'level'),
}


class Settings:
    """Configuration loaded from an optional config.yaml and environment variables."""

    def __init__(self, config_path: Optional[str] = None, environ: Optional[Dict[str, str]] = None):
        """Initialize configuration loader.

        Args:
            config_path: Path to config.yaml file. If None, looks for config.yaml
                        in the current working directory. A missing file is
                        allowed; defaults and environment overrides still apply.
            environ: Mapping to read overrides from. Defaults to os.environ.
        """
        if config_path is None:
            config_path = Path.cwd() / "config.yaml"

        self.config_path = Path(config_path)
        self._environ = os.environ if environ is None else environ
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file and override with environment variables."""
        config = copy.deepcopy(DEFAULTS)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    file_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in configuration file: {e}")
            if not isinstance(file_config, dict):
                raise ValueError(f"Configuration file must contain a mapping: {self.config_path}")
            _merge(config, file_config)

        return self._apply_env_overrides(config)

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        for env_var, config_path in ENV_MAPPINGS.items():
            env_value = self._environ.get(env_var)
            if env_value is None:
                continue

            # Navigate to the nested config location
            current = config
            for key in config_path[:-1]:
                if not isinstance(current.get(key), dict):
                    current[key] = {}
                current = current[key]

            final_key = config_path[-1]
            if config_path in STRING_KEYS:
                # An empty variable means "not configured"
                current[final_key] = env_value or None
            else:
                current[final_key] = self._convert_env_value(env_value)

        return config

    def _convert_env_value(self, value: str):
        """Convert environment variable string to appropriate Python type."""
        # Boolean conversion
        if value.lower() in ('true', 'false'):
            return value.lower() == 'true'

        # Integer conversion
        try:
            return int(value)
        except ValueError:
            pass

        # Float conversion
        try:
            return float(value)
        except ValueError:
            pass

        # Return as string
        return value

    def get(self, *keys, default=None):
        """Get configuration value using dot notation.

        Args:
            *keys: Configuration keys (e.g., 'api', 'timeout_ms')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        current = self._config
        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current

    @property
    def api(self) -> Dict[str, Any]:
        """Get data API configuration."""
        return self.get('api', default={})

    @property
    def logging(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return self.get('logging', default={})

    @property
    def environment(self) -> str:
        return self.get('environment', default='production') or 'production'

    @property
    def base_url_override(self) -> Optional[str]:
        return self.api.get('base_url') or None

    @property
    def origin(self) -> str:
        return self.api.get('origin') or ''

    @property
    def development_url(self) -> Optional[str]:
        return self.api.get('development_url') or None

    @property
    def neos_path(self) -> str:
        return self.api.get('neos_path') or DEFAULTS['api']['neos_path']

    @property
    def timeout_ms(self) -> int:
        value = self.api.get('timeout_ms', DEFAULTS['api']['timeout_ms'])
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"api.timeout_ms must be a positive integer, got {value!r}")
        return value


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(base.get(key), dict):
            # A section left empty in YAML keeps its defaults
            if value is None:
                continue
            if not isinstance(value, dict):
                raise ValueError(f"Configuration section '{key}' must be a mapping, got {value!r}")
            _merge(base[key], value)
        else:
            base[key] = value


def load_settings(config_path: Optional[str] = None, dotenv: bool = True) -> Settings:
    """Load .env into the process environment, then build Settings."""
    if dotenv:
        load_dotenv()
    return Settings(config_path=config_path)
