#!/usr/bin/env python3
"""
Configuration Management

Loads and manages resolver configuration from ssm_resolver_config.yml files.

Configuration sources (in order of precedence):
1. Config file (ssm_resolver_config.yml) - organizational defaults
2. Code defaults - minimal fallbacks

Note: AWS credentials are never read from this file. boto3 resolves them
through its usual chain (environment, shared credentials, instance role).
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ssm_param_resolver.shared.utils import get_logger

logger = get_logger(__name__)

CONFIG_FILE_STEM = "ssm_resolver_config"


class Config:
    """
    Resolver Configuration Manager

    Loads configuration from ssm_resolver_config.yml files.
    Singleton pattern ensures consistent config across application.
    """

    _instance: Optional["Config"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        """Singleton pattern - only one Config instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._load_config()
        return cls._instance

    def _load_config(self):
        """Load configuration from ssm_resolver_config.yml file."""
        # Start with defaults
        self._config = self._get_defaults()
        self.config_file = None

        config_file = self._find_config_file()
        if config_file and config_file.exists():
            file_config = self._load_yaml_config(config_file)
            self._merge_config(self._config, file_config)
            self.config_file = config_file

    def _get_defaults(self) -> Dict[str, Any]:
        """Get minimal code defaults as fallback."""
        return {
            "aws": {
                "region": None,  # Falls back to AWS_REGION / AWS_DEFAULT_REGION
                "endpoint_url": None,
                "profile": None,
            },
            "resolution": {
                "batch_size": 10,  # GetParameters accepts at most 10 names per call
                "resolve_secure_strings": False,
                "tolerate_invalid_parameters": False,
            },
            "logging": {"level": "WARNING", "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
        }

    def _find_config_file(self) -> Optional[Path]:
        """
        Find ssm_resolver_config.yml in:
        1. Current directory
        2. Parent directories (up to 3 levels)
        3. User home directory
        """
        current = Path.cwd()
        for _ in range(4):
            for ext in ["yml", "yaml"]:
                config_path = current / f"{CONFIG_FILE_STEM}.{ext}"
                if config_path.exists():
                    return config_path

                config_path = current / f".{CONFIG_FILE_STEM}.{ext}"
                if config_path.exists():
                    return config_path

            if current.parent == current:
                break
            current = current.parent

        for ext in ["yml", "yaml"]:
            home_config = Path.home() / f".{CONFIG_FILE_STEM}.{ext}"
            if home_config.exists():
                return home_config

        return None

    def _load_yaml_config(self, config_file: Path) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
            if not isinstance(config, dict):
                logger.warning(f"Ignoring config file {config_file}: top level must be a mapping")
                return {}
            logger.debug(f"Loaded config from {config_file}")
            return config
        except (OSError, yaml.YAMLError) as e:
            # Log warning but don't fail
            logger.warning(f"Could not load config file {config_file}: {e}")
            return {}

    def _merge_config(self, base: Dict, override: Dict):
        """Recursively merge override config into base config."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get config value using dot notation.

        Args:
            key_path: Dot-separated path (e.g., 'aws.region')
            default: Default value if key not found

        Returns:
            Configuration value or default

        Examples:
            >>> config = Config()
            >>> config.get('resolution.batch_size')
            10
            >>> config.get('aws.region', 'us-east-1')
            'us-east-1'
        """
        keys = key_path.split(".")
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return default if value is None else value

    def get_batch_size(self) -> int:
        """Get the maximum number of names sent per GetParameters call."""
        return int(self.get("resolution.batch_size", 10))

    def resolve_secure_strings(self) -> bool:
        """Check if SecureString parameters are revealed by default."""
        return bool(self.get("resolution.resolve_secure_strings", False))

    def tolerate_invalid_parameters(self) -> bool:
        """Check if names the store reports as invalid are left unresolved instead of failing."""
        return bool(self.get("resolution.tolerate_invalid_parameters", False))

    def get_log_level(self) -> str:
        return self.get("logging.level", "WARNING")

    def get_log_format(self) -> str:
        return self.get("logging.format")

    def reload(self):
        """Reload configuration (useful for testing)."""
        self._load_config()


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config singleton instance

    Examples:
        >>> from ssm_param_resolver.shared.config import get_config
        >>> config = get_config()
        >>> region = config.get('aws.region')
    """
    return Config()
