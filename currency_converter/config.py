"""Configuration management for Currency Converter."""
import os
from pathlib import Path
from typing import Any, Dict, Optional
import yaml
from dotenv import load_dotenv
from currency_converter.utils.errors import ConfigurationError
from currency_converter.utils.logging import setup_logging
import logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"
DEFAULT_EXCHANGE_URL = "https://api.apilayer.com/exchangerates_data/convert"
DEFAULT_EXCHANGE_TIMEOUT = 10.0


class Config:
    """Application configuration."""

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH, console_logging: Optional[bool] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML configuration file
            console_logging: Force console logging on/off, overriding the file
        """
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._console_logging = console_logging
        self._load()

    def _load(self) -> None:
        """Load configuration from YAML and environment."""
        load_dotenv()

        if not self.config_path.exists():
            raise ConfigurationError(f"Config file not found: {self.config_path}")

        with open(self.config_path, 'r') as f:
            try:
                self._config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not self._config:
            raise ConfigurationError(f"Empty configuration file: {self.config_path}")

        self._validate()

        log_config = self._config.get('logging') or {}
        console = log_config.get('console', True)
        if self._console_logging is not None:
            console = self._console_logging
        setup_logging(
            level=os.getenv('LOG_LEVEL', log_config.get('level', 'INFO')),
            log_file=log_config.get('file'),
            format_type=log_config.get('format', 'json'),
            enabled=log_config.get('enabled', True),
            console=console,
        )

        logger.info("Configuration loaded successfully")

    def _validate(self) -> None:
        """Validate required configuration sections."""
        if not isinstance(self._config, dict):
            raise ConfigurationError(f"Configuration must be a mapping: {self.config_path}")

        required_sections = ['app', 'api']

        for section in required_sections:
            if section not in self._config:
                raise ConfigurationError(f"Missing required config section: {section}")

        if not self.get('api.exchange.base_url'):
            raise ConfigurationError("Missing api.exchange.base_url in config")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-separated key.

        Args:
            key: Dot-separated key (e.g., "api.exchange.base_url")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def app_name(self) -> str:
        return self.get('app.name', 'Currency converter')

    @property
    def exchange_base_url(self) -> str:
        return self.get('api.exchange.base_url', DEFAULT_EXCHANGE_URL)

    @property
    def exchange_api_key(self) -> str:
        """Credential for the exchange endpoint; EXCHANGE_API_KEY wins over the file."""
        return os.getenv('EXCHANGE_API_KEY') or self.get('api.exchange.api_key', '') or ''

    @property
    def exchange_timeout(self) -> float:
        return float(self.get('api.exchange.timeout', DEFAULT_EXCHANGE_TIMEOUT))


# Global config instance
_config: Optional[Config] = None


def default_config_path() -> str:
    return os.getenv('CURRENCY_CONVERTER_CONFIG', DEFAULT_CONFIG_PATH)


def load_config(config_path: Optional[str] = None, console_logging: Optional[bool] = None) -> Config:
    """Load and return global configuration instance."""
    global _config
    if _config is None:
        _config = Config(config_path or default_config_path(), console_logging=console_logging)
    return _config


def get_config() -> Config:
    """Get global configuration instance."""
    if _config is None:
        raise ConfigurationError("Configuration not loaded. Call load_config() first.")
    return _config


def reset_config() -> None:
    """Forget the loaded configuration (used by tests and the CLI --config option)."""
    global _config
    _config = None


def try_load_config() -> Optional[Config]:
    """Return the global configuration, loading it if needed, or None when unavailable."""
    try:
        return get_config()
    except ConfigurationError:
        try:
            return load_config()
        except ConfigurationError as e:
            logger.warning(f"Using built-in defaults: {e}")
            return None
