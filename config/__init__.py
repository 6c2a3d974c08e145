"""
Configuration Package - Domain-Specific Configuration Modules

Structure:
    config/
    ├── __init__.py              # This file - exports and singleton
    ├── app_config.py            # Main config (composes domain configs)
    ├── database_config.py       # SQL warehouse endpoint
    ├── storage_config.py        # Data lake file URL
    ├── auth_config.py           # Entra ID credential chain
    ├── env_validation.py        # Regex checks on env vars at startup
    └── defaults.py              # Default values

Usage:
    from config import get_config
    config = get_config()
    config.sql.require_connection_settings()

    from config import debug_config
    info = debug_config()  # Passwords masked
"""

from typing import Optional

from exceptions import ConfigurationMissingError
from .database_config import SqlWarehouseConfig
from .storage_config import DataLakeConfig
from .auth_config import AuthConfig
from .app_config import AppConfig


# ============================================================================
# SINGLETON PATTERN
# ============================================================================

_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get global configuration singleton.

    Returns:
        AppConfig instance loaded from environment

    Raises:
        ConfigurationMissingError: If an environment value fails validation
            (e.g. SQL_PORT=abc)
    """
    global _config_instance
    if _config_instance is None:
        try:
            _config_instance = AppConfig.from_environment()
        except ValueError as e:
            # pydantic.ValidationError is a ValueError subclass
            raise ConfigurationMissingError(f"Invalid configuration: {e}") from e
    return _config_instance


def reset_config() -> None:
    """Drop the cached singleton so the next get_config() re-reads the environment."""
    global _config_instance
    _config_instance = None


def debug_config() -> dict:
    """
    Get sanitized configuration for debugging (masks sensitive values).

    Returns:
        Dictionary with configuration values, passwords masked
    """
    try:
        config = get_config()
        return {
            'sql': config.sql.debug_dict(),
            'data_lake': config.data_lake.debug_dict(),
            'auth': config.auth.debug_dict(),
            'environment': config.environment,
        }
    except ConfigurationMissingError as e:
        return {'error': f'Configuration validation failed: {e}'}


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    'AppConfig',
    'get_config',
    'reset_config',
    'debug_config',
    'SqlWarehouseConfig',
    'DataLakeConfig',
    'AuthConfig',
]
