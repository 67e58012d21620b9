"""
Configuration module
"""

from square_connect.config.client_config import (
    ClientConfig,
    ConfigDefaults,
    ENV_VAR_MAPPING,
    SQUARE_API_HOST,
)
from square_connect.config.config_loader import ConfigLoader

__all__ = [
    "ClientConfig",
    "ConfigDefaults",
    "ENV_VAR_MAPPING",
    "SQUARE_API_HOST",
    "ConfigLoader",
]
