"""
Vlyby Configuration Module

Endpoint and transport settings loaded from YAML with environment overrides.
"""

from .adapter_config import (
    AdapterConfig,
    AdapterConfigError,
    AdapterConfigManager,
    get_adapter_config,
    get_adapter_config_manager,
)

__all__ = [
    "AdapterConfig",
    "AdapterConfigError",
    "AdapterConfigManager",
    "get_adapter_config",
    "get_adapter_config_manager",
]
