"""
Adapter Configuration Management

Loads adapter settings (endpoints, version tag, send behaviour) from a YAML
file with environment variable overrides.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ..utils.constants import (
    ANALYTICS_ENDPOINT_URL,
    BID_ENDPOINT_URL,
    DEFAULT_HB_VERSION,
    DEFAULT_SEND_TIMEOUT_S,
)


class AdapterConfigError(Exception):
    """Raised when the adapter configuration file cannot be read."""
    pass


@dataclass
class AdapterConfig:
    """Settings shared by the bid adapter and the analytics adapter."""

    bid_endpoint: str = BID_ENDPOINT_URL
    analytics_endpoint: str = ANALYTICS_ENDPOINT_URL
    hb_version: str = DEFAULT_HB_VERSION
    send_timeout_s: float = DEFAULT_SEND_TIMEOUT_S
    blocking_send: bool = False

    def __post_init__(self):
        """Validate endpoints and timeout."""
        if not self.bid_endpoint:
            raise ValueError("bid_endpoint must not be empty")
        if not self.analytics_endpoint:
            raise ValueError("analytics_endpoint must not be empty")
        if self.send_timeout_s <= 0:
            raise ValueError(
                f"send_timeout_s must be positive, got {self.send_timeout_s}"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AdapterConfig":
        """Create from dictionary."""
        endpoints = data.get("endpoints", {})
        transport = data.get("transport", {})
        return cls(
            bid_endpoint=endpoints.get("bid", BID_ENDPOINT_URL),
            analytics_endpoint=endpoints.get("analytics", ANALYTICS_ENDPOINT_URL),
            hb_version=str(data.get("hb_version", DEFAULT_HB_VERSION)),
            send_timeout_s=float(transport.get("timeout_s", DEFAULT_SEND_TIMEOUT_S)),
            blocking_send=bool(transport.get("blocking", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (same shape as the YAML file)."""
        return {
            "endpoints": {
                "bid": self.bid_endpoint,
                "analytics": self.analytics_endpoint,
            },
            "hb_version": self.hb_version,
            "transport": {
                "timeout_s": self.send_timeout_s,
                "blocking": self.blocking_send,
            },
        }


class AdapterConfigManager:
    """
    Loads the adapter configuration.

    Supports loading from:
    - A YAML file (``VLYBY_CONFIG_PATH`` or config/vlyby.yaml)
    - Environment variable overrides
    - Built-in defaults when no file exists
    """

    ENV_OVERRIDES = {
        "VLYBY_BID_ENDPOINT": "bid_endpoint",
        "VLYBY_ANALYTICS_ENDPOINT": "analytics_endpoint",
        "VLYBY_HB_VERSION": "hb_version",
        "VLYBY_SEND_TIMEOUT": "send_timeout_s",
        "VLYBY_BLOCKING_SEND": "blocking_send",
    }

    def __init__(self, config_path: str | None = None):
        """
        Initialize the config manager.

        Args:
            config_path: Path to the YAML file.
                        Defaults to config/vlyby.yaml
        """
        if config_path is None:
            config_path = os.environ.get(
                "VLYBY_CONFIG_PATH",
                str(Path(__file__).parent.parent.parent.parent / "config" / "vlyby.yaml"),
            )
        self.config_path = Path(config_path)
        self._config: AdapterConfig | None = None

    def load(self) -> AdapterConfig:
        """Load the configuration from disk and apply environment overrides."""
        data: dict[str, Any] = {}
        if self.config_path.exists():
            try:
                with open(self.config_path) as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise AdapterConfigError(
                    f"Cannot read adapter config {self.config_path}: {e}"
                ) from e

        config = AdapterConfig.from_dict(data)
        overrides = self._env_overrides()
        if overrides:
            values = {**config.__dict__, **overrides}
            config = AdapterConfig(**values)

        self._config = config
        return config

    def get(self) -> AdapterConfig:
        """Get the loaded configuration, loading it on first use."""
        if self._config is None:
            return self.load()
        return self._config

    def reload(self) -> AdapterConfig:
        """Reload configuration from disk."""
        self._config = None
        return self.load()

    def _env_overrides(self) -> dict[str, Any]:
        overrides: dict[str, Any] = {}
        for env_name, attr in self.ENV_OVERRIDES.items():
            raw = os.environ.get(env_name)
            if raw is None or raw == "":
                continue
            if attr == "send_timeout_s":
                overrides[attr] = float(raw)
            elif attr == "blocking_send":
                overrides[attr] = raw.lower() == "true"
            else:
                overrides[attr] = raw
        return overrides


# Global instance for easy access
_manager: AdapterConfigManager | None = None


def get_adapter_config_manager() -> AdapterConfigManager:
    """Get the global adapter config manager instance."""
    global _manager
    if _manager is None:
        _manager = AdapterConfigManager()
    return _manager


def get_adapter_config() -> AdapterConfig:
    """Convenience function to get the adapter configuration."""
    return get_adapter_config_manager().get()
