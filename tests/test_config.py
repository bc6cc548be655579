"""Tests for adapter configuration loading."""

import pytest

from src.vlyby.config.adapter_config import (
    AdapterConfig,
    AdapterConfigError,
    AdapterConfigManager,
)
from src.vlyby.utils.constants import ANALYTICS_ENDPOINT_URL, BID_ENDPOINT_URL


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Keep overrides from the outer environment out of these tests."""
    for name in AdapterConfigManager.ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)


class TestAdapterConfig:
    """Test suite for AdapterConfig."""

    def test_defaults(self):
        config = AdapterConfig()

        assert config.bid_endpoint == BID_ENDPOINT_URL
        assert config.analytics_endpoint == ANALYTICS_ENDPOINT_URL
        assert config.blocking_send is False

    def test_invalid_timeout(self):
        with pytest.raises(ValueError):
            AdapterConfig(send_timeout_s=0)

    def test_empty_endpoint(self):
        with pytest.raises(ValueError):
            AdapterConfig(bid_endpoint="")

    def test_round_trip_shape(self):
        data = {
            "endpoints": {"bid": "https://bid.example", "analytics": "https://an.example"},
            "hb_version": "7.1.0",
            "transport": {"timeout_s": 0.75, "blocking": True},
        }

        assert AdapterConfig.from_dict(data).to_dict() == data


class TestAdapterConfigManager:
    """Test suite for AdapterConfigManager."""

    def test_missing_file_uses_defaults(self, tmp_path):
        manager = AdapterConfigManager(str(tmp_path / "missing.yaml"))

        assert manager.load() == AdapterConfig()

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "vlyby.yaml"
        path.write_text(
            "endpoints:\n"
            "  bid: https://bid.example/prebid\n"
            "hb_version: '5.0.0'\n"
            "transport:\n"
            "  timeout_s: 1.25\n"
        )

        config = AdapterConfigManager(str(path)).load()

        assert config.bid_endpoint == "https://bid.example/prebid"
        assert config.analytics_endpoint == ANALYTICS_ENDPOINT_URL
        assert config.hb_version == "5.0.0"
        assert config.send_timeout_s == 1.25

    def test_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("VLYBY_ANALYTICS_ENDPOINT", "https://env.example/collect")
        monkeypatch.setenv("VLYBY_SEND_TIMEOUT", "3")
        monkeypatch.setenv("VLYBY_BLOCKING_SEND", "true")

        config = AdapterConfigManager(str(tmp_path / "missing.yaml")).load()

        assert config.analytics_endpoint == "https://env.example/collect"
        assert config.send_timeout_s == 3.0
        assert config.blocking_send is True

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("endpoints: [unclosed\n")

        with pytest.raises(AdapterConfigError):
            AdapterConfigManager(str(path)).load()

    def test_get_caches_until_reload(self, tmp_path):
        path = tmp_path / "vlyby.yaml"
        path.write_text("hb_version: '1.1.0'\n")
        manager = AdapterConfigManager(str(path))

        assert manager.get().hb_version == "1.1.0"
        path.write_text("hb_version: '1.2.0'\n")
        assert manager.get().hb_version == "1.1.0"
        assert manager.reload().hb_version == "1.2.0"

    def test_config_path_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("hb_version: '9.9.9'\n")
        monkeypatch.setenv("VLYBY_CONFIG_PATH", str(path))

        assert AdapterConfigManager().load().hb_version == "9.9.9"
