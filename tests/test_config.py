import pytest

from store_locator.config_manager import LocatorConfig
from store_locator.exceptions import ConfigurationError


def test_keys_from_environment(monkeypatch):
    monkeypatch.setenv("GOOGLE_PLACES_API_KEY", "server-key")
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "client-key")
    cfg = LocatorConfig()
    assert cfg.require_places_key() == "server-key"
    assert cfg.require_maps_key() == "client-key"
    assert cfg.places_enabled and cfg.photos_enabled


def test_public_maps_key_fallback(monkeypatch):
    monkeypatch.setenv("NEXT_PUBLIC_GOOGLE_MAPS_API_KEY", "public-key")
    assert LocatorConfig().maps_api_key == "public-key"


def test_explicit_values_win(monkeypatch):
    monkeypatch.setenv("GOOGLE_PLACES_API_KEY", "env-key")
    assert LocatorConfig(places_api_key="arg-key").places_api_key == "arg-key"


def test_missing_keys_raise():
    cfg = LocatorConfig()
    assert not cfg.places_enabled
    assert not cfg.photos_enabled
    with pytest.raises(ConfigurationError, match="GOOGLE_PLACES_API_KEY"):
        cfg.require_places_key()
    with pytest.raises(ConfigurationError):
        cfg.require_maps_key()
