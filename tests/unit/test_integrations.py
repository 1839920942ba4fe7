"""Unit tests for the integration registry and presence checks."""

import sys
import types

import pytest

from apm_init.core.exceptions import InstrumentationError
from apm_init.tracing.integrations import (
    FLASK,
    INTEGRATIONS,
    REDIS,
    get_integration,
    integration_available,
)


class TestRegistry:
    """Test cases for the integration registry."""

    def test_registered_integrations(self):
        assert set(INTEGRATIONS) == {FLASK, REDIS}

    def test_flask_is_always_on(self):
        assert get_integration(FLASK).always_on is True

    def test_redis_is_gated(self):
        redis = get_integration(REDIS)
        assert redis.always_on is False
        assert (redis.module, redis.class_name) == ("redis", "Redis")

    def test_unknown_integration(self):
        with pytest.raises(InstrumentationError) as exc_info:
            get_integration("sidekiq")
        assert exc_info.value.context["integration"] == "sidekiq"

    def test_flask_factory_builds_flask_instrumentor(self):
        from opentelemetry.instrumentation.flask import FlaskInstrumentor

        assert isinstance(get_integration(FLASK).create_instrumentor(), FlaskInstrumentor)


class TestIntegrationAvailable:
    """Test cases for integration_available."""

    def test_flask_available(self):
        assert integration_available(FLASK) is True

    def test_module_missing(self, monkeypatch):
        # A None entry makes the import raise ImportError
        monkeypatch.setitem(sys.modules, "redis", None)
        assert integration_available(REDIS) is False

    def test_module_with_client_class(self, monkeypatch):
        fake_redis = types.ModuleType("redis")
        fake_redis.Redis = type("Redis", (), {})
        monkeypatch.setitem(sys.modules, "redis", fake_redis)
        assert integration_available(REDIS) is True

    def test_module_without_client_class(self, monkeypatch):
        monkeypatch.setitem(sys.modules, "redis", types.ModuleType("redis"))
        assert integration_available(REDIS) is False

    def test_client_attribute_not_a_class(self, monkeypatch):
        fake_redis = types.ModuleType("redis")
        fake_redis.Redis = "not a class"
        monkeypatch.setitem(sys.modules, "redis", fake_redis)
        assert integration_available(REDIS) is False

    def test_unknown_integration(self):
        with pytest.raises(InstrumentationError):
            integration_available("memcached")
