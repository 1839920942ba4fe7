"""Pytest configuration and shared fixtures."""

import sys

from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import dataclasses  # noqa: E402
import shutil  # noqa: E402
import tempfile  # noqa: E402
from typing import Any  # noqa: E402
from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402
import yaml  # noqa: E402

from apm_init import initializer  # noqa: E402
from apm_init.config import TracingConfig  # noqa: E402
from apm_init.tracing import integrations  # noqa: E402


class FakeInstrumentor:
    """Stand-in for an OpenTelemetry instrumentor that records calls."""

    def __init__(self, fail: bool = False, activates: bool = True):
        self.fail = fail
        self.activates = activates
        self.is_instrumented_by_opentelemetry = False
        self.instrument_calls: list[dict[str, Any]] = []
        self.uninstrument_calls = 0

    def instrument(self, **kwargs):
        if self.fail:
            raise RuntimeError("instrumentation exploded")
        self.instrument_calls.append(kwargs)
        self.is_instrumented_by_opentelemetry = self.activates

    def uninstrument(self, **kwargs):
        self.uninstrument_calls += 1
        self.is_instrumented_by_opentelemetry = False


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for each test."""
    temp_dir = Path(tempfile.mkdtemp(prefix="apm_init_test_"))
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep override variables from the host environment out of tests."""
    for env_var in TracingConfig.ENV_MAPPINGS:
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture(autouse=True)
def reset_tracing():
    """Drop the process-wide tracing manager after each test."""
    yield
    initializer.shutdown_tracing()


@pytest.fixture
def sample_config() -> dict[str, Any]:
    """Sample configuration for testing."""
    return {
        "service_version": "2.3.1",
        "exporters": {
            "otlp": {
                "enabled": False,
                "endpoint": "http://collector:4317",
                "headers": {"x-api-key": "secret"},
            },
            "console": {"enabled": False},
        },
        "logging": {
            "level": "debug",
            "max_size": "1MB",
            "backup_count": 2,
        },
    }


@pytest.fixture
def config_file(temp_dir: Path, sample_config: dict[str, Any]) -> Path:
    """Create a temporary config file for testing."""
    config_path = temp_dir / "tracing.yaml"
    with open(config_path, "w") as f:
        yaml.dump(sample_config, f)
    return config_path


@pytest.fixture
def fake_instrumentors(monkeypatch) -> dict[str, FakeInstrumentor]:
    """Replace every registered instrumentor with a FakeInstrumentor."""
    fakes = {}
    for name, integration in list(integrations.INTEGRATIONS.items()):
        fake = FakeInstrumentor()
        fakes[name] = fake
        monkeypatch.setitem(
            integrations.INTEGRATIONS,
            name,
            dataclasses.replace(integration, instrumentor_factory=lambda fake=fake: fake),
        )
    return fakes


@pytest.fixture
def redis_absent():
    return lambda name: False


@pytest.fixture
def redis_present():
    return lambda name: name == "redis"
