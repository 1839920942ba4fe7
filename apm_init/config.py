"""Exporter and logging configuration for APM tracing initialization."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, Field, field_validator

from .core.exceptions import ConfigurationError, ErrorSeverity


class OTLPExporterConfig(BaseModel):
    """OTLP exporter configuration schema."""
    enabled: bool = Field(default=False, description="Export spans over OTLP/gRPC")
    endpoint: str = Field(default="http://localhost:4317", description="Collector endpoint")
    headers: Dict[str, str] = Field(default_factory=dict, description="Extra request headers")
    insecure: bool = Field(default=True, description="Disable TLS to the collector")


class ConsoleExporterConfig(BaseModel):
    """Console exporter configuration schema."""
    enabled: bool = Field(default=False, description="Print spans to stdout")


class ExportersConfig(BaseModel):
    """Span exporter configuration schema."""
    otlp: OTLPExporterConfig = Field(default_factory=OTLPExporterConfig)
    console: ConsoleExporterConfig = Field(default_factory=ConsoleExporterConfig)


class LoggingConfig(BaseModel):
    """Logging configuration schema."""
    level: str = Field(default="INFO", description="Logging level")
    file: Optional[str] = Field(default=None, description="Log file path")
    max_size: str = Field(default="10MB", description="Maximum log file size")
    backup_count: int = Field(default=5, ge=1, le=20, description="Number of backup log files")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid logging level: {v}. Must be one of {valid_levels}")
        return v.upper()


class ApmConfig(BaseModel):
    """Main configuration schema."""
    service_version: str = Field(default="1.0.0", description="Reported service version")
    exporters: ExportersConfig = Field(default_factory=ExportersConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class TracingConfig:
    """Configuration manager for exporters and logging.

    The service name and environment are not configurable here; they are
    fixed in ``apm_init.settings``.
    """

    ENV_MAPPINGS = {
        'OTEL_EXPORTER_OTLP_ENDPOINT': 'exporters.otlp.endpoint',
        'APM_OTLP_ENABLED': 'exporters.otlp.enabled',
        'APM_CONSOLE_EXPORTER': 'exporters.console.enabled',
        'APM_LOG_LEVEL': 'logging.level',
        'APM_SERVICE_VERSION': 'service_version',
    }

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration from an optional YAML file."""
        self.config_path = Path(config_path) if config_path else None
        self._raw_config = self._load_config()
        self._config = self._validate_and_parse_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if self.config_path is None:
            return {}

        if not self.config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {self.config_path}",
                config_key="config_path",
                severity=ErrorSeverity.CRITICAL
            )

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Error parsing configuration file: {e}",
                config_key="yaml_parsing",
                severity=ErrorSeverity.CRITICAL
            ) from e

        if config is not None and not isinstance(config, dict):
            raise ConfigurationError(
                "Configuration file must contain a mapping",
                config_key="yaml_parsing",
                severity=ErrorSeverity.CRITICAL
            )

        logger.info(f"Configuration loaded from {self.config_path}")
        return config or {}

    def _validate_and_parse_config(self) -> ApmConfig:
        """Validate and parse configuration using Pydantic models."""
        self._apply_env_overrides()
        try:
            return ApmConfig(**self._raw_config)
        except Exception as e:
            raise ConfigurationError(
                f"Configuration validation failed: {e}",
                config_key="validation",
                severity=ErrorSeverity.CRITICAL
            ) from e

    def _apply_env_overrides(self):
        """Apply environment variable overrides to configuration."""
        for env_var, config_path in self.ENV_MAPPINGS.items():
            env_value = os.getenv(env_var)
            if env_value:
                self._set_nested_value(self._raw_config, config_path, env_value)
                logger.debug(f"Applied environment override: {env_var} -> {config_path}")

    def _set_nested_value(self, data: Dict[str, Any], key: str, value: Any) -> None:
        """Set nested value using dot notation."""
        keys = key.split('.')
        config = data

        for k in keys[:-1]:
            if not isinstance(config.get(k), dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-separated key."""
        value: Any = self._config.model_dump()
        for k in key.split('.'):
            if not isinstance(value, dict) or k not in value:
                return default
            value = value[k]
        return value

    @property
    def exporters(self) -> ExportersConfig:
        return self._config.exporters

    @property
    def logging(self) -> LoggingConfig:
        return self._config.logging

    @property
    def service_version(self) -> str:
        return self._config.service_version
