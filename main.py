#!/usr/bin/env python3
"""Command-line diagnostics for APM tracing initialization."""

import sys

import click
from loguru import logger

from apm_init.config import TracingConfig
from apm_init.core.exceptions import ApmInitError
from apm_init.initializer import configure_tracing, shutdown_tracing
from apm_init.log import setup_logging
from apm_init.settings import build_settings


def _load_config(config_path):
    config = TracingConfig(config_path)
    setup_logging(config.logging)
    return config


@click.group()
def cli():
    """APM tracing initialization."""
    pass


@cli.command()
def show():
    """Show the tracing settings this process would use."""
    settings = build_settings()
    click.echo(f"service: {settings.service_name}")
    click.echo(f"env: {settings.environment}")
    click.echo(f"integrations: {', '.join(sorted(settings.instrumentations))}")


@cli.command()
@click.option('--config', '-c', default=None, help='Configuration file path')
def validate(config: str):
    """Validate configuration."""
    try:
        _load_config(config)
        click.echo("Configuration is valid")
    except ApmInitError as e:
        click.echo(f"Error: {e}")
        sys.exit(1)


@cli.command()
@click.option('--config', '-c', default=None, help='Configuration file path')
def check(config: str):
    """Run the full tracing setup once and report the enabled integrations."""
    try:
        manager = configure_tracing(_load_config(config), set_global=False)
        click.echo(f"Enabled integrations: {', '.join(manager.enabled_integrations())}")
    except ApmInitError as e:
        logger.error(f"Tracing setup failed: {e}")
        click.echo(f"Error: {e}")
        sys.exit(1)
    finally:
        shutdown_tracing()


if __name__ == '__main__':
    cli()
