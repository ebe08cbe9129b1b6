#!/usr/bin/env python3
"""Discord Webhook Action - Entry point."""
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import click
from colorama import Fore, init

from config import app_config
from webhook_action.api.executor import execute_webhook
from webhook_action.api.webhook_client import WebhookClient
from webhook_action.builder import build_payload
from webhook_action.cli.console import print_banner, print_error, setup_logging
from webhook_action.context.run_context import EnvironmentRunContext, MappingRunContext
from webhook_action.errors import WebhookActionError
from webhook_action.exporter.json_exporter import JsonExporter
from webhook_action.schema.embed import input_keys

# Initialize colorama
init(autoreset=True)

INPUT_KEYS = input_keys()


def input_options(func):
    """Add one --<input-key> option per action input."""
    for key in reversed(INPUT_KEYS):
        func = click.option(f"--{key}", key.replace("-", "_"), default=None, help=f"Value of the '{key}' input")(func)
    return click.option(
        "--from-env",
        is_flag=True,
        help="Read inputs from INPUT_<NAME> environment variables; options override them",
    )(func)


def make_context(from_env: bool, options: dict) -> MappingRunContext:
    """Merge environment inputs and command-line options into one context."""
    if from_env:
        context = EnvironmentRunContext(prefix=app_config.input_prefix).to_mapping(INPUT_KEYS)
    else:
        context = MappingRunContext()

    overrides = {key: options.get(key.replace("-", "_")) for key in INPUT_KEYS}
    return context.with_overrides(overrides)


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Discord Webhook Action - Send Discord webhook messages from step inputs."""
    setup_logging("DEBUG" if verbose else app_config.log_level)


@cli.command()
@input_options
def execute(from_env, **options):
    """Build the payload and send it to the webhook."""
    print_banner()
    context = make_context(from_env, options)

    try:
        context.log_info("Running discord webhook action...")
        response = execute_webhook(context, WebhookClient(app_config.webhook))
    except WebhookActionError as e:
        print_error(str(e))
        sys.exit(1)

    if response.ok:
        click.echo(f"{Fore.GREEN}✅ Webhook delivered ({response.status_code})")


@cli.command()
@input_options
@click.option("--output", type=click.Path(dir_okay=False), help="Write the payload to this file")
def preview(from_env, output, **options):
    """Build the payload and print it without sending."""
    context = make_context(from_env, options)

    try:
        payload = build_payload(context)
    except WebhookActionError as e:
        print_error(str(e))
        sys.exit(1)

    exporter = JsonExporter()
    if output:
        exporter.export(output, payload)
        click.echo(f"{Fore.GREEN}✅ Payload written to {output}")
    else:
        click.echo(exporter.dumps(payload))


if __name__ == "__main__":
    cli()
