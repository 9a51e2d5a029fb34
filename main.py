"""
Entrypoint: load .env and config, init logging, fetch NEO records once
"""

import asyncio
import json
import sys

import click

from neofeed.client import NeoClient
from neofeed.config import load_settings
from neofeed.logging_setup import configure_logging
from neofeed.messages import message_for


@click.command()
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None,
              help="Path to config.yaml (defaults to ./config.yaml).")
@click.option("--hazardous/--all", default=None,
              help="Only potentially hazardous objects, or all of them.")
@click.option("--timeout-ms", type=click.IntRange(min=1), default=None,
              help="Overall request time bound in milliseconds.")
@click.option("--base-url", default=None, help="Explicit API base address override.")
@click.option("--debug", "-d", is_flag=True, help="Print the payload and log at DEBUG level.")
def cli(config_path, hazardous, timeout_ms, base_url, debug):
    """
    neo-feed: fetch Near-Earth-Object records from the NEO data API.
    """
    try:
        settings = load_settings(config_path)
        if timeout_ms is not None:
            settings.api['timeout_ms'] = timeout_ms
        if base_url:
            settings.api['base_url'] = base_url
        # validate before the event loop starts
        settings.timeout_ms
    except ValueError as e:
        raise click.ClickException(str(e))

    log_config = settings.logging
    configure_logging(
        level="DEBUG" if debug else log_config.get('level', 'INFO'),
        json=log_config.get('json', True),
    )

    client = NeoClient(settings)
    outcome = asyncio.run(client.fetch_neos(hazardous=hazardous))

    if not outcome.ok:
        click.echo(message_for(outcome), err=True)
        sys.exit(1)

    click.echo(message_for(outcome))
    payload = outcome.payload
    if debug:
        click.echo(json.dumps(payload, indent=2))
    elif isinstance(payload, list):
        click.echo(f"{len(payload)} objects")


def main():
    cli(prog_name="neo-feed")


if __name__ == "__main__":
    main()
