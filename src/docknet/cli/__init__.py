import logging

import click
import yaml

from docknet.cli.networks import get_network_client, network
from docknet.config import config


@click.group()
@click.pass_context
def main(ctx):
    """docknet CLI"""
    logging.basicConfig(level=config.log_level)
    ctx.ensure_object(dict)


main.add_command(network)


@main.command()
@click.option("--config", "config_path", help="Path to the configuration file.")
def apply(config_path):
    """Apply the network configuration from a file."""
    from docknet.docker.actions import apply_configuration

    config_path = config_path or config.find_config_file()
    if not config_path:
        raise click.FileError("config.yaml", hint="Configuration file not found.")

    with open(config_path, "r") as f:
        full_config = yaml.safe_load(f) or {}

    messages = apply_configuration(full_config, get_network_client())
    for message in messages:
        click.echo(message)


@main.command()
@click.option("--host", default="127.0.0.1", help="The host to bind to.")
@click.option("--port", default=8000, help="The port to bind to.")
def server(host, port):
    """Run the FastAPI server."""
    import uvicorn

    from docknet.api.server import app

    uvicorn.run(app, host=host, port=port)


@main.command()
def version():
    """Show the docknet version."""
    from docknet.version import get_version

    click.echo(get_version())
