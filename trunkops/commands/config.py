import json
import os

import click

from ..config import load_config, save_config, generate_config_example, get_config_path


@click.group("config")
def config_cmd():
    """Configuration management commands."""
    pass


@config_cmd.command("generate")
def generate_config():
    """Generate an example configuration file."""
    example = generate_config_example()
    config_path = get_config_path()
    if os.path.exists(config_path):
        click.echo(f"Configuration already exists at {config_path}. Example configuration:\n{json.dumps(example, indent=2)}")
        return
    save_config(example)
    click.echo(f"Example configuration written to {config_path}. Example configuration:\n{json.dumps(example, indent=2)}")


@config_cmd.command("show")
def show_config():
    """Show the current configuration with all merges applied."""
    click.echo(json.dumps(load_config(), indent=2, ensure_ascii=False))
