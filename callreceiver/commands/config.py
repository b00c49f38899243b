import click
import os
import sys
import json
import toml
from .. import config as config_module
from ..cli_logger import logger

NOT_FOUND_MESSAGE = f"Error: No {config_module.CONFIG_FILE} found. Please run 'callreceiver init' first."


def _parse_value(value):
    """Interpret VALUE as a TOML literal (true, 3, "x"), falling back to the raw string."""
    try:
        return toml.loads(f"value = {value}")["value"]
    except (toml.TomlDecodeError, ValueError, IndexError):
        return value


@click.group()
@click.pass_context
def config(ctx):
    """View or edit the callreceiver.toml configuration file."""
    pass

@config.command()
@click.pass_context
def view(ctx):
    """View the contents of the callreceiver.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(NOT_FOUND_MESSAGE)
        return
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    try:
        with open(config_file_path, 'r', encoding="utf-8") as f:
            click.echo(f.read())
    except IOError as e:
        logger.error(f"Error reading {config_module.CONFIG_FILE} at {config_file_path}: {e}")
        logger.info("Please check file permissions.")
        sys.exit(1)

@config.command(name="list")
@click.pass_context
def list_config(ctx):
    """List all configuration keys and values, defaults included."""
    conf = config_module.load_config(path=ctx.obj["path"])
    click.echo(json.dumps(config_module.get_settings(conf), indent=4))

@config.command()
@click.argument('key')
@click.pass_context
def get(ctx, key):
    """Get a value from the callreceiver.toml file."""
    conf = config_module.get_settings(config_module.load_config(path=ctx.obj["path"]))

    keys = key.split('.')
    value = conf
    try:
        for k in keys:
            value = value[k]
        click.echo(value)
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in {config_module.CONFIG_FILE}")

@config.command(name="set")
@click.argument('key')
@click.argument('value')
@click.pass_context
def set_value(ctx, key, value):
    """Set a value in the callreceiver.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])

    keys = key.split('.')
    d = conf
    for k in keys[:-1]:
        d = d.setdefault(k, {})
    d[keys[-1]] = _parse_value(value)

    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Set '{key}' to '{value}'")

@config.command()
@click.argument('key')
@click.pass_context
def unset(ctx, key):
    """Remove a key from the callreceiver.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(NOT_FOUND_MESSAGE)
        return

    keys = key.split('.')
    d = conf
    try:
        for k in keys[:-1]:
            d = d[k]
        del d[keys[-1]]
        if config_module.save_config(conf, path=ctx.obj["path"]):
            logger.info(f"Unset '{key}'")
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in {config_module.CONFIG_FILE}")
