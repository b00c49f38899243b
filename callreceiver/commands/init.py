import click
import copy
import os
import sys
from .. import config as config_module
from ..cli_logger import logger


def _get_default_config():
    return copy.deepcopy(config_module.DEFAULT_CONFIG)


def _prompt_for_input(prompt, default, validation_func=None, **kwargs):
    while True:
        value = click.prompt(prompt, default=default, **kwargs)
        if validation_func is None or validation_func(value):
            return value
        else:
            logger.warning(f"Invalid input for {prompt}. Please try again.")


@click.command()
@click.option('--non-interactive', is_flag=True, help='Run in non-interactive mode using default values.')
@click.pass_context
def init(ctx, non_interactive):
    """Create a callreceiver.toml for this project."""
    logger.info("Initializing call receiver configuration.")

    conf = _get_default_config()
    if non_interactive:
        logger.info("Running in non-interactive mode with default values.")
    else:
        logger.info("Please provide the following details:")
        try:
            conf["android"]["project_root"] = _prompt_for_input(
                "Android project directory", conf["android"]["project_root"],
                validation_func=lambda v: bool(v.strip()))
            conf["android"]["manifest_file"] = _prompt_for_input(
                "AndroidManifest.xml path inside the Android project", conf["android"]["manifest_file"],
                validation_func=lambda v: v.endswith(".xml"))
            conf["entry_point"]["strict"] = click.confirm(
                "Fail the prebuild when MainApplication.kt cannot be patched?",
                default=conf["entry_point"]["strict"])
        except click.Abort:
            logger.warning("\nInitialization aborted by user.")
            return

    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.success(f"Configuration saved to {os.path.join(ctx.obj['path'], config_module.CONFIG_FILE)}")
        logger.info("Next step: run 'callreceiver prebuild' after 'expo prebuild'.")
    else:
        sys.exit(1)
