import click
from .. import config as config_module
from .. import prebuilder
from ..cli_logger import logger
from ..decorators import handle_exceptions

@click.command()
@click.pass_context
@click.option("--strict", is_flag=True, help="Fail instead of warning when MainApplication.kt cannot be patched. Overrides entry_point.strict.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@handle_exceptions
def prebuild(ctx, strict, verbose):
    """Patch the generated Android project with the call receiver."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.info(f"No {config_module.CONFIG_FILE} found, using default settings.")

    prebuilder.prebuild_android(conf, path=ctx.obj["path"], strict=True if strict else None, verbose=verbose)
