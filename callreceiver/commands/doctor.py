import click
import sys
from .. import config as config_module
from .. import prebuilder
from ..cli_logger import logger
from ..decorators import handle_exceptions

@click.command()
@click.pass_context
@handle_exceptions
def doctor(ctx):
    """Check that the Android project carries every call receiver patch."""
    logger.info("Running project check...")
    conf = config_module.load_config(path=ctx.obj["path"])
    issues = prebuilder.check_project(conf, path=ctx.obj["path"])
    if not issues:
        logger.success("Project check completed successfully.")
        return

    for issue in issues:
        logger.warning(issue)
    logger.error("Project check found issues. Run 'callreceiver prebuild' to fix them.")
    sys.exit(1)
