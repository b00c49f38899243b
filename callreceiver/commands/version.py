import click
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of the callreceiver plugin."""
    try:
        ver = importlib.metadata.version("callreceiver")
        logger.info(f"callreceiver version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of callreceiver. Is it installed correctly?")
