import functools
import click
import sys # Import sys for sys.exc_info()
from .cli_logger import logger
from .errors import PrebuildError

def handle_exceptions(func):
    """A decorator to handle common exceptions for CLI commands.

    Errors are logged with their traceback and the command exits with
    status 1 so the surrounding build aborts.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.Abort:
            logger.warning("\nCommand aborted by user.")
            sys.exit(1)
        except click.ClickException:
            raise
        except PrebuildError as e:
            logger.error(f"Prebuild Error: {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
        except FileNotFoundError as e:
            logger.error(f"Error: File not found - {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
        except OSError as e:
            logger.error(f"Filesystem Error: {e}")
            logger.info("Please check file permissions and available disk space.")
            logger.exception(*sys.exc_info())
            sys.exit(1)
        except Exception as e:
            logger.error(f"\nAn unexpected error occurred: {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
    return wrapper
