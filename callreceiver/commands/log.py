import click
import os
from ..cli_logger import get_latest_log_file, LOG_DIR
from colorama import Fore, Style

LEVEL_COLORS = {
    "[WARNING]": Fore.YELLOW,
    "[ERROR]": Fore.RED,
    "[TRACEBACK]": Fore.RED,
    "[DEBUG]": Fore.WHITE + Style.DIM,
    "[SUCCESS]": Fore.GREEN,
}

@click.command()
@click.option('--filename', default=None, help='The name of the log file to display.')
@click.option('--list', 'list_files', is_flag=True, help='List all log files.')
def log(filename, list_files):
    """Display a specific log file or the latest log file, or list all log files."""
    if list_files:
        log_files = [f for f in os.listdir(LOG_DIR) if f.endswith(".log")] if os.path.exists(LOG_DIR) else []
        if not log_files:
            click.echo("No log files found.")
            return
        click.echo("Available log files:")
        for f in sorted(log_files):
            click.echo(f"  {f}")
        return

    log_file = os.path.join(LOG_DIR, filename) if filename else get_latest_log_file()
    if not log_file or not os.path.exists(log_file):
        click.echo("No log files found.")
        return

    click.echo(f"Displaying log file: {log_file}")
    with open(log_file, 'r', encoding="utf-8") as f:
        for line in f:
            color = next((c for tag, c in LEVEL_COLORS.items() if tag in line), Fore.CYAN)
            click.echo(f"{color}{line.rstrip()}{Style.RESET_ALL}")
