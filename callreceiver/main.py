import click
from .commands import *


@click.group()
@click.option("--path", "-p", default=".", help="Path to the project directory.")
@click.pass_context
def cli(ctx, path):
    """Call receiver prebuild plugin for Expo Android projects."""
    ctx.obj = {"path": path}

cli.add_command(init)
cli.add_command(prebuild)
cli.add_command(doctor)
cli.add_command(config)
cli.add_command(version)
cli.add_command(log)

if __name__ == '__main__':
    cli()
