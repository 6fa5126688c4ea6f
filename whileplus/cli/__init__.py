"""WHILE+ CLI Package - one module per command"""

import click

from whileplus import __version__
from whileplus.cli.execute import execute_command
from whileplus.cli.validate import validate_command


@click.group()
def main():
    """WHILE+ CLI - run and check WHILE+ program documents."""
    pass


@click.command()
def version_command():
    """Show version info."""
    print(f"WHILE+ v{__version__}")


main.add_command(execute_command, "execute")
main.add_command(validate_command, "validate")
main.add_command(version_command, "version")

__all__ = [
    "main",
    "execute_command",
    "validate_command",
    "version_command",
]
