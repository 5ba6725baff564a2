"""
ptero-admin - CLI Interface

Command-line interface for managing panel credential profiles and
inspecting servers and users.
"""

import logging
import sys

import typer

from .delete import delete_command
from .list import list_command
from .resources import servers_command, users_command
from .setup import setup_command
from .test import test_command

app = typer.Typer(
    name="ptero-admin",
    help="ptero-admin - Pterodactyl application API client",
    add_completion=False
)

app.command(name="setup", help="Configure panel connection credentials")(setup_command)
app.command(name="list-profiles", help="List all configured profiles")(list_command)
app.command(name="test-connection", help="Test connection to the panel")(test_command)
app.command(name="delete-profile", help="Delete a credential profile")(delete_command)
app.command(name="servers", help="List servers on the panel")(servers_command)
app.command(name="users", help="List users on the panel")(users_command)


def main():
    """CLI entry point."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("\n\nOperation cancelled by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
