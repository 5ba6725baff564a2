"""
ptero-admin - Test Connection Command
"""

import typer

from ..core.config_loader import ConfigLoader
from ..core.exceptions import ConfigurationError
from .common import check_connection


def test_command(
    profile: str = typer.Option("default", "--profile", "-p", help="Profile name to test")
):
    """
    Test connection to the panel.

    Examples:
        ptero-admin test-connection
        ptero-admin test-connection --profile production
    """
    typer.echo("\nTesting panel connection\n")
    typer.echo(f"Profile: {typer.style(profile, fg=typer.colors.CYAN, bold=True)}\n")

    try:
        config = ConfigLoader.load(profile)
    except ConfigurationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        typer.echo("\nRun 'ptero-admin setup' to configure credentials")
        raise typer.Exit(1)

    typer.echo(f"URL: {config.url}")
    typer.echo(f"SSL Verification: {'Enabled' if config.verify_ssl else 'Disabled'}\n")

    result = check_connection(config)

    if not result["success"]:
        typer.echo(typer.style("Connection failed", fg=typer.colors.RED, bold=True))
        typer.echo(f"\nError: {result['error']}")
        typer.echo("\nTroubleshooting tips:")
        typer.echo("   - Verify the URL is correct and reachable")
        typer.echo("   - Check the key is an application API key, not a client key")
        typer.echo("   - Try --no-verify-ssl during setup for self-signed certificates")
        raise typer.Exit(1)

    typer.echo(typer.style("Connection successful!", fg=typer.colors.GREEN, bold=True))
    typer.echo(f"\nPanel reports {result['users']} user(s)")
