"""
ptero-admin - Setup Command

Interactive setup for configuring panel credentials.
"""

import getpass

import typer
from pydantic import ValidationError as PydanticValidationError

from ..core.config_loader import ConfigLoader
from ..core.exceptions import ConfigurationError
from ..core.models import PanelConfig
from .common import check_connection


def setup_command(
    profile: str = typer.Option(
        "default", "--profile", "-p", help="Profile name (default, production, staging, etc.)"
    ),
    url: str | None = typer.Option(None, "--url", help="Panel URL (e.g., https://panel.example.com)"),
    api_key: str | None = typer.Option(None, "--api-key", help="Application API key"),
    verify_ssl: bool = typer.Option(
        True, "--verify-ssl/--no-verify-ssl", help="Verify SSL certificates"
    ),
    timeout: float = typer.Option(30.0, "--timeout", help="Request timeout in seconds"),
    interactive: bool = typer.Option(
        True, "--interactive/--non-interactive", help="Interactive mode with prompts"
    ),
):
    """
    Configure panel connection credentials.

    Examples:
        ptero-admin setup
        ptero-admin setup --url https://panel.example.com --api-key KEY --non-interactive
        ptero-admin setup --profile production
    """
    typer.echo("\nptero-admin - Credential Setup\n")
    typer.echo(f"Profile: {typer.style(profile, fg=typer.colors.CYAN, bold=True)}\n")

    if interactive:
        if not url:
            url = typer.prompt("Panel URL (e.g., https://panel.example.com)")
        if not api_key:
            api_key = getpass.getpass("Application API key (hidden): ")
    elif not (url and api_key):
        typer.echo(
            "Error: in non-interactive mode both --url and --api-key are required",
            err=True,
        )
        raise typer.Exit(1)

    try:
        config = PanelConfig(url=url, api_key=api_key, verify_ssl=verify_ssl, timeout=timeout)
    except PydanticValidationError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("\nTesting connection...")
    result = check_connection(config, "setup")
    if result["success"]:
        typer.echo("Connection successful!")
    else:
        typer.echo(f"Connection failed: {result['error']}")
        if not interactive or not typer.confirm("Connection test failed. Save anyway?", default=False):
            typer.echo("Setup cancelled")
            raise typer.Exit(1)

    try:
        ConfigLoader.save_profile(profile, config)
    except (ConfigurationError, OSError) as e:
        typer.echo(f"\nError saving profile: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"\nProfile '{profile}' saved successfully!")
    typer.echo(f"Config location: {ConfigLoader.DEFAULT_CONFIG_FILE} (mode 0600)")
    typer.echo(f"\nTest connection: ptero-admin test-connection --profile {profile}")
