"""
ptero-admin - List Profiles Command
"""

import typer

from ..core.config_loader import ConfigLoader
from ..core.exceptions import ConfigurationError


def list_command(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show detailed information for each profile"
    )
):
    """
    List all configured panel profiles.

    Examples:
        ptero-admin list-profiles
        ptero-admin list-profiles --verbose
    """
    typer.echo("\nConfigured panel profiles\n")

    try:
        profiles = ConfigLoader.list_profiles()
    except ConfigurationError as e:
        typer.echo(f"Error listing profiles: {e}", err=True)
        raise typer.Exit(1)

    if not profiles:
        typer.echo("No profiles configured yet")
        typer.echo("\nTip: run 'ptero-admin setup' to configure your first profile")
        return

    typer.echo(f"Found {len(profiles)} profile(s):\n")

    for profile in profiles:
        if verbose:
            try:
                info = ConfigLoader.get_profile_info(profile)
            except (ConfigurationError, KeyError) as e:
                typer.echo(f"{profile} - Error loading details: {e}\n")
                continue
            typer.echo(typer.style(profile, fg=typer.colors.CYAN, bold=True))
            typer.echo(f"   URL: {info['url']}")
            typer.echo(f"   API Key: {info['api_key_preview']}")
            typer.echo(f"   SSL Verification: {'on' if info['verify_ssl'] else 'off'}")
            typer.echo(f"   Timeout: {info['timeout']}s")
            typer.echo()
        else:
            typer.echo(f"  - {profile}")

    if not verbose:
        typer.echo("\nTip: use --verbose to see profile details")

    typer.echo(f"\nConfig file: {ConfigLoader.DEFAULT_CONFIG_FILE}")
