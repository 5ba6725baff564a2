"""
ptero-admin - Resource Listing Commands

Print one page of servers or users from the configured panel.
"""

from typing import Optional

import typer

from ..core.client import PanelClient
from ..core.config_loader import ConfigLoader
from ..core.exceptions import PanelClientError
from ..core.models import Meta
from ..domains.servers import list_servers
from ..domains.users import list_users
from ..shared.error_handlers import ErrorResponse


def _fail(error: PanelClientError, operation: str):
    response = ErrorResponse(error, operation)
    response.log()
    typer.echo(f"Error: {response.get_user_message()}", err=True)
    raise typer.Exit(1)


def _echo_pagination(meta: Meta):
    if meta.total_pages:
        typer.echo(f"\nPage {meta.current_page}/{meta.total_pages} ({meta.total} total)")


def servers_command(
    profile: str = typer.Option("default", "--profile", "-p", help="Profile name to use"),
    page: Optional[int] = typer.Option(None, "--page", min=1, help="Page number"),
):
    """
    List servers on the panel.

    Examples:
        ptero-admin servers
        ptero-admin servers --page 2 --profile production
    """
    try:
        config = ConfigLoader.load(profile)
        with PanelClient(config) as client:
            result = list_servers(client, page=page)
    except PanelClientError as e:
        _fail(e, "list_servers")

    for server in result.data:
        attrs = server.attributes
        state = "suspended" if attrs.suspended else "active"
        typer.echo(f"{attrs.id:>6}  {attrs.identifier:<8}  {attrs.name}  (user {attrs.user}, {state})")
    _echo_pagination(result.meta)


def users_command(
    profile: str = typer.Option("default", "--profile", "-p", help="Profile name to use"),
    page: Optional[int] = typer.Option(None, "--page", min=1, help="Page number"),
):
    """
    List users on the panel.

    Examples:
        ptero-admin users
        ptero-admin users --page 3
    """
    try:
        config = ConfigLoader.load(profile)
        with PanelClient(config) as client:
            result = list_users(client, page=page)
    except PanelClientError as e:
        _fail(e, "list_users")

    for user in result.data:
        attrs = user.attributes
        admin = " [admin]" if attrs.root_admin else ""
        typer.echo(f"{attrs.id:>6}  {attrs.username:<20}  {attrs.email}{admin}")
    _echo_pagination(result.meta)
