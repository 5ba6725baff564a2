"""
ptero-admin - Servers Domain

Models and accessors for the application API's server endpoints:
- List servers (paginated)
- Get a server, optionally with its allocations eager-loaded
- Create a server
- Edit server details, build configuration and startup settings
- Delete a server

Every wire field is optional; a field the panel omits takes the type's zero
value, so an omitted boolean cannot be told apart from ``false``.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field

from ..core.client import PanelClient
from ..core.models import LooseValue, Meta, PanelModel
from ..shared import endpoints
from ..shared.constants import INCLUDE_ALLOCATIONS

logger = logging.getLogger("ptero-admin")


# ========== MODELS ==========

class ServerLimits(PanelModel):
    """System resource limits for a server."""

    memory: int = 0
    swap: int = 0
    disk: int = 0
    io: int = 0
    cpu: int = 0
    threads: Optional[str] = None


class ServerFeatureLimits(PanelModel):
    """Limits on databases, extra allocations and backups."""

    databases: int = 0
    allocations: int = 0
    backups: int = 0


class ServerContainer(PanelModel):
    """Configuration of the container the server runs in."""

    startup_command: str = ""
    image: str = ""
    installed: bool = False
    environment: Dict[str, LooseValue] = Field(default_factory=dict)


class AllocationAttributes(PanelModel):
    id: int = 0
    ip: str = ""
    alias: LooseValue = None
    port: int = 0
    notes: Optional[str] = None
    assigned: bool = False


class Allocation(PanelModel):
    object: str = ""
    attributes: AllocationAttributes = Field(default_factory=AllocationAttributes)


class AllocationList(PanelModel):
    object: str = ""
    data: List[Allocation] = Field(default_factory=list)


class ServerRelationships(PanelModel):
    """Relationships loaded through ``?include=``."""

    allocations: AllocationList = Field(default_factory=AllocationList)


class ServerAttributes(PanelModel):
    id: int = 0
    external_id: LooseValue = None
    uuid: str = ""
    identifier: str = ""
    name: str = ""
    description: str = ""
    suspended: bool = False
    limits: ServerLimits = Field(default_factory=ServerLimits)
    feature_limits: ServerFeatureLimits = Field(default_factory=ServerFeatureLimits)
    user: int = 0
    node: int = 0
    allocation: int = 0
    nest: int = 0
    egg: int = 0
    pack: LooseValue = None
    container: ServerContainer = Field(default_factory=ServerContainer)
    relationships: ServerRelationships = Field(default_factory=ServerRelationships)
    updated_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class Server(PanelModel):
    """A single server as returned by the panel."""

    object: str = ""
    attributes: ServerAttributes = Field(default_factory=ServerAttributes)


class ServerList(PanelModel):
    """A page of servers plus its pagination metadata."""

    object: str = ""
    data: List[Server] = Field(default_factory=list)
    meta: Meta = Field(default_factory=Meta)


class ServerAllocation(PanelModel):
    """Allocation selection, only used when creating a server."""

    default: int = 0
    additional: List[int] = Field(default_factory=list)


class ServerChange(PanelModel):
    """Payload for creating or modifying a server.

    Only the fields explicitly set are sent. Creating a server needs at least
    name, user, egg, docker_image, startup, limits, feature_limits and
    allocation; editing details needs name and user.
    """

    name: str = ""
    user: int = 0
    egg: int = 0
    external_id: LooseValue = None
    description: str = ""
    docker_image: str = ""
    image: str = ""
    startup: str = ""
    skip_scripts: bool = False
    environment: Dict[str, LooseValue] = Field(default_factory=dict)
    limits: ServerLimits = Field(default_factory=ServerLimits)
    feature_limits: ServerFeatureLimits = Field(default_factory=ServerFeatureLimits)
    allocation: ServerAllocation = Field(default_factory=ServerAllocation)


# ========== ACCESSORS ==========

def list_servers(client: PanelClient, page: Optional[int] = None) -> ServerList:
    """List servers on the panel.

    Args:
        client: Configured panel client
        page: Page number to fetch; the panel's first page when omitted

    Returns:
        ServerList with the page's servers and pagination metadata
    """
    params = {"page": page} if page is not None else None
    return client.request_json(endpoints.servers(), "GET", params=params,
                               model=ServerList, operation="list_servers")


def get_server(client: PanelClient, server_id: int) -> Server:
    """Get a single server by its panel id."""
    return client.request_json(endpoints.server(server_id), "GET",
                               model=Server, operation="get_server")


def get_server_allocations(client: PanelClient, server_id: int) -> List[Allocation]:
    """Get the allocations assigned to a server.

    Loads the server with its allocations relationship included and returns
    that relationship's entries.
    """
    server = client.request_json(endpoints.server(server_id), "GET",
                                 params={"include": INCLUDE_ALLOCATIONS},
                                 model=Server, operation="get_server_allocations")
    return server.attributes.relationships.allocations.data


def create_server(client: PanelClient, new_server: ServerChange) -> Server:
    """Create a new server.

    A complete ServerChange is required; the panel validates it.
    """
    server = client.request_json(endpoints.servers(), "POST", payload=new_server,
                                 model=Server, operation="create_server")
    logger.info(f"Created server {server.attributes.id} ({server.attributes.name})")
    return server


def edit_server_details(client: PanelClient, change: ServerChange, server_id: int) -> Server:
    """Update a server's name, owner, description and external id.

    The server name and user are required.
    """
    return client.request_json(endpoints.server_details(server_id), "PATCH", payload=change,
                               model=Server, operation="edit_server_details")


def edit_server_build(client: PanelClient, change: ServerChange, server_id: int) -> Server:
    """Update a server's allocation, limits and feature limits."""
    return client.request_json(endpoints.server_build(server_id), "PATCH", payload=change,
                               model=Server, operation="edit_server_build")


def edit_server_startup(client: PanelClient, change: ServerChange, server_id: int) -> Server:
    """Update a server's startup command, egg, image and environment."""
    return client.request_json(endpoints.server_startup(server_id), "PATCH", payload=change,
                               model=Server, operation="edit_server_startup")


def delete_server(client: PanelClient, server_id: int) -> None:
    """Delete a server. The panel answers 204 with no body."""
    client.dispatch(endpoints.server(server_id), "DELETE", operation="delete_server")
    logger.info(f"Deleted server {server_id}")
