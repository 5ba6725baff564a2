"""
ptero-admin

A typed client for the Pterodactyl panel's application API. It lists,
fetches, creates, edits and deletes servers and users.
"""

__version__ = "1.0.0"
__license__ = "AGPL-3.0"

from .core.client import PanelClient
from .core.config_loader import ConfigLoader
from .core.exceptions import (
    ConfigurationError,
    HTTPStatusError,
    PanelAPIError,
    PanelClientError,
    RequestTimeoutError,
    SerializationError,
    TransportError,
    ValidationError,
)
from .core.models import Meta, PanelConfig
from .domains.servers import (
    Server,
    ServerChange,
    ServerList,
    create_server,
    delete_server,
    edit_server_build,
    edit_server_details,
    edit_server_startup,
    get_server,
    get_server_allocations,
    list_servers,
)
from .domains.users import (
    User,
    UserChange,
    UserList,
    create_user,
    delete_user,
    edit_user,
    get_user,
    get_user_by_external_id,
    list_users,
)

__all__ = [
    # Exceptions
    "PanelClientError",
    "ConfigurationError",
    "ValidationError",
    "TransportError",
    "RequestTimeoutError",
    "HTTPStatusError",
    "PanelAPIError",
    "SerializationError",
    # Core classes
    "PanelConfig",
    "PanelClient",
    "ConfigLoader",
    "Meta",
    # Servers
    "Server",
    "ServerChange",
    "ServerList",
    "list_servers",
    "get_server",
    "get_server_allocations",
    "create_server",
    "edit_server_details",
    "edit_server_build",
    "edit_server_startup",
    "delete_server",
    # Users
    "User",
    "UserChange",
    "UserList",
    "list_users",
    "get_user",
    "get_user_by_external_id",
    "create_user",
    "edit_user",
    "delete_user",
]
