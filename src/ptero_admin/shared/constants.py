"""
ptero-admin - API Constants

All endpoint paths are relative to the application API namespace, which is
appended to the configured panel URL when the client is created.
"""

from .. import __version__

API_NAMESPACE = "api/application"

# Servers
API_SERVERS = "servers"
API_SERVER = "servers/{server_id}"
API_SERVER_DETAILS = "servers/{server_id}/details"
API_SERVER_BUILD = "servers/{server_id}/build"
API_SERVER_STARTUP = "servers/{server_id}/startup"

# Users
API_USERS = "users"
API_USER = "users/{user_id}"
API_USER_EXTERNAL = "users/external/{external_id}"

# Eager-loaded relationships
INCLUDE_ALLOCATIONS = "allocations"

CONTENT_TYPE_JSON = "application/json"
USER_AGENT = f"ptero-admin/{__version__}"

SUPPORTED_METHODS = ("GET", "POST", "PATCH", "DELETE")
BODYLESS_METHODS = ("GET", "DELETE")
