"""
ptero-admin - Endpoint Path Builders

One builder per resource/action. Identifiers are validated and
percent-encoded here so accessors never concatenate raw values into paths.
"""

from urllib.parse import quote

from .constants import (
    API_SERVER,
    API_SERVER_BUILD,
    API_SERVER_DETAILS,
    API_SERVER_STARTUP,
    API_SERVERS,
    API_USER,
    API_USER_EXTERNAL,
    API_USERS,
)
from .error_handlers import validate_external_id, validate_resource_id


def _segment(value) -> str:
    return quote(str(value), safe="")


def servers() -> str:
    return API_SERVERS


def server(server_id: int) -> str:
    validate_resource_id(server_id, "server")
    return API_SERVER.format(server_id=_segment(server_id))


def server_details(server_id: int) -> str:
    validate_resource_id(server_id, "server_details")
    return API_SERVER_DETAILS.format(server_id=_segment(server_id))


def server_build(server_id: int) -> str:
    validate_resource_id(server_id, "server_build")
    return API_SERVER_BUILD.format(server_id=_segment(server_id))


def server_startup(server_id: int) -> str:
    validate_resource_id(server_id, "server_startup")
    return API_SERVER_STARTUP.format(server_id=_segment(server_id))


def users() -> str:
    return API_USERS


def user(user_id: int) -> str:
    validate_resource_id(user_id, "user")
    return API_USER.format(user_id=_segment(user_id))


def user_external(external_id: str) -> str:
    """Path for looking a user up by the id an external system assigned."""
    validate_external_id(external_id, "user_external")
    return API_USER_EXTERNAL.format(external_id=_segment(external_id))
