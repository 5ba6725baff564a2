"""
ptero-admin - Shared CLI Helpers
"""

from ..core.client import PanelClient
from ..core.exceptions import PanelClientError
from ..core.models import PanelConfig
from ..domains.users import list_users
from ..shared.error_handlers import ErrorResponse


def check_connection(config: PanelConfig, operation: str = "test_connection") -> dict:
    """
    Fetch the first page of users as a basic authenticated call.

    Returns:
        {"success": True, "users": count} or {"success": False, "error": message}
    """
    try:
        with PanelClient(config) as client:
            users = list_users(client, page=1)
    except PanelClientError as e:
        return {"success": False, "error": ErrorResponse(e, operation).get_user_message()}

    return {"success": True, "users": users.meta.total or len(users.data)}
