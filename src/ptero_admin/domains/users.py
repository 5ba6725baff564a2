"""
ptero-admin - Users Domain

Models and accessors for the application API's user endpoints. The panel
never returns a user's password; one can only be set through create/edit.
"""

import logging
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ..core.client import PanelClient
from ..core.models import LooseValue, Meta, PanelModel
from ..shared import endpoints

logger = logging.getLogger("ptero-admin")


class UserAttributes(PanelModel):
    id: int = 0
    external_id: LooseValue = None
    uuid: str = ""
    username: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    language: str = ""
    root_admin: bool = False
    two_factor: bool = Field(default=False, alias="2fa")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class User(PanelModel):
    """A single panel user."""

    object: str = ""
    attributes: UserAttributes = Field(default_factory=UserAttributes)


class UserList(PanelModel):
    """A page of users plus its pagination metadata."""

    object: str = ""
    data: List[User] = Field(default_factory=list)
    meta: Meta = Field(default_factory=Meta)


class UserChange(PanelModel):
    """Payload for creating or editing a user. Only explicitly set fields are sent."""

    external_id: LooseValue = None
    username: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    password: str = Field(default="", repr=False)
    language: str = ""
    root_admin: bool = False


def list_users(client: PanelClient, page: Optional[int] = None) -> UserList:
    """List panel users, one page at a time."""
    params = {"page": page} if page is not None else None
    return client.request_json(endpoints.users(), "GET", params=params,
                               model=UserList, operation="list_users")


def get_user(client: PanelClient, user_id: int) -> User:
    """Get a single user by panel id."""
    return client.request_json(endpoints.user(user_id), "GET",
                               model=User, operation="get_user")


def get_user_by_external_id(client: PanelClient, external_id: str) -> User:
    """Get a single user by the id an external system assigned to it."""
    return client.request_json(endpoints.user_external(external_id), "GET",
                               model=User, operation="get_user_by_external_id")


def create_user(client: PanelClient, new_user: UserChange) -> User:
    """Create a user. Username, email, first and last name are required."""
    user = client.request_json(endpoints.users(), "POST", payload=new_user,
                               model=User, operation="create_user")
    logger.info(f"Created user {user.attributes.id} ({user.attributes.username})")
    return user


def edit_user(client: PanelClient, change: UserChange, user_id: int) -> User:
    """Update a user. The id and timestamps cannot be changed."""
    return client.request_json(endpoints.user(user_id), "PATCH", payload=change,
                               model=User, operation="edit_user")


def delete_user(client: PanelClient, user_id: int) -> None:
    """Delete a user. The panel answers 204 with no body."""
    client.dispatch(endpoints.user(user_id), "DELETE", operation="delete_user")
    logger.info(f"Deleted user {user_id}")
