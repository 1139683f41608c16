"""
Ptero-Admin Users
Contains the UsersAPI class for the /api/application/users endpoints.
"""

import logging
from urllib.parse import quote
from typing import Optional, Dict, Any
from .request import AdminRequester
from .models import User, UserList
from .errors import ValidationError
from .validation import is_int, is_bool, require_id, require_type, require_str, require_page

logger = logging.getLogger("ptero_admin.users")

USER_ID_MESSAGE = "User ID must be a number"


def _user_payload(email, username, first_name, last_name, password, root_admin, language, external_id) -> Dict[str, Any]:
    """Validates the user fields shared by create and update and builds the request body."""
    require_str(email, "Email must be a string")
    if "@" not in email:
        raise ValidationError("Email must be a valid email address")
    require_str(username, "Username must be a string")
    require_str(first_name, "First name must be a string")
    require_str(last_name, "Last name must be a string")

    payload: Dict[str, Any] = {
        "email": email,
        "username": username,
        "first_name": first_name,
        "last_name": last_name,
    }
    if password is not None:
        payload["password"] = require_str(password, "Password must be a string")
    if root_admin is not None:
        payload["root_admin"] = require_type(root_admin, is_bool, "Root admin setting must be a boolean")
    if language is not None:
        payload["language"] = require_str(language, "Language must be a string")
    if external_id is not None:
        payload["external_id"] = require_str(str(external_id) if is_int(external_id) else external_id,
                                             "External ID must be a non-empty string")
    return payload


class UsersAPI:
    def __init__(self, requester: AdminRequester):
        self.requester = requester

    async def get_all_users(self, page: Optional[int] = None, per_page: Optional[int] = None) -> UserList:
        """Gets one page of panel users together with its pagination data."""
        params: Dict[str, Any] = {}
        if require_page(page, "page") is not None:
            params['page'] = page
        if require_page(per_page, "per_page") is not None:
            params['per_page'] = per_page

        data = await self.requester.get("/api/application/users", params=params or None)
        return UserList(data or {})

    async def get_user(self, id, external: bool = False) -> User:
        """Gets a user by internal ID, or by external ID when `external` is set."""
        if external:
            external_id = require_str(str(id) if is_int(id) else id, "External ID must be a non-empty string")
            path = f"/api/application/users/external/{quote(external_id, safe='')}"
        else:
            path = f"/api/application/users/{require_id(id, USER_ID_MESSAGE)}"

        data = await self.requester.get(path)
        return User(data)

    async def create_user(self, email: str, username: str, first_name: str, last_name: str,
                          password: Optional[str] = None, root_admin: bool = False,
                          language: Optional[str] = None, external_id: Optional[str] = None) -> User:
        """
        Creates a panel user.

        When no password is given the panel emails the user a link to set one.
        """
        payload = _user_payload(email, username, first_name, last_name,
                                password, root_admin, language, external_id)
        data = await self.requester.post("/api/application/users", payload)
        user = User(data)
        logger.info(f"Created user {user.id} ('{user.username}')")
        return user

    async def update_user(self, id, email: str, username: str, first_name: str, last_name: str,
                          password: Optional[str] = None, root_admin: Optional[bool] = None,
                          language: Optional[str] = None, external_id: Optional[str] = None) -> User:
        """Updates a user. The panel requires email, username and both names on every update."""
        user_id = require_id(id, USER_ID_MESSAGE)
        payload = _user_payload(email, username, first_name, last_name,
                                password, root_admin, language, external_id)
        data = await self.requester.patch(f"/api/application/users/{user_id}", payload)
        return User(data)

    async def delete_user(self, id) -> str:
        user_id = require_id(id, USER_ID_MESSAGE)
        await self.requester.delete(f"/api/application/users/{user_id}")
        logger.info(f"Deleted user {user_id}")
        return "Successfully deleted the user"
