"""
Ptero-Admin Package
An asynchronous wrapper for the Pterodactyl Panel Application API.
"""

from .control import PteroAdmin, LoginStatus
from .config import AdminConfig, clean_host
from .request import AdminRequester
from .servers import ServersAPI
from .databases import DatabasesAPI
from .users import UsersAPI
from .errors import (
    PanelError, ValidationError, NotFoundError, ForbiddenError,
    PanelServerError, NotConfiguredError
)
from .models import (
    Limits, FeatureLimits, Container, Pagination,
    Server, Database, User, ServerList, UserList
)

__all__ = [
    "PteroAdmin",
    "LoginStatus",
    "AdminConfig",
    "clean_host",
    "AdminRequester",
    # Endpoint groups
    "ServersAPI",
    "DatabasesAPI",
    "UsersAPI",
    # Errors
    "PanelError",
    "ValidationError",
    "NotFoundError",
    "ForbiddenError",
    "PanelServerError",
    "NotConfiguredError",
    # Models
    "Limits",
    "FeatureLimits",
    "Container",
    "Pagination",
    "Server",
    "Database",
    "User",
    "ServerList",
    "UserList"
]
