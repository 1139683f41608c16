"""
Ptero-Admin Control
Contains the main PteroAdmin class, the entry point for the wrapper.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from .config import AdminConfig, DEFAULT_TIMEOUT
from .request import AdminRequester
from .errors import PanelError, NotFoundError, ForbiddenError
from .servers import ServersAPI
from .databases import DatabasesAPI
from .users import UsersAPI

logger = logging.getLogger("ptero_admin.control")

AUTH_CHECK_PATH = "/api/application/users"


@dataclass
class LoginStatus:
    logged_in: bool
    message: str

    def __bool__(self) -> bool:
        return self.logged_in


class PteroAdmin:
    def __init__(self,
                 host: Optional[str] = None,
                 api_key: Optional[str] = None,
                 timeout: float = DEFAULT_TIMEOUT):

        self.timeout = timeout
        if bool(host) != bool(api_key):
            raise ValueError("host and api_key must be given together")
        config = AdminConfig(host, api_key, timeout) if host else None

        # One requester shared by every endpoint group
        self.requester = AdminRequester(config)
        self.servers = ServersAPI(self.requester)
        self.databases = DatabasesAPI(self.requester)
        self.users = UsersAPI(self.requester)

    @classmethod
    def from_env(cls) -> "PteroAdmin":
        """Builds a wrapper from the ADMIN_HOST, ADMIN_KEY and ADMIN_TIMEOUT environment variables."""
        config = AdminConfig.from_env()
        return cls(config.host, config.api_key, config.timeout)

    @property
    def host(self) -> Optional[str]:
        return self.requester.config.host if self.requester.config else None

    @property
    def configured(self) -> bool:
        return self.requester.configured

    async def set_api_key(self, host: str, key: str) -> LoginStatus:
        """
        Stores the panel host and Application API key, then checks them
        against the panel. Failures are reported in the returned status,
        never raised.
        """
        try:
            await self.requester.configure(AdminConfig(host, key, self.timeout))
        except ValueError as e:
            return LoginStatus(False, str(e))

        try:
            await self.requester.get(AUTH_CHECK_PATH)
        except NotFoundError:
            logger.warning(f"Authentication check against {self.host} returned 404")
            return LoginStatus(False, "404 Not found, please check you have provided a valid host.")
        except ForbiddenError:
            logger.warning(f"Authentication check against {self.host} returned 403")
            return LoginStatus(False, "403 Forbidden, please check your API key is valid")
        except PanelError as e:
            logger.error(f"Authentication check against {self.host} failed: {e}")
            return LoginStatus(False, str(e))

        logger.debug(f"Authenticated against {self.host}")
        return LoginStatus(True, "Successfully authenticated")

    async def close(self):
        """Closes the httpx session."""
        await self.requester.close()

    async def __aenter__(self) -> "PteroAdmin":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
