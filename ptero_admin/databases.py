"""
Ptero-Admin Databases
Contains the DatabasesAPI class for the /api/application/servers/{id}/databases endpoints.
"""

import logging
from typing import List
from .request import AdminRequester
from .models import Database
from .errors import ForbiddenError, ValidationError
from .validation import is_int, require_id, require_str

logger = logging.getLogger("ptero_admin.databases")

INTERNAL_ID_MESSAGE = "Internal ID must be a number"
DATABASE_ID_MESSAGE = "Database ID must be a number"

CREATE_FORBIDDEN_MESSAGE = (
    "Request failed with status code 403\n"
    "Possible reasons: invalid API key, reached limit of databases for that server, not your server"
)


class DatabasesAPI:
    def __init__(self, requester: AdminRequester):
        self.requester = requester

    @staticmethod
    def _base(server_id) -> str:
        return f"/api/application/servers/{require_id(server_id, INTERNAL_ID_MESSAGE)}/databases"

    async def get_all_databases(self, server_id) -> List[Database]:
        """Gets every database belonging to a server."""
        data = await self.requester.get(self._base(server_id))
        return [Database(item) for item in (data or {}).get('data', [])]

    async def get_database(self, server_id, database_id) -> Database:
        base = self._base(server_id)
        db_id = require_id(database_id, DATABASE_ID_MESSAGE)
        data = await self.requester.get(f"{base}/{db_id}")
        return Database(data)

    async def create_database(self, server_id, database: str, host: int, remote: str) -> Database:
        """
        Creates a database for a server.

        Args:
            server_id: Internal ID of the server.
            database: Database name. The panel prefixes it with s<server_id>_.
            host: ID of the database host to create it on.
            remote: Remote connection rule, "%" allows any address.
        """
        base = self._base(server_id)
        require_str(database, "Database name must be a string")
        if not is_int(host) or not host:
            raise ValidationError("Database host must be a integer")
        require_str(remote, "Database remote connection rule must be a string")

        try:
            data = await self.requester.post(base, {"database": database, "remote": remote, "host": host})
        except ForbiddenError as e:
            raise ForbiddenError(CREATE_FORBIDDEN_MESSAGE, status_code=403) from e

        created = Database(data)
        logger.info(f"Created database '{created.database}' on host {host}")
        return created

    async def reset_database_password(self, server_id, database_id) -> str:
        base = self._base(server_id)
        db_id = require_id(database_id, DATABASE_ID_MESSAGE)
        await self.requester.post(f"{base}/{db_id}/reset-password")
        return "Successfully reset the database password"

    async def delete_database(self, server_id, database_id) -> str:
        base = self._base(server_id)
        db_id = require_id(database_id, DATABASE_ID_MESSAGE)
        await self.requester.delete(f"{base}/{db_id}")
        logger.info(f"Deleted database {db_id}")
        return "Successfully deleted the database"
