"""
Ptero-Admin Servers
Contains the ServersAPI class for the /api/application/servers endpoints.
"""

import logging
from urllib.parse import quote
from typing import Optional, List, Dict, Any
from .request import AdminRequester
from .models import Server, ServerList
from .errors import ValidationError
from .validation import (
    is_int, is_number, is_str, is_bool, is_dict, is_list,
    require_id, require_type, require_str, require_page,
)

logger = logging.getLogger("ptero_admin.servers")

RECOMMENDED_IO = 500

INTERNAL_ID_MESSAGE = "Internal ID must be a number"


def default_deploy() -> Dict[str, Any]:
    return {"locations": [1], "dedicated_ip": False, "port_range": []}


class ServersAPI:
    def __init__(self, requester: AdminRequester):
        self.requester = requester

    # -----------------------------------------------------------------
    # GET
    # -----------------------------------------------------------------

    async def get_all_servers(self, page: Optional[int] = None, per_page: Optional[int] = None) -> ServerList:
        """Gets one page of servers on the panel together with its pagination data."""
        params: Dict[str, Any] = {}
        if require_page(page, "page") is not None:
            params['page'] = page
        if require_page(per_page, "per_page") is not None:
            params['per_page'] = per_page

        data = await self.requester.get("/api/application/servers", params=params or None)
        return ServerList(data or {})

    async def get_server_information(self, id, external: bool = False) -> Server:
        """Gets a server by its internal ID, or by its external ID when `external` is set."""
        if external:
            external_id = require_str(str(id) if is_int(id) else id, "External ID must be a non-empty string")
            path = f"/api/application/servers/external/{quote(external_id, safe='')}"
        else:
            path = f"/api/application/servers/{require_id(id, INTERNAL_ID_MESSAGE)}"

        data = await self.requester.get(path)
        return Server(data)

    # -----------------------------------------------------------------
    # POST
    # -----------------------------------------------------------------

    async def create_server(self,
                            name: str,
                            description: Optional[str],
                            user_id: int,
                            egg_id: int,
                            startup: str,
                            docker_image: str,
                            allocation_id: int,
                            start_on_completion: bool,
                            environment: Dict[str, Any],
                            memory: int,
                            disk: int,
                            cpu: int = 0,
                            swap: int = -1,
                            io: int = RECOMMENDED_IO,
                            additional_allocations: Optional[List[int]] = None,
                            databases: int = 0,
                            allocations: int = 0,
                            deploy: Optional[Dict[str, Any]] = None,
                            skip_scripts: bool = False,
                            oom_disabled: bool = True) -> Server:
        """
        Creates a new server.

        `io` is the block IO weight; the panel recommends leaving it at 500.
        `deploy` defaults to location 1, no dedicated IP and no port range.
        """
        if additional_allocations is None:
            additional_allocations = []
        if deploy is None:
            deploy = default_deploy()

        require_type(name, is_str, "Error: Server name must be a string")
        require_type(user_id, is_int, "Error: User ID must be a number")
        require_type(egg_id, is_int, "Error: Egg ID must be a number")
        require_type(startup, is_str, "Error: Startup command must be a string")
        require_type(memory, is_number, "Error: Memory allocated must be a number")
        require_type(disk, is_number, "Error: Disk space must be a number")
        require_type(docker_image, is_str, "Error: Docker image must be a string")
        require_type(allocation_id, is_int, "Error: Allocation ID must be a number")
        require_type(start_on_completion, is_bool, "Error: Start on complete setting must be a boolean")
        require_type(additional_allocations, is_list, "Error: Additional allocations must be an array")
        require_type(cpu, is_number, "Error: CPU limit must be a number")
        require_type(swap, is_number, "Error: Swap space must be a number")
        require_type(io, is_number, "Error: Block IO proportion must be a number")
        require_type(environment, is_dict, "Error: Environment variables must be in an Object")
        require_type(databases, is_int, "Error: Database allocations must be a number")
        require_type(allocations, is_int, "Error: Allocation limit must be a number")
        require_type(deploy, is_dict, "Error: Deployment settings must be in an Object")
        require_type(skip_scripts, is_bool, "Error: Skip scripts setting must be a boolean")
        require_type(oom_disabled, is_bool, "Error: OOM Killer setting must be a boolean")

        if io != RECOMMENDED_IO:
            logger.warning(f"Block IO proportion is set to {io} instead of {RECOMMENDED_IO}, I sure hope you know what you are doing")

        payload = {
            "name": name,
            "description": description,
            "startup": startup,
            "environment": environment,
            "deploy": deploy,
            "start_on_completion": start_on_completion,
            "user": user_id,
            "egg": egg_id,
            "limits": {
                "memory": memory,
                "swap": swap,
                "disk": disk,
                "io": io,
                "cpu": cpu,
            },
            "feature_limits": {
                "databases": databases,
                "allocations": allocations,
            },
            "docker_image": docker_image,
            "allocation": {
                "default": allocation_id,
                "additional": list(additional_allocations),
            },
            "skip_scripts": skip_scripts,
            "oom_disabled": oom_disabled,
        }

        data = await self.requester.post("/api/application/servers", payload)
        server = Server(data)
        logger.info(f"Created server {server.id} ('{server.name}') for user {user_id}")
        return server

    async def _server_action(self, id, action: str, message: str) -> str:
        server_id = require_id(id, INTERNAL_ID_MESSAGE)
        await self.requester.post(f"/api/application/servers/{server_id}/{action}")
        logger.debug(f"{action} accepted for server {server_id}")
        return message

    async def suspend_server(self, id) -> str:
        return await self._server_action(id, "suspend", "Successfully suspended the server")

    async def unsuspend_server(self, id) -> str:
        return await self._server_action(id, "unsuspend", "Successfully unsuspended the server")

    async def reinstall_server(self, id) -> str:
        return await self._server_action(id, "reinstall", "Successfully started to reinstall the server")

    async def rebuild_server(self, id) -> str:
        return await self._server_action(id, "rebuild", "Successfully started to rebuild the server")

    # -----------------------------------------------------------------
    # PATCH
    # -----------------------------------------------------------------

    async def update_server_details(self, id, name: str, user: int,
                                    external_id: Optional[str] = None,
                                    description: Optional[str] = None) -> Server:
        """Updates a server's name and owner, and optionally its external ID and description."""
        server_id = require_id(id, INTERNAL_ID_MESSAGE)
        require_str(name, "You must supply a valid name")
        if not is_int(user) or user <= 0:
            raise ValidationError("You must supply a valid user ID")

        payload: Dict[str, Any] = {"name": name, "user": user}
        if external_id:
            payload["external_id"] = external_id
        if description and isinstance(description, str):
            payload["description"] = description

        data = await self.requester.patch(f"/api/application/servers/{server_id}/details", payload)
        return Server(data)

    async def update_server_build_configuration(self, id, allocation_id: int,
                                                database_limit: Optional[int] = None,
                                                allocation_limit: Optional[int] = None,
                                                memory: Optional[int] = None,
                                                disk: Optional[int] = None,
                                                cpu: Optional[int] = None,
                                                swap: Optional[int] = None,
                                                io: Optional[int] = None,
                                                add_allocations: Optional[List[int]] = None,
                                                remove_allocations: Optional[List[int]] = None,
                                                oom_disabled: Optional[bool] = None) -> Server:
        """Updates a server's resource limits and allocations. Only the values given are sent."""
        server_id = require_id(id, INTERNAL_ID_MESSAGE)
        if not allocation_id:
            raise ValidationError("You must supply an allocation ID")
        require_id(allocation_id, "Allocation ID must be a number")

        payload: Dict[str, Any] = {"allocation": int(allocation_id), "feature_limits": {}}
        if database_limit is not None and is_int(database_limit):
            payload["feature_limits"]["databases"] = database_limit
        if allocation_limit is not None and is_int(allocation_limit):
            payload["feature_limits"]["allocations"] = allocation_limit

        limits = {key: value for key, value in
                  {"memory": memory, "disk": disk, "cpu": cpu, "swap": swap, "io": io}.items()
                  if is_number(value)}
        if limits:
            payload["limits"] = limits
        if add_allocations:
            payload["add_allocations"] = list(add_allocations)
        if remove_allocations:
            payload["remove_allocations"] = list(remove_allocations)
        if isinstance(oom_disabled, bool):
            payload["oom_disabled"] = oom_disabled

        data = await self.requester.patch(f"/api/application/servers/{server_id}/build", payload)
        return Server(data)

    async def update_server_startup(self, id, startup: str, environment: Dict[str, Any],
                                    egg: int, image: str, skip_scripts: bool = False) -> Server:
        """Updates a server's startup command, environment variables, egg and docker image."""
        server_id = require_id(id, INTERNAL_ID_MESSAGE)
        require_str(startup, "Startup command must be a string")
        require_type(environment, is_dict, "Environment variables must be in an Object")
        require_type(egg, is_int, "Egg ID must be a number")
        require_str(image, "Docker image must be a string")
        require_type(skip_scripts, is_bool, "Skip scripts setting must be a boolean")

        payload = {
            "startup": startup,
            "environment": environment,
            "egg": egg,
            "image": image,
            "skip_scripts": skip_scripts,
        }
        data = await self.requester.patch(f"/api/application/servers/{server_id}/startup", payload)
        return Server(data)

    # -----------------------------------------------------------------
    # DELETE
    # -----------------------------------------------------------------

    async def delete_server(self, id, force: bool = False) -> str:
        server_id = require_id(id, INTERNAL_ID_MESSAGE)
        endpoint = f"/api/application/servers/{server_id}"
        if force:
            endpoint += "/force"
        await self.requester.delete(endpoint)
        logger.info(f"Deleted server {server_id}{' (forced)' if force else ''}")
        return "Successfully deleted the server"
