"""
Ptero-Admin Request
Contains the AdminRequester class, the single place where requests to the
Application API are built, sent and mapped to results or errors.
"""

import httpx, logging
from typing import Optional, Dict, Any
from .config import AdminConfig
from .errors import (
    PanelError, NotFoundError, ForbiddenError, PanelServerError, NotConfiguredError,
    NOT_FOUND_MESSAGE, FORBIDDEN_MESSAGE, SERVER_ERROR_MESSAGE, NOT_CONFIGURED_MESSAGE,
)

logger = logging.getLogger("ptero_admin.request")

MAX_REDIRECTS = 3


def _error_detail(response: httpx.Response) -> str:
    """Pulls the first error detail out of a panel error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:500]
    if isinstance(body, dict):
        errors = body.get("errors") or []
        if errors and isinstance(errors[0], dict):
            return str(errors[0].get("detail") or errors[0].get("code") or "")
    return ""


def raise_for_status(response: httpx.Response) -> None:
    """Maps an error status to the matching PanelError subclass."""
    status = response.status_code
    if status == 404:
        raise NotFoundError(NOT_FOUND_MESSAGE, status_code=404)
    if status == 403:
        raise ForbiddenError(FORBIDDEN_MESSAGE, status_code=403)
    if status == 500:
        raise PanelServerError(SERVER_ERROR_MESSAGE, status_code=500)
    if status >= 400:
        raise PanelError(
            f"Request failed with status code {status}",
            status_code=status,
            detail=_error_detail(response),
        )


class AdminRequester:
    def __init__(self, config: Optional[AdminConfig] = None):
        self.config = config
        self._session: Optional[httpx.AsyncClient] = None

    @property
    def configured(self) -> bool:
        return self.config is not None

    async def configure(self, config: AdminConfig):
        """Stores new credentials, closing the session built for the old ones."""
        await self.close()
        self.config = config

    @property
    def session(self) -> httpx.AsyncClient:
        if self.config is None:
            raise NotConfiguredError(NOT_CONFIGURED_MESSAGE)
        if self._session is None:
            self._session = httpx.AsyncClient(
                headers=self.config.headers,
                timeout=self.config.timeout,
                follow_redirects=True,
                max_redirects=MAX_REDIRECTS,
            )
        return self._session

    async def request(self, method: str, path: str, **kwargs) -> Optional[Any]:
        """Sends one request and returns the decoded body, or None for an empty one."""
        session = self.session
        full_url = f"{self.config.host}{path}"
        logger.debug(f"{method} {full_url}")

        try:
            resp = await session.request(method, full_url, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"Application API request failed for {method} {path}: {e}")
            raise PanelError(str(e) or type(e).__name__) from e

        raise_for_status(resp)

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise PanelError(
                "Panel returned a response that is not JSON",
                status_code=resp.status_code,
                detail=resp.text[:500],
            ) from e

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        return await self.request("POST", path, json={} if data is None else data)

    async def patch(self, path: str, data: Dict[str, Any]) -> Optional[Any]:
        return await self.request("PATCH", path, json=data)

    async def delete(self, path: str) -> Optional[Any]:
        return await self.request("DELETE", path)

    async def close(self):
        """Closes the httpx session."""
        if self._session:
            await self._session.aclose()
            self._session = None
