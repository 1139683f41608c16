"""
Ptero-Admin Errors
Exceptions raised by the wrapper. Everything derives from PanelError.
"""

from dataclasses import dataclass

NOT_FOUND_MESSAGE = "404 Not found, check your host is correct"
FORBIDDEN_MESSAGE = (
    "403 Forbidden, please check your API key is correct, "
    "or that you setup permissions correctly"
)
SERVER_ERROR_MESSAGE = "500 Internal Server Error, check your server logs for the error"
NOT_CONFIGURED_MESSAGE = "API key and host have not been set"


@dataclass
class PanelError(Exception):
    """
    Raised when a request to the panel fails.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code, or 0 when no response was received.
        detail: Extra detail taken from the panel's error body, if any.
    """

    message: str
    status_code: int = 0
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message


class ValidationError(PanelError, ValueError):
    """Raised before any request is sent when an argument is invalid."""


class NotFoundError(PanelError):
    pass


class ForbiddenError(PanelError):
    pass


class PanelServerError(PanelError):
    pass


class NotConfiguredError(PanelError):
    pass
