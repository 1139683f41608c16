"""
Ptero-Admin Config
Contains the AdminConfig credentials container and the request header constants.
"""

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

ENV_HOST = "ADMIN_HOST"
ENV_KEY = "ADMIN_KEY"
ENV_TIMEOUT = "ADMIN_TIMEOUT"

DEFAULT_TIMEOUT = 30.0

ACCEPT_HEADER = "Application/vnd.pterodactyl.v1+json"


def clean_host(host: str) -> str:
    """Removes a trailing slash from the panel URL."""
    return host[:-1] if host.endswith("/") else host


@dataclass(frozen=True)
class AdminConfig:
    """
    Credentials for the Application API.

    Attributes:
        host: Base URL of the panel, e.g. "https://panel.example.com".
              A single trailing slash is removed on creation.
        api_key: Application API key created under Admin > Application API.
        timeout: HTTP timeout in seconds applied to every request.
    """

    host: str
    api_key: str
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.host:
            raise ValueError("host cannot be empty")
        if not self.api_key:
            raise ValueError("api_key cannot be empty")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be a positive number, got {self.timeout}")
        # frozen, so bypass __setattr__ to store the cleaned value
        object.__setattr__(self, "host", clean_host(self.host))

    @property
    def headers(self) -> Dict[str, str]:
        return {
            'Authorization': f'Bearer {self.api_key}',
            'Content-Type': 'application/json',
            'Accept': ACCEPT_HEADER,
        }

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AdminConfig":
        """Builds a config from ADMIN_HOST, ADMIN_KEY and the optional ADMIN_TIMEOUT."""
        env = os.environ if environ is None else environ

        host = env.get(ENV_HOST, "").strip()
        key = env.get(ENV_KEY, "").strip()
        if not host:
            raise ValueError(f"Missing required env var: {ENV_HOST}")
        if not key:
            raise ValueError(f"Missing required env var: {ENV_KEY}")

        timeout_raw = env.get(ENV_TIMEOUT, "").strip()
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ValueError(f"Invalid {ENV_TIMEOUT} value: {timeout_raw!r}") from e

        return cls(host=host, api_key=key, timeout=timeout)
