"""Immutable per-client configuration."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from ..exceptions import ConfigurationError
from .loader import Config, config

DEFAULT_BASE_URL = "https://api.firetruck.io"
DEFAULT_API_VERSION = "v1"
DEFAULT_TIMEOUT = 10

DEFAULT_HEADERS = {
    "Accept": "application/vnd.api+json",
    "Content-Type": "application/vnd.api+json",
    "User-Agent": "Firetruck/API/Client",
}


@dataclass(frozen=True)
class ClientConfig:
    """
    Settings owned by a single client instance.

    Frozen; use the ``with_*`` helpers (or the client's setters) to derive
    an updated copy.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    headers: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    verify: bool = True
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        # Read-only view over a private copy so callers can't mutate it later
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def api_url(self) -> str:
        """Base URL including the version segment"""
        return f"{self.base_url.rstrip('/')}/{self.api_version}"

    def with_headers(self, headers: Mapping[str, str]) -> "ClientConfig":
        """Copy with ``headers`` merged over the current ones"""
        return replace(self, headers={**self.headers, **headers})

    def with_changes(self, **changes: Any) -> "ClientConfig":
        return replace(self, **changes)

    @classmethod
    def from_config(cls, api_key: str, config_obj: Config | None = None) -> "ClientConfig":
        """
        Build a ClientConfig from the YAML defaults

        Args:
            api_key: FireTruck API key
            config_obj: Config object (uses global config if None)

        Returns:
            ClientConfig populated from the ``api`` config section, falling
            back to the built-in defaults for missing keys

        Raises:
            ConfigurationError: If a configured value has the wrong type
        """
        config_obj = config_obj or config

        headers = config_obj.get("api.headers", DEFAULT_HEADERS)
        if not isinstance(headers, dict):
            raise ConfigurationError("must be a mapping", config_key="api.headers")

        timeout = config_obj.get("api.timeout", DEFAULT_TIMEOUT)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ConfigurationError("must be a number of seconds", config_key="api.timeout")

        verify = config_obj.get("api.verify", True)
        if not isinstance(verify, bool):
            raise ConfigurationError("must be true or false", config_key="api.verify")

        return cls(
            api_key=api_key,
            base_url=str(config_obj.get("api.base_url", DEFAULT_BASE_URL)),
            api_version=str(config_obj.get("api.version", DEFAULT_API_VERSION)),
            headers={str(k): str(v) for k, v in headers.items()},
            verify=verify,
            timeout=timeout,
        )
