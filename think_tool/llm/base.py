"""
Base classes for API clients in think_tool.
Defines the transport interface the conversation orchestrator depends on.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class ClientConfig:
    """Configuration for an API client."""
    name: str
    base_url: str
    api_key: Optional[str] = None
    api_version: str = ""


class APIClient(ABC):
    """
    Abstract base class for API clients.

    A client sends one JSON request body and returns the raw response bytes.
    Failures are raised, never returned: APIError for non-200 responses,
    httpx errors for network problems, ConfigError for missing credentials.
    """

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        """
        Initialize the client.

        Args:
            config: Client configuration
        """
        self._config = config or self._default_config()
        self._api_key = self._config.api_key
        self._headers: dict[str, str] = {}

    @abstractmethod
    def _default_config(self) -> ClientConfig:
        """
        Get the default configuration for this client.

        Returns:
            Default ClientConfig
        """
        pass

    @property
    def name(self) -> str:
        """Client name."""
        return self._config.name

    @property
    def base_url(self) -> str:
        """Endpoint URL."""
        return self._config.base_url

    @property
    def api_key(self) -> Optional[str]:
        """API key."""
        return self._api_key

    @abstractmethod
    async def send_request(
        self,
        payload: dict[str, Any],
        timeout: Optional[float] = None,
    ) -> bytes:
        """
        Send a request body and return the raw response.

        Args:
            payload: JSON-serializable request body
            timeout: Seconds left before the caller's deadline

        Returns:
            Response body bytes
        """
        pass

    def _build_headers(self) -> dict[str, str]:
        """Build request headers."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        headers.update(self._headers)
        return headers

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url})"
