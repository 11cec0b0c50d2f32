"""
Anthropic Messages API client for think_tool.
"""
import logging
import time
from typing import Any, Optional

import httpx

from .base import APIClient, ClientConfig
from ..constants import (
    ANTHROPIC_API_URL,
    ANTHROPIC_API_VERSION,
    API_KEY_ENV_VAR,
    DEFAULT_TIMEOUT_SECONDS,
)
from ..errors import APIError, ConfigError


logger = logging.getLogger(__name__)


class AnthropicClient(APIClient):
    """
    Client for the Anthropic Messages API.

    Opens a fresh connection per request, so one instance can serve
    concurrent conversations.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize the Anthropic client.

        Args:
            api_key: Anthropic API key
            base_url: Endpoint override, mostly for tests
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        config = self._default_config()
        if api_key:
            config.api_key = api_key
        if base_url:
            config.base_url = base_url
        super().__init__(config)
        self._transport = transport

    def _default_config(self) -> ClientConfig:
        return ClientConfig(
            name="Anthropic",
            base_url=ANTHROPIC_API_URL,
            api_version=ANTHROPIC_API_VERSION,
        )

    def _build_headers(self) -> dict[str, str]:
        headers = super()._build_headers()
        headers["x-api-key"] = self._api_key or ""
        headers["anthropic-version"] = self._config.api_version
        return headers

    async def send_request(
        self,
        payload: dict[str, Any],
        timeout: Optional[float] = None,
    ) -> bytes:
        """POST a request body to the Messages endpoint."""
        if not self._api_key:
            raise ConfigError(
                f"API key not found. Set it using the --apikey flag or {API_KEY_ENV_VAR} environment variable",
                key=API_KEY_ENV_VAR,
            )

        timeout = timeout if timeout is not None else DEFAULT_TIMEOUT_SECONDS
        start_time = time.perf_counter()

        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.post(
                self._config.base_url,
                headers=self._build_headers(),
                json=payload,
                timeout=timeout,
            )

        latency_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(f"{self.name} responded {response.status_code} in {latency_ms:.0f}ms")

        if response.status_code != 200:
            raise APIError(response.status_code, response.text)
        return response.content
