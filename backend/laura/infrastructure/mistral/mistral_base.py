"""Shared httpx plumbing for the Mistral API adapters.

Handles bearer auth, client lifecycle, and translation of transport
and HTTP failures into UpstreamError / ConfigError.
"""

import logging
from typing import Any

import httpx

from laura.domain.exceptions import ConfigError, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.mistral.ai/v1"
DEFAULT_TIMEOUT_SECONDS = 120.0
GATEWAY_ERROR = 502


class MistralHttpAdapter:
    """Base for infrastructure adapters talking to the Mistral REST API.

    Uses an injected ``httpx.AsyncClient`` when given (connection pooling,
    tests), otherwise a short-lived client per call.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self._api_key = api_key.strip()
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client
        self._timeout = timeout

    @property
    def provider_name(self) -> str:
        return "mistral"

    def _get_headers(self) -> dict[str, str]:
        """Standard headers for Mistral requests."""
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _post(self, endpoint: str, payload: dict[str, Any]) -> Any:
        """POST a JSON payload and return the decoded JSON body.

        Raises:
            ConfigError: If no API key is configured (no request is sent).
            UpstreamError: On transport failure, non-2xx status, or a non-JSON body.
        """
        if not self._api_key:
            raise ConfigError(
                provider=self.provider_name,
                message="Mistral API key missing. Set MISTRAL_API_KEY.",
            )

        url = f"{self._base_url}/{endpoint}"
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.post(url, headers=self._get_headers(), json=payload)
        except httpx.HTTPError as e:
            logger.error("Mistral %s request failed: %s", endpoint, e)
            raise UpstreamError(
                provider=self.provider_name,
                status_code=GATEWAY_ERROR,
                message=f"Request to {endpoint} failed: {type(e).__name__}",
            ) from e
        finally:
            if should_close:
                await client.aclose()

        if not response.is_success:
            self._raise_upstream_error(endpoint, response)

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                provider=self.provider_name,
                status_code=GATEWAY_ERROR,
                message=f"Invalid JSON from {endpoint}",
            ) from e

    def _raise_upstream_error(self, endpoint: str, response: httpx.Response) -> None:
        """Raise UpstreamError from a non-2xx httpx Response."""
        message = response.text[:500]
        try:
            data = response.json()
        except ValueError:
            data = None

        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, dict) and error.get("message"):
                message = str(error["message"])
            elif data.get("message"):
                message = str(data["message"])
            elif data.get("detail"):
                message = str(data["detail"])

        logger.error(
            "Mistral %s returned %d: %s", endpoint, response.status_code, message
        )
        raise UpstreamError(
            provider=self.provider_name,
            status_code=response.status_code,
            message=message or f"Mistral API error: {response.status_code}",
        )
