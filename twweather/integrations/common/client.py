"""
Base API client.

Provides shared functionality for the open data API clients:
- httpx.AsyncClient lifecycle management
- Async context manager support
- Mapping of transport failures and timeouts to integration errors
- Pydantic response decoding helpers
"""

from typing import Any, ClassVar, Self, TypeVar

import httpx
import structlog
from pydantic import BaseModel

from .exceptions import IntegrationConnectionError

logger = structlog.get_logger()

T = TypeVar("T", bound=BaseModel)

DEFAULT_TIMEOUT = 10.0


class BaseAPIClient:
    """
    Base class for API clients using httpx.

    Subclasses set `base_url` and the exception raised when the API can't be
    reached, and are meant to be used as async context managers:

        async with CWAClient(api_key=key) as client:
            records = await client.get_forecast(location_name="高雄市")
    """

    base_url: ClassVar[str]
    connection_error: ClassVar[type[IntegrationConnectionError]] = (
        IntegrationConnectionError
    )

    api_key: str
    client: httpx.AsyncClient

    def __init__(self, *, api_key: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.api_key = api_key
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def close(self) -> None:
        """Close the httpx client and release resources."""
        await self.client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _get(self, path: str, *, params: dict[str, str]) -> httpx.Response:
        try:
            response = await self.client.get(path, params=params)
        except httpx.TimeoutException as exc:
            raise self.connection_error(f"Request to {path} timed out") from exc
        except httpx.TransportError as exc:
            raise self.connection_error(f"Request to {path} failed: {exc}") from exc

        logger.debug("Got response", path=path, status_code=response.status_code)
        return response

    # ======================
    # Response decoding
    # ======================

    def _decode_json(
        self, response: httpx.Response, response_type: type[T]
    ) -> T:
        """
        Decode a JSON response into a Pydantic model.

        Uses model_validate_json for efficiency (single parse).
        """
        return response_type.model_validate_json(response.text)

    def _error_details(self, response: httpx.Response) -> Any:
        """
        The body of an error response, decoded as JSON if possible.
        """
        try:
            return response.json()
        except ValueError:
            return response.text
