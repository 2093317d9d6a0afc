from typing import Any

from ..common.exceptions import IntegrationAPIError, IntegrationConnectionError


class CWAAPIError(IntegrationAPIError):
    """The CWA API returned an error response."""

    def __init__(self, status_code: int, message: str, details: Any = None) -> None:
        self.status_code = status_code
        self.message = message
        self.details = details
        super().__init__(f"HTTP {status_code}: {message}")


class CWAResponseError(IntegrationAPIError):
    """The CWA API returned a successful response we could not parse."""

    pass


class CWAConnectionError(IntegrationConnectionError):
    """The CWA API could not be reached, or did not respond in time."""

    pass
