"""Common utilities for integrations."""

from .client import BaseAPIClient
from .exceptions import IntegrationAPIError, IntegrationConnectionError
from .types import to_camel

__all__ = [
    "BaseAPIClient",
    "IntegrationAPIError",
    "IntegrationConnectionError",
    "to_camel",
]
